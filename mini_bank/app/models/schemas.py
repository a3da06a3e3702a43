from decimal import Decimal

from pydantic import BaseModel, Field

class AccountCreate(BaseModel):
    owner_name: str = Field(..., min_length=1, description="Name of the account holder")
    account_number: str = Field(..., min_length=1, description="Externally visible account number")
    branch_code: str = Field(default="", description="Branch the account is held at")
    balance: Decimal = Field(default=Decimal("0"), ge=0, description="Opening balance")

class AccountResponse(BaseModel):
    id: int
    owner_name: str
    account_number: str
    branch_code: str
    balance: Decimal

class MoneyMovementRequest(BaseModel):
    # Positivity is checked by the service so it surfaces as invalid_amount.
    amount: Decimal = Field(..., description="Amount to move, must be greater than zero")

class TransferRequest(BaseModel):
    source_account_number: str
    dest_account_number: str
    amount: Decimal

class TransferResponse(BaseModel):
    source: AccountResponse
    dest: AccountResponse
    amount: Decimal
