from fastapi import APIRouter, Depends, status

from ..core.dependencies import get_account_service
from ..models import (
    AccountCreate,
    AccountResponse,
    MoneyMovementRequest,
    TransferRequest,
    TransferResponse,
)
from ..services import AccountService


router = APIRouter(prefix="/accounts", tags=["accounts"])

@router.post("", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def register_account(
    payload: AccountCreate,
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    return service.register(payload)

@router.get("", response_model=list[AccountResponse])
def list_accounts(
    service: AccountService = Depends(get_account_service),
) -> list[AccountResponse]:
    return service.list_accounts()

@router.get("/number/{account_number}", response_model=AccountResponse)
def get_account_by_number(
    account_number: str,
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    return service.get_account_by_number(account_number)

@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    return service.get_account(account_id)

@router.post("/{account_number}/deposit", response_model=AccountResponse)
def deposit(
    account_number: str,
    payload: MoneyMovementRequest,
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    return service.deposit(account_number, payload.amount)

@router.post("/{account_number}/withdraw", response_model=AccountResponse)
def withdraw(
    account_number: str,
    payload: MoneyMovementRequest,
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    return service.withdraw(account_number, payload.amount)

transfer_router = APIRouter(prefix="/transfers", tags=["transfers"])

@transfer_router.post("", response_model=TransferResponse)
def create_transfer(
    payload: TransferRequest,
    service: AccountService = Depends(get_account_service),
) -> TransferResponse:
    source, dest = service.transfer(
        payload.source_account_number,
        payload.dest_account_number,
        payload.amount,
    )
    return TransferResponse(source=source, dest=dest, amount=payload.amount)

__all__ = ["router", "transfer_router"]
