from __future__ import annotations
from decimal import Decimal
from typing import Optional
from sqlalchemy import Column
from sqlmodel import Field, SQLModel

from .types import ExactDecimal

class Account(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    owner_name: str
    account_number: str = Field(unique=True, index=True)
    branch_code: str = ""
    balance: Decimal = Field(
        default=Decimal("0"),
        sa_column=Column(ExactDecimal(), nullable=False),
    )
