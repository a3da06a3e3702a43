from .db import Account as AccountModel
from .schemas import (
    AccountCreate,
    AccountResponse,
    MoneyMovementRequest,
    TransferRequest,
    TransferResponse,
)

__all__ = [
    "AccountCreate",
    "AccountResponse",
    "MoneyMovementRequest",
    "TransferRequest",
    "TransferResponse",
    "AccountModel",
]
