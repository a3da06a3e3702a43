"""Checks run before any account is mutated. None of them touch the store."""

from __future__ import annotations

from decimal import Decimal

from ..core.errors import (
    DuplicateAccountError,
    InsufficientBalanceError,
    InvalidAmountError,
)
from .money import ensure_representable


def ensure_positive_amount(amount: Decimal) -> None:
    ensure_representable(amount)
    if amount <= 0:
        raise InvalidAmountError("Amount must be greater than zero")


def ensure_opening_balance(balance: Decimal) -> None:
    ensure_representable(balance)
    if balance < 0:
        raise InvalidAmountError("Opening balance cannot be negative")


def ensure_sufficient_balance(balance: Decimal, amount: Decimal) -> None:
    # Withdrawing the full balance is allowed.
    if balance < amount:
        raise InsufficientBalanceError("Insufficient balance")


def ensure_account_number_unique(already_exists: bool) -> None:
    if already_exists:
        raise DuplicateAccountError("Account number already exists")
