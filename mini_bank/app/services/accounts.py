from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError

from ..core.errors import (
    AccountNotFoundError,
    BankError,
    DuplicateAccountError,
    SameAccountTransferError,
)
from ..core.locks import AccountLocks, NullAccountLocks, get_account_locks
from ..models import AccountCreate, AccountModel, AccountResponse
from . import money
from .repository import AccountStore
from .validation import (
    ensure_account_number_unique,
    ensure_opening_balance,
    ensure_positive_amount,
    ensure_sufficient_balance,
)


logger = logging.getLogger(__name__)


class AccountService:
    def __init__(
        self,
        repository: AccountStore,
        locks: Optional[AccountLocks | NullAccountLocks] = None,
    ) -> None:
        self.repository = repository
        self.locks = locks if locks is not None else get_account_locks()

    # ------------------------------------------------------------------
    # Helper utilities
    # ------------------------------------------------------------------
    def _account_to_response(self, account: AccountModel) -> AccountResponse:
        return AccountResponse(
            id=account.id,
            owner_name=account.owner_name,
            account_number=account.account_number,
            branch_code=account.branch_code,
            balance=account.balance,
        )

    def _get_for_update(self, account_number: str) -> AccountModel:
        account = self.repository.find_by_account_number(
            account_number, for_update=True
        )
        if account is None:
            raise AccountNotFoundError(f"Account {account_number} not found")
        return account

    def _apply_deposit(self, account_number: str, amount: Decimal) -> AccountModel:
        ensure_positive_amount(amount)
        account = self._get_for_update(account_number)
        account.balance = money.add(account.balance, amount)
        return self.repository.save(account)

    def _apply_withdrawal(self, account_number: str, amount: Decimal) -> AccountModel:
        ensure_positive_amount(amount)
        account = self._get_for_update(account_number)
        ensure_sufficient_balance(account.balance, amount)
        account.balance = money.subtract(account.balance, amount)
        return self.repository.save(account)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def register(self, payload: AccountCreate) -> AccountResponse:
        ensure_opening_balance(payload.balance)
        ensure_account_number_unique(
            self.repository.exists_by_account_number(payload.account_number)
        )

        account = AccountModel(
            owner_name=payload.owner_name,
            account_number=payload.account_number,
            branch_code=payload.branch_code,
            balance=payload.balance,
        )
        try:
            account = self.repository.save(account)
            self.repository.commit()
        except IntegrityError as exc:
            # Another registration took the number between the check and the insert.
            self.repository.rollback()
            raise DuplicateAccountError("Account number already exists") from exc

        logger.info(
            "account.registered",
            extra={"account_id": account.id, "account_number": account.account_number},
        )
        return self._account_to_response(account)

    def list_accounts(self) -> list[AccountResponse]:
        return [self._account_to_response(a) for a in self.repository.find_all()]

    def get_account(self, account_id: int) -> AccountResponse:
        account = self.repository.find_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(f"Account {account_id} not found")
        return self._account_to_response(account)

    def get_account_by_number(self, account_number: str) -> AccountResponse:
        account = self.repository.find_by_account_number(account_number)
        if account is None:
            raise AccountNotFoundError(f"Account {account_number} not found")
        return self._account_to_response(account)

    def deposit(self, account_number: str, amount: Decimal) -> AccountResponse:
        ensure_positive_amount(amount)

        with self.locks.hold(account_number):
            try:
                account = self._apply_deposit(account_number, amount)
                self.repository.commit()
            except BankError:
                self.repository.rollback()
                raise

            logger.info(
                "account.deposit",
                extra={
                    "account_number": account_number,
                    "amount": str(amount),
                    "balance": str(account.balance),
                },
            )
            return self._account_to_response(account)

    def withdraw(self, account_number: str, amount: Decimal) -> AccountResponse:
        ensure_positive_amount(amount)

        with self.locks.hold(account_number):
            try:
                account = self._apply_withdrawal(account_number, amount)
                self.repository.commit()
            except BankError:
                self.repository.rollback()
                raise

            logger.info(
                "account.withdraw",
                extra={
                    "account_number": account_number,
                    "amount": str(amount),
                    "balance": str(account.balance),
                },
            )
            return self._account_to_response(account)

    def transfer(
        self,
        source_account_number: str,
        dest_account_number: str,
        amount: Decimal,
    ) -> Tuple[AccountResponse, AccountResponse]:
        """Move ``amount`` between two accounts in a single store transaction.

        The withdrawal re-checks positivity and sufficiency on the source.
        If the deposit step fails the withdrawal is rolled back with it.
        """
        ensure_positive_amount(amount)

        if source_account_number == dest_account_number:
            raise SameAccountTransferError("Cannot transfer to the same account")

        with self.locks.hold(source_account_number, dest_account_number):
            try:
                source = self._apply_withdrawal(source_account_number, amount)
                dest = self._apply_deposit(dest_account_number, amount)
                self.repository.commit()
            except BankError as exc:
                self.repository.rollback()
                logger.info(
                    "account.transfer.rolled_back",
                    extra={
                        "source_account_number": source_account_number,
                        "dest_account_number": dest_account_number,
                        "amount": str(amount),
                        "error": exc.code,
                    },
                )
                raise

            logger.info(
                "account.transfer",
                extra={
                    "source_account_number": source_account_number,
                    "dest_account_number": dest_account_number,
                    "amount": str(amount),
                },
            )
            return self._account_to_response(source), self._account_to_response(dest)
