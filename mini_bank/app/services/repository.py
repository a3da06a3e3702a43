from __future__ import annotations

from typing import Optional, Protocol

from sqlmodel import Session, select

from ..models import AccountModel


# Largest value a signed 64-bit INTEGER primary key can hold.
MAX_ACCOUNT_ID = 2**63 - 1


class AccountStore(Protocol):
    """Persistence the account service relies on."""

    def exists_by_account_number(self, account_number: str) -> bool: ...

    def find_by_id(self, account_id: int) -> Optional[AccountModel]: ...

    def find_by_account_number(
        self, account_number: str, *, for_update: bool = False
    ) -> Optional[AccountModel]: ...

    def find_all(self) -> list[AccountModel]: ...

    def save(self, account: AccountModel) -> AccountModel: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


class AccountRepository:
    """Thin data access layer around the SQLModel session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    # Lookups ------------------------------------------------------------
    def exists_by_account_number(self, account_number: str) -> bool:
        stmt = select(AccountModel.id).where(
            AccountModel.account_number == account_number
        )
        return self.session.exec(stmt).first() is not None

    def find_by_id(self, account_id: int) -> Optional[AccountModel]:
        if not 0 < account_id <= MAX_ACCOUNT_ID:
            return None
        return self.session.get(AccountModel, account_id)

    def find_by_account_number(
        self, account_number: str, *, for_update: bool = False
    ) -> Optional[AccountModel]:
        stmt = select(AccountModel).where(
            AccountModel.account_number == account_number
        )
        if for_update:
            stmt = stmt.with_for_update()
        return self.session.exec(stmt).first()

    def find_all(self) -> list[AccountModel]:
        stmt = select(AccountModel).order_by(AccountModel.id)
        return list(self.session.exec(stmt))

    # Writes -------------------------------------------------------------
    def save(self, account: AccountModel) -> AccountModel:
        self.session.add(account)
        self.session.flush()
        self.session.refresh(account)
        return account

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
