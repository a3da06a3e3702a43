"""In-memory account store for service tests."""

from __future__ import annotations

import itertools
import threading
from typing import Dict, List, Optional

from ..models import AccountModel


def _copy(account: AccountModel) -> AccountModel:
    return AccountModel(**account.model_dump())


class InMemoryAccountStore:
    """Committed rows shared by every repository opened on it."""

    def __init__(self) -> None:
        self.rows: Dict[str, AccountModel] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._ids)

    def balance_of(self, account_number: str):
        return self.rows[account_number].balance


class InMemoryAccountRepository:
    """Plays the role of one session: writes stay pending until ``commit``.

    Every lookup hands out a copy, so callers mutate their own snapshot the
    way they would a freshly loaded ORM row.
    """

    def __init__(self, store: Optional[InMemoryAccountStore] = None) -> None:
        self.store = store or InMemoryAccountStore()
        self.pending: Dict[str, AccountModel] = {}
        self.saved: List[AccountModel] = []
        self.commits = 0
        self.rollbacks = 0
        self.for_update_lookups: List[str] = []

    def _current(self, account_number: str) -> Optional[AccountModel]:
        if account_number in self.pending:
            return self.pending[account_number]
        return self.store.rows.get(account_number)

    def exists_by_account_number(self, account_number: str) -> bool:
        return self._current(account_number) is not None

    def find_by_id(self, account_id: int) -> Optional[AccountModel]:
        for account in self.store.rows.values():
            if account.id == account_id:
                return _copy(account)
        return None

    def find_by_account_number(
        self, account_number: str, *, for_update: bool = False
    ) -> Optional[AccountModel]:
        if for_update:
            self.for_update_lookups.append(account_number)
        account = self._current(account_number)
        return _copy(account) if account is not None else None

    def find_all(self) -> list[AccountModel]:
        return sorted(
            (_copy(a) for a in self.store.rows.values()), key=lambda a: a.id
        )

    def save(self, account: AccountModel) -> AccountModel:
        if account.id is None:
            account.id = self.store.next_id()
        self.pending[account.account_number] = _copy(account)
        self.saved.append(_copy(account))
        return account

    def commit(self) -> None:
        self.store.rows.update(self.pending)
        self.pending.clear()
        self.commits += 1

    def rollback(self) -> None:
        self.pending.clear()
        self.rollbacks += 1
