from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from functools import lru_cache


class _LockEntry:
    __slots__ = ("lock", "users")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.users = 0


class AccountLocks:
    """Per-account-number mutexes shared by every request in the process.

    Routes run in FastAPI's threadpool, so two requests touching the same
    account would otherwise read the same balance and one write would be lost.
    ``hold`` takes the locks in sorted order so that opposing transfers
    between the same pair of accounts cannot deadlock.

    An entry lives only while some thread holds or waits on it, so the map
    stays bounded by the number of in-flight operations.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, _LockEntry] = {}

    def _checkout(self, account_number: str) -> _LockEntry:
        with self._guard:
            entry = self._locks.get(account_number)
            if entry is None:
                entry = self._locks[account_number] = _LockEntry()
            entry.users += 1
            return entry

    def _release(self, account_number: str, entry: _LockEntry) -> None:
        with self._guard:
            entry.users -= 1
            if entry.users == 0:
                del self._locks[account_number]

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    @contextmanager
    def hold(self, *account_numbers: str) -> Iterator[None]:
        with ExitStack() as stack:
            for account_number in sorted(set(account_numbers)):
                entry = self._checkout(account_number)
                # Registered first so it runs after the lock is released.
                stack.callback(self._release, account_number, entry)
                stack.enter_context(entry.lock)
            yield


class NullAccountLocks:
    """Performs no locking. Concurrent updates to one account may be lost."""

    @contextmanager
    def hold(self, *account_numbers: str) -> Iterator[None]:
        yield


@lru_cache()
def get_account_locks() -> AccountLocks:
    return AccountLocks()
