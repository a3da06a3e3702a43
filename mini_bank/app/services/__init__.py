from .accounts import AccountService
from .repository import AccountRepository, AccountStore

__all__ = ["AccountService", "AccountRepository", "AccountStore"]
