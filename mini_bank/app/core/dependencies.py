from fastapi import Depends
from sqlmodel import Session

from ..services import AccountRepository, AccountService
from .db import get_session
from .locks import get_account_locks

def get_account_service(session: Session = Depends(get_session)) -> AccountService:
    repository = AccountRepository(session)
    return AccountService(repository, locks=get_account_locks())
