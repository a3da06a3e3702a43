from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..core.errors import (
    AccountNotFoundError,
    BankError,
    DuplicateAccountError,
    InsufficientBalanceError,
    InvalidAmountError,
    SameAccountTransferError,
)


STATUS_BY_ERROR: dict[type[BankError], int] = {
    AccountNotFoundError: status.HTTP_404_NOT_FOUND,
    DuplicateAccountError: status.HTTP_409_CONFLICT,
    InvalidAmountError: status.HTTP_400_BAD_REQUEST,
    InsufficientBalanceError: status.HTTP_400_BAD_REQUEST,
    SameAccountTransferError: status.HTTP_400_BAD_REQUEST,
}


def _error_response(status_code: int, exc: BankError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": exc.code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AccountNotFoundError)
    async def account_not_found_handler(
        request: Request, exc: AccountNotFoundError
    ) -> JSONResponse:
        return _error_response(STATUS_BY_ERROR[AccountNotFoundError], exc)

    @app.exception_handler(DuplicateAccountError)
    async def duplicate_account_handler(
        request: Request, exc: DuplicateAccountError
    ) -> JSONResponse:
        return _error_response(STATUS_BY_ERROR[DuplicateAccountError], exc)

    @app.exception_handler(InvalidAmountError)
    async def invalid_amount_handler(
        request: Request, exc: InvalidAmountError
    ) -> JSONResponse:
        return _error_response(STATUS_BY_ERROR[InvalidAmountError], exc)

    @app.exception_handler(InsufficientBalanceError)
    async def insufficient_balance_handler(
        request: Request, exc: InsufficientBalanceError
    ) -> JSONResponse:
        return _error_response(STATUS_BY_ERROR[InsufficientBalanceError], exc)

    @app.exception_handler(SameAccountTransferError)
    async def same_account_transfer_handler(
        request: Request, exc: SameAccountTransferError
    ) -> JSONResponse:
        return _error_response(STATUS_BY_ERROR[SameAccountTransferError], exc)
