class BankError(Exception):
    """Base class for failures surfaced by the account service."""

    code = "bank_error"


class DuplicateAccountError(BankError):
    """Raised when registering an account number that is already taken."""

    code = "duplicate_account"


class AccountNotFoundError(BankError):
    """Raised when an account id or account number is missing from the store."""

    code = "account_not_found"


class InvalidAmountError(BankError):
    """Raised when a deposit/withdraw/transfer amount is zero or negative."""

    code = "invalid_amount"


class InsufficientBalanceError(BankError):
    """Raised when a withdrawal/transfer would drop balance below zero."""

    code = "insufficient_balance"


class SameAccountTransferError(BankError):
    """Raised when a transfer names the same account on both sides."""

    code = "same_account_transfer"
