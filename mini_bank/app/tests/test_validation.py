from decimal import Decimal

import pytest

from ..core.errors import (
    DuplicateAccountError,
    InsufficientBalanceError,
    InvalidAmountError,
)
from ..services import money
from ..services.validation import (
    ensure_account_number_unique,
    ensure_opening_balance,
    ensure_positive_amount,
    ensure_sufficient_balance,
)


@pytest.mark.parametrize("amount", [Decimal("0"), Decimal("0.00"), Decimal("-0.01"), Decimal("-100")])
def test_non_positive_amount_is_invalid(amount: Decimal) -> None:
    with pytest.raises(InvalidAmountError):
        ensure_positive_amount(amount)


def test_smallest_positive_amount_is_accepted() -> None:
    ensure_positive_amount(Decimal("0.000000001"))


def test_balance_below_amount_is_insufficient() -> None:
    with pytest.raises(InsufficientBalanceError):
        ensure_sufficient_balance(Decimal("100.00"), Decimal("100.01"))


def test_balance_equal_to_amount_is_sufficient() -> None:
    ensure_sufficient_balance(Decimal("100.00"), Decimal("100"))


def test_existing_account_number_is_duplicate() -> None:
    with pytest.raises(DuplicateAccountError):
        ensure_account_number_unique(True)
    ensure_account_number_unique(False)


@pytest.mark.parametrize(
    "amount",
    [
        Decimal("0.0000000001"),
        Decimal("1.0000000001"),
        Decimal("1e1000000"),
        Decimal("100000000000000000000000000000"),
        Decimal("NaN"),
        Decimal("Infinity"),
    ],
)
def test_amount_the_balance_column_cannot_hold_is_invalid(amount: Decimal) -> None:
    with pytest.raises(InvalidAmountError):
        ensure_positive_amount(amount)


def test_widest_storable_amount_is_accepted() -> None:
    ensure_positive_amount(Decimal("99999999999999999999999999999.999999999"))
    # Trailing zeros past the ninth place do not change the value.
    ensure_positive_amount(Decimal("1.000000000000"))


def test_opening_balance_may_be_zero_but_not_negative() -> None:
    ensure_opening_balance(Decimal("0"))
    with pytest.raises(InvalidAmountError):
        ensure_opening_balance(Decimal("-0.01"))
    with pytest.raises(InvalidAmountError):
        ensure_opening_balance(Decimal("0.0000000001"))


def test_add_and_subtract_are_exact_beyond_default_precision() -> None:
    balance = Decimal("12345678901234567890.123456789")

    assert money.add(balance, Decimal("1")) == Decimal("12345678901234567891.123456789")
    assert money.subtract(money.add(balance, Decimal("1")), Decimal("1")) == balance


def test_add_past_the_widest_balance_is_invalid() -> None:
    with pytest.raises(InvalidAmountError):
        money.add(Decimal("99999999999999999999999999999.999999999"), Decimal("0.000000001"))
