"""Exact decimal arithmetic for balances.

A balance or amount is accepted only if the ``Numeric(38, 9)`` balance column
can hold it without rounding: at most 29 integer digits and 9 fractional
digits. Sums and differences of such values are computed with enough
precision to be exact, and ``Inexact`` is trapped so that a rounded result
can never be stored.
"""

from __future__ import annotations

from decimal import (
    Decimal,
    DecimalException,
    Inexact,
    InvalidOperation,
    Overflow,
    localcontext,
)

from ..core.errors import InvalidAmountError
from ..models.types import MONEY_PRECISION, MONEY_SCALE


MAX_INTEGER_DIGITS = MONEY_PRECISION - MONEY_SCALE
SCALE_UNIT = Decimal(1).scaleb(-MONEY_SCALE)

# Wide enough for any quantized value and for the sum of two of them.
_WORKING_PRECISION = MONEY_PRECISION + 2


def ensure_representable(value: Decimal) -> None:
    if not value.is_finite():
        raise InvalidAmountError("Amount must be a finite number")
    if value and value.adjusted() >= MAX_INTEGER_DIGITS:
        raise InvalidAmountError(
            f"Amount must have at most {MAX_INTEGER_DIGITS} integer digits"
        )
    with localcontext() as ctx:
        ctx.prec = _WORKING_PRECISION
        ctx.traps[Inexact] = True
        try:
            value.quantize(SCALE_UNIT)
        except Inexact as exc:
            raise InvalidAmountError(
                f"Amount must have at most {MONEY_SCALE} decimal places"
            ) from exc


def _exact(operation, left: Decimal, right: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = _WORKING_PRECISION
        ctx.traps[Inexact] = True
        ctx.traps[Overflow] = True
        ctx.traps[InvalidOperation] = True
        try:
            result = operation(left, right)
        except DecimalException as exc:
            raise InvalidAmountError("Amount cannot be applied to the balance") from exc
    if result and result.adjusted() >= MAX_INTEGER_DIGITS:
        raise InvalidAmountError("Resulting balance is too large")
    return result


def add(balance: Decimal, amount: Decimal) -> Decimal:
    return _exact(Decimal.__add__, balance, amount)


def subtract(balance: Decimal, amount: Decimal) -> Decimal:
    return _exact(Decimal.__sub__, balance, amount)
