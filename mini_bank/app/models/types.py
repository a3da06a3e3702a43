"""Column types for monetary values.

Balances must round-trip through the database without rounding. Databases
with a native decimal type get ``Numeric(38, 9)``; SQLite would convert that
through ``float``, so there the value is kept as its decimal string instead.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import Numeric, String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator, TypeEngine


MONEY_PRECISION = 38
MONEY_SCALE = 9


class ExactDecimal(TypeDecorator):
    impl = Numeric(MONEY_PRECISION, MONEY_SCALE)
    cache_ok = True

    def load_dialect_impl(self, dialect: Dialect) -> TypeEngine[Any]:
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String(64))
        return dialect.type_descriptor(
            Numeric(MONEY_PRECISION, MONEY_SCALE, asdecimal=True)
        )

    def process_bind_param(
        self, value: Optional[Decimal], dialect: Dialect
    ) -> Any:
        if value is None:
            return None
        value = Decimal(value)
        if dialect.name == "sqlite":
            return str(value)
        return value

    def process_result_value(
        self, value: Any, dialect: Dialect
    ) -> Optional[Decimal]:
        if value is None:
            return None
        return Decimal(str(value))
