from __future__ import annotations

from decimal import Context, Decimal
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Context for Money quantization and arithmetic: 19 integer digits at the finest currency precision (18).
# Passed explicitly, the thread-local default context holds only 28 digits.
DECIMAL_CONTEXT = Context(prec=40)


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))
