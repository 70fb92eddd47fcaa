"""Fixed-point conversions between human amounts and on-chain integers."""

from typing import Union

from decimal import Decimal, InvalidOperation, localcontext

Numeric = Union[Decimal, int, float, str]


def to_decimal(value: Numeric) -> Decimal:
    """Convert a number to Decimal, going through str so floats keep their printed value."""
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Not a number: {value!r}")
    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return result


def _exact_precision(value: Decimal, decimals: int) -> int:
    # Enough digits that shifting the exponent never rounds
    return max(len(value.as_tuple().digits) + abs(decimals), 28)


def scale(decimals: int):
    """Returns a function that scales a number (str, int, float, or Decimal) to an integer."""

    def _scale(value: Numeric) -> int:
        amount = to_decimal(value)
        with localcontext() as ctx:
            ctx.prec = _exact_precision(amount, decimals)
            return int(amount.scaleb(decimals))

    return _scale


def descale(value: int, decimals: int) -> Decimal:
    amount = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = _exact_precision(amount, decimals)
        return amount.scaleb(-decimals)
