from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from ..exceptions import ValidationError

CENTS = Decimal("0.01")


def to_amount(value) -> Decimal | None:
    """Normalise a price to a two-place Decimal. None passes through."""
    if value is None:
        return None
    try:
        # str() keeps 750.13 from turning into 750.12999...
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise ValidationError(f"{value!r} is not an amount") from e
    if not amount.is_finite():
        raise ValidationError(f"{value!r} is not a finite amount")
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)
