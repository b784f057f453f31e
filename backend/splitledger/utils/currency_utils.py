from decimal import Context, Decimal, ROUND_HALF_UP

# Amounts at or below this are treated as rounding noise, never as a debt.
SETTLEMENT_THRESHOLD = 0.01

CENTS = Decimal("0.01")

# Wide enough to hold every finite float to the cent.
WIDE_CONTEXT = Context(prec=400)


def round_cents(amount: float) -> float:
    """
    Round a float to 2 decimal places, half away from zero.

    Rounding is done on the shortest decimal representation of the float
    (``repr``), so values such as 2.675 round to 2.68 the way a person reading
    the number would expect, rather than to 2.67 as ``round()`` does because of
    the underlying binary value.
    """
    return float(Decimal(repr(amount)).quantize(CENTS, rounding=ROUND_HALF_UP, context=WIDE_CONTEXT))


def is_significant(amount: float) -> bool:
    """True when an already-rounded amount is large enough to emit as a transfer."""
    return amount > SETTLEMENT_THRESHOLD


def equal_share(amount: float, participant_count: int) -> float:
    """
    Unrounded equal share of an expense.
    No remainder redistribution is done; drift stays well below SETTLEMENT_THRESHOLD.
    """
    return amount / participant_count
