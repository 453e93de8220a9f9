from decimal import Decimal, ROUND_HALF_UP, getcontext
from pool_ledger.core.config import settings

getcontext().prec = 28
CENTS = Decimal("0.01")


def qround(d: Decimal) -> Decimal:
    rounded = d.quantize(CENTS, rounding=ROUND_HALF_UP)
    # a negative residual under half a cent must not come out as -0.00
    return rounded if rounded else abs(rounded)


def to_decimal(x) -> Decimal:
    # str() first so 0.1 stays 0.1 instead of its binary expansion
    if isinstance(x, Decimal):
        return x
    return Decimal(str(x))


def is_negligible(d: Decimal, tolerance: Decimal | None = None) -> bool:
    """
    True when the amount is within rounding noise of zero.
    """
    if tolerance is None:
        tolerance = settings.CURRENCY_TOLERANCE
    return abs(d) < tolerance
