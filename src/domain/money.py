"""
Currency formatting for order amounts.

Amounts are printed the way the storefront prints them: Indian digit
grouping (last three digits, then pairs), at most three fraction digits,
trailing fractional zeros dropped.

    >>> format_amount(Decimal("100000"))
    '1,00,000'
    >>> format_amount(Decimal("1234.50"))
    '1,234.5'
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

MAX_FRACTION_DIGITS = 3


def group_indian(digits: str) -> str:
    """Insert Indian-style grouping separators into a string of digits."""
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)

    return ",".join(groups + [tail])


def format_amount(amount: Decimal | int | float) -> str:
    """
    Format a number with Indian digit grouping.

    Args:
        amount: The amount to format

    Returns:
        Grouped number without currency symbol, e.g. "12,34,567.89"
    """
    value = Decimal(str(amount))
    # Precision must cover every integer digit plus the kept fraction digits
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + MAX_FRACTION_DIGITS + 2)
        value = value.quantize(
            Decimal(1).scaleb(-MAX_FRACTION_DIGITS), rounding=ROUND_HALF_UP
        )
        sign = "-" if value < 0 else ""
        integer_part, _, fraction_part = f"{abs(value):f}".partition(".")
    fraction_part = fraction_part.rstrip("0")

    formatted = group_indian(integer_part)
    if fraction_part:
        formatted = f"{formatted}.{fraction_part}"

    # Avoid "-0" after rounding tiny negatives
    if formatted == "0":
        sign = ""
    return f"{sign}{formatted}"


def format_currency(amount: Decimal | int | float, symbol: str = "₹") -> str:
    """Format an amount prefixed with the currency symbol."""
    return f"{symbol}{format_amount(amount)}"
