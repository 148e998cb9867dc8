"""Rupee formatting helpers (Indian lakh/crore grouping)."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

RUPEE = "₹"


def group_indian(digits: str) -> str:
    """Group a string of digits as 12,34,56,789: last three, then pairs."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(value: float, symbol: str = RUPEE) -> str:
    """Render ``value`` as e.g. ``₹11,61,695`` with no fractional digits."""
    if not math.isfinite(value):
        raise ValueError(f"cannot format non-finite amount {value!r}")

    # ROUND_HALF_UP on Decimal rounds halves away from zero.
    whole = int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if whole < 0 else ""
    return f"{sign}{symbol}{group_indian(str(abs(whole)))}"


def _trim_zeros(text: str) -> str:
    text = text.rstrip("0").rstrip(".")
    return text if text else "0"


def to_words(value: float, decimals: int = 2) -> str:
    """
    Compact Indian numbering:
      - >= 1 Cr.  (1e7)
      - >= 1 Lakh (1e5)
      - >= 1 k    (1e3)
    Below 1k the rounded integer is returned.
    """
    if not math.isfinite(value):
        raise ValueError(f"cannot describe non-finite amount {value!r}")

    negative = value < 0
    n = abs(float(value))

    if n >= 1e7:
        scaled, unit = n / 1e7, "Cr."
    elif n >= 1e5:
        scaled, unit = n / 1e5, "Lakh"
    elif n >= 1e3:
        scaled, unit = n / 1e3, "k"
    else:
        text = str(int(Decimal(str(n)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)))
        return f"-{text}" if negative and text != "0" else text

    text = _trim_zeros(f"{scaled:.{decimals}f}")
    return f"-{text} {unit}" if negative else f"{text} {unit}"
