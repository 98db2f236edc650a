"""
Presentation formatting — the only place values get rounded.

Spanish conventions: "." thousands separator, "," decimal separator,
no grouping below 10,000 (1234,50 € / 12.345,50 €).
"""

import math


def _group_es(integer_part: str) -> str:
    if len(integer_part) <= 4:
        return integer_part
    groups = []
    while integer_part:
        groups.insert(0, integer_part[-3:])
        integer_part = integer_part[:-3]
    return ".".join(groups)


def format_eur(amount, symbol: str = "€") -> str:
    """Format a number as 1.234,56 € (non-finite values come back as '-')."""
    try:
        value = float(amount)
    except (ValueError, TypeError):
        value = 0.0
    if not math.isfinite(value):
        return "-"
    sign = "-" if value < 0 else ""
    integer_part, decimals = f"{abs(value):.2f}".split(".")
    return f"{sign}{_group_es(integer_part)},{decimals} {symbol}"


def format_percentage(fraction) -> str:
    """0.35 -> '35.0%'"""
    return f"{float(fraction) * 100:.1f}%"


def format_m2(area) -> str:
    return f"{float(area):.1f} m²"
