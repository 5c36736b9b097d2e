from __future__ import annotations

import math
from typing import Any, Optional

BOM = "\ufeff"


def clean_cell(value: Any) -> str:
    """Trim a spreadsheet cell and drop byte-order marks."""
    if value is None:
        return ""
    return str(value).replace(BOM, "").strip()


def parse_number(value: Any) -> Optional[float]:
    """Parse a locale-formatted number ("1.234,50", "87%").

    Period is a thousands separator, comma is the decimal point. Anything that
    does not parse to a finite float yields None, never zero.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else None

    text = clean_cell(value)
    text = text.replace(".", "").replace(",", ".").replace("%", "")
    text = "".join(text.split())
    if "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def number_or_zero(value: Any) -> float:
    number = parse_number(value)
    return number if number is not None else 0.0


def format_decimal(value: float, places: int = 2) -> str:
    """2.5 -> "2,50"."""
    return f"{value:.{places}f}".replace(".", ",")
