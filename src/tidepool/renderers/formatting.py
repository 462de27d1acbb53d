"""Display formatting shared by the renderers.

Payload values stay numeric; these turn them into text at display time.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

NOT_AVAILABLE = "N/A"


def format_number(value: Any) -> str:
    """Integer with thousands separators; ``"0"`` for missing values."""
    if not value:
        return "0"
    try:
        return f"{int(value):,}"
    except (TypeError, ValueError):
        return str(value)


def format_measure(value: Any, decimals: int = 2) -> str:
    """Fixed-precision decimal text, or ``"N/A"`` when absent or non-numeric."""
    if value is None or value == "" or isinstance(value, bool):
        return NOT_AVAILABLE
    try:
        return f"{float(value):.{decimals}f}"
    except (TypeError, ValueError):
        return str(value)


def format_date(value: Any) -> str:
    """ISO date (or datetime) as e.g. ``Feb 1, 2024``; other text unchanged."""
    if not value:
        return ""
    text = str(value)
    try:
        parsed: date = datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return text
    return f"{parsed.strftime('%b')} {parsed.day}, {parsed.year}"
