# src/kevin/tasks/time_utils.py

from __future__ import annotations

from datetime import date, datetime

from ..core.errors import TimeParsingError

INPUT_FORMAT = "%Y-%m-%d"


def parse_date(text: str) -> date:
    """Parse a yyyy-mm-dd string; anything else raises TimeParsingError."""
    raw = (text or "").strip()
    try:
        return datetime.strptime(raw, INPUT_FORMAT).date()
    except ValueError:
        raise TimeParsingError(
            f"'{raw}' is not a valid date. Please enter the date in the format: yyyy-mm-dd"
        ) from None


def format_for_display(d: date) -> str:
    # e.g. "Oct 5 2019"; %-d is not portable, so build the day by hand.
    return f"{d.strftime('%b')} {d.day} {d.year}"


def format_for_storage(d: date) -> str:
    return d.strftime(INPUT_FORMAT)
