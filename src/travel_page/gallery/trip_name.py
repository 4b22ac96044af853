"""Display names for trip directories named like ``2023-07-paris-france``."""

import re
from typing import List, Optional

MONTH_NAMES: List[str] = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_month(value: str) -> Optional[int]:
    match = _LEADING_INT.match(value)
    if not match:
        return None
    return int(match.group(1))


def month_name(value: str) -> str:
    """Map a month number to its English name, or return the input unchanged.

    Args:
        value: Month as text, e.g. "07".

    Returns:
        "July" for "07"; the raw value when it is not a number in 1-12.
    """
    number = _parse_month(value)
    if number is None or not 1 <= number <= 12:
        return value
    return MONTH_NAMES[number - 1]


def capitalize_words(text: str) -> str:
    """Upper-case the first character of every space-separated word."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def format_trip_name(dir_name: str) -> str:
    """Turn a ``YYYY-MM-location-words`` directory name into a display name.

    Never fails: missing parts come out as empty strings and an unknown
    month is kept verbatim.

    Args:
        dir_name: Trip directory name.

    Returns:
        Display name such as "July 2023, Paris France".
    """
    parts = dir_name.split("-")
    year = parts[0]
    month = parts[1] if len(parts) > 1 else ""
    location = " ".join(parts[2:])

    return f"{month_name(month)} {year}, {capitalize_words(location)}"
