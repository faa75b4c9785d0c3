"""
Date of Birth Parsing
=====================

Accepts DDMMYYYY or DD/MM/YYYY and normalises to DD/MM/YYYY.
"""

import re
from datetime import date
from typing import Optional

_DATE_PATTERNS = (
    re.compile(r'^([0-9]{2})([0-9]{2})([0-9]{4})$'),
    re.compile(r'^([0-9]{2})/([0-9]{2})/([0-9]{4})$'),
)


def format_date_ddmmyyyy(text: str) -> Optional[str]:
    """
    Normalise a date of birth.

    Args:
        text: Raw user input, e.g. "15031985" or "15/03/1985"

    Returns:
        "DD/MM/YYYY", or None if the input is malformed or not a real
        calendar date
    """
    text = text.strip()

    for pattern in _DATE_PATTERNS:
        match = pattern.match(text)
        if match:
            break
    else:
        return None

    day, month, year = match.groups()
    try:
        date(int(year), int(month), int(day))
    except ValueError:
        return None

    return f"{day}/{month}/{year}"
