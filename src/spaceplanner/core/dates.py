"""
Calendar date helpers shared by the catalog, window projection and output.

Dates are naive midnight datetimes written as YYYY-MM-DD.
"""

import datetime

from spaceplanner.core.constants import DATE_FORMAT
from spaceplanner.core.exceptions import DateParseError


def parse_date(text) -> datetime.datetime:
    """
    Parse a YYYY-MM-DD calendar date into a midnight datetime.

    Single-digit months and days are accepted ("2025-1-5"). ``datetime.date``
    values, as produced by YAML for unquoted dates, pass straight through.

    Raises:
        DateParseError: If the text is not a valid calendar date
    """
    if isinstance(text, datetime.datetime):
        return text
    if isinstance(text, datetime.date):
        return datetime.datetime(text.year, text.month, text.day)
    if not isinstance(text, str):
        raise DateParseError(text)
    try:
        return datetime.datetime.strptime(text.strip(), DATE_FORMAT)
    except ValueError as e:
        raise DateParseError(text) from e


def format_date(moment: datetime.datetime) -> str:
    """Render a datetime as YYYY-MM-DD."""
    return moment.strftime(DATE_FORMAT)
