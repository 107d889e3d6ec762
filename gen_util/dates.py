"""Parsing of American ``month/day/year`` date strings."""

from __future__ import annotations

import re
from datetime import date

from gen_util.errors import InvalidDate
from gen_util.result import Err, Ok


_INTEGER = re.compile(r"[+-]?\d+")

INVALID_DATE_FORMAT = "invalid_date_format"
INVALID_DATE = "invalid_date"


def parse_american_date(text: str) -> Ok[date] | Err[str]:
    """Parse dates like ``4/12/2014`` (April 12th, 2014).

    Every ``/``-separated part must be a whole integer and there must be
    exactly three of them; non-integer parts are rejected, not skipped.
    """
    parts = text.split("/")
    if len(parts) != 3 or not all(_INTEGER.fullmatch(part) for part in parts):  # noqa: PLR2004
        return Err(INVALID_DATE_FORMAT)

    month, day, year = (int(part) for part in parts)
    try:
        return Ok(date(year, month, day))
    except ValueError:
        return Err(INVALID_DATE)


def parse_american_date_or_raise(text: str) -> date:
    """Raising form of ``parse_american_date``."""
    result = parse_american_date(text)
    if isinstance(result, Err):
        raise InvalidDate(text, result.error)
    return result.value
