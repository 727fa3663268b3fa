"""
Coercing field types for .gan attribute values.

Every attribute of a .gan element arrives as a string. These Annotated types
run a `BeforeValidator` that checks the string against the format's grammar
and converts it, so pydantic reports a failure for the exact field that
holds a bad value.
"""

import re
from datetime import date
from typing import Annotated, Any, Optional, TypeVar

from pydantic import BeforeValidator

T = TypeVar('T')

DECIMAL_PATTERN = re.compile(r'^[+-]?(?:\d*\.)?\d+$')
DIGITS_PATTERN = re.compile(r'^\d+$')
ISO_DATE_PATTERN = re.compile(r'^\d{4}-(?:0[1-9]|1[0-2])-(?:[12]\d|0[1-9]|3[01])$')
# Legacy GanttCalendar format: day/month/year
SLASH_DATE_PATTERN = re.compile(r'^[1-9][0-9]*/[1-9][0-9]*/[1-9][0-9]*$')


def string_to_number(value: Any) -> Any:
    """Convert a decimal string to int, or to float when it has a fraction."""
    if not isinstance(value, str):
        raise ValueError(f'expected a numeric string, got {type(value).__name__}')
    if not DECIMAL_PATTERN.match(value):
        raise ValueError(f'{value!r} is not a decimal number')
    if '.' in value:
        return float(value)
    return int(value)


def string_to_bool(value: Any) -> bool:
    """Convert the literals "true" and "false"."""
    if value == 'true':
        return True
    if value == 'false':
        return False
    raise ValueError(f'expected "true" or "false", got {value!r}')


def string_to_date(value: Any) -> date:
    """
    Convert an ISO date (2024-01-04) or a legacy day/month/year date (4/1/2024).

    Both formats give the same naive calendar date.
    """
    if not isinstance(value, str):
        raise ValueError(f'expected a date string, got {type(value).__name__}')

    if ISO_DATE_PATTERN.match(value):
        return date.fromisoformat(value)

    if SLASH_DATE_PATTERN.match(value):
        day, month, year = (int(part) for part in value.split('/'))
        return date(year, month, day)

    raise ValueError(f'{value!r} is neither YYYY-MM-DD nor day/month/year')


def empty_string_to_none(value: Any) -> Any:
    """Treat an empty element ("") as an absent one."""
    if value == '':
        return None
    return value


def year_or_none(value: Any) -> Optional[int]:
    """Convert a calendar event year; an empty year means every year."""
    if value == '':
        return None
    if not isinstance(value, str) or not DIGITS_PATTERN.match(value):
        raise ValueError(f'year must be digits or empty, got {value!r}')
    return int(value)


def force_to_list(value: Any) -> Any:
    """Wrap a lone element in a list; repeated elements already are one."""
    if isinstance(value, list):
        return value
    return [value]


def force_to_string(value: Any) -> Any:
    """Turn a number back into text for fields that are always strings."""
    if isinstance(value, (int, float)):
        return str(value)
    return value


XMLInt = Annotated[int, BeforeValidator(string_to_number)]
XMLNumber = Annotated[float, BeforeValidator(string_to_number)]
XMLBool = Annotated[bool, BeforeValidator(string_to_bool)]
XMLDate = Annotated[date, BeforeValidator(string_to_date)]
XMLYear = Annotated[Optional[int], BeforeValidator(year_or_none)]
XMLText = Annotated[str, BeforeValidator(force_to_string)]

# Element that may repeat: always validated as a list
XMLList = Annotated[list[T], BeforeValidator(force_to_list)]
# Container element written as "" when it has no content
XMLOptionalElement = Annotated[Optional[T], BeforeValidator(empty_string_to_none)]
