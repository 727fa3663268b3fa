"""
Workday calendar arithmetic.

Answers whether a date is a holiday, a weekend or a workday for a project
calendar, and advances dates by a number of workdays.
"""

import logging
from datetime import date, timedelta
from typing import Optional

from gan_parser.config.settings import settings
from gan_parser.exceptions import WorkdayOverflowError
from gan_parser.parser.models import Calendar, CalendarEventType

logger = logging.getLogger(__name__)

# Indexed by date.weekday() (0=Monday)
DAYS_OF_WEEK = (
    'monday',
    'tuesday',
    'wednesday',
    'thursday',
    'friday',
    'saturday',
    'sunday',
)


def is_holiday(dt: date, calendar: Calendar) -> bool:
    """
    Check if a date is a holiday.

    An event matches when it is a holiday on the same month and day and
    either has no year (recurs yearly) or has the date's year.
    """
    return any(
        event.type == CalendarEventType.HOLIDAY
        and event.month == dt.month
        and event.day == dt.day
        and (event.year is None or event.year == dt.year)
        for event in calendar.events
    )


def is_weekend(dt: date, calendar: Calendar) -> bool:
    """Check if a date falls on a weekend day of the default week."""
    weekend_days = calendar.day_type_config.default_week.weekend_days
    return getattr(weekend_days, DAYS_OF_WEEK[dt.weekday()])


def is_workday(dt: date, calendar: Calendar) -> bool:
    """
    Check if a date counts as a workday.

    Holidays never count. Weekends count only when tasks may run on weekends.
    """
    if is_holiday(dt, calendar):
        return False
    if calendar.day_type_config.is_task_runnable_on_weekends:
        return True
    return not is_weekend(dt, calendar)


def add_workdays(
    start: date,
    days: int,
    calendar: Calendar,
    max_scan_days: Optional[int] = None,
) -> date:
    """
    Add work days to a date.

    Steps forward one calendar day at a time and counts each workday landed
    on, stopping at the `days`-th one. The start date itself is never
    counted, so `days <= 0` returns `start` unchanged.

    Args:
        start: Date to count from
        days: Number of workdays to advance
        calendar: Project calendar
        max_scan_days: Consecutive non-workdays tolerated before giving up
            (defaults to settings.MAX_WORKDAY_SCAN_DAYS)

    Raises:
        WorkdayOverflowError: If more than `max_scan_days` consecutive days
            are not workdays, or the walk runs past date.max
    """
    if days <= 0:
        return start

    if max_scan_days is None:
        max_scan_days = settings.MAX_WORKDAY_SCAN_DAYS

    current = start
    remaining = days
    idle_days = 0

    while remaining > 0:
        try:
            current += timedelta(days=1)
        except OverflowError as e:
            logger.warning(f'Workday walk from {start} ran past {date.max}')
            raise WorkdayOverflowError(
                f'Adding {days} workdays to {start.isoformat()} goes past {date.max.isoformat()}'
            ) from e

        if is_workday(current, calendar):
            remaining -= 1
            idle_days = 0
            continue

        idle_days += 1
        if idle_days > max_scan_days:
            logger.warning(
                f'No workday found in {max_scan_days} days after {current - timedelta(days=idle_days)}'
            )
            raise WorkdayOverflowError(
                f'Could not find a workday within {max_scan_days} days '
                f'while adding {days} workdays to {start.isoformat()}'
            )

    return current


def count_workdays(start: date, end: date, calendar: Calendar) -> int:
    """Count workdays between two dates (inclusive)."""
    count = 0
    current = start
    while current <= end:
        if is_workday(current, calendar):
            count += 1
        if current == end:
            break
        current += timedelta(days=1)
    return count
