"""Pytest configuration and fixtures."""
from pathlib import Path
from typing import Callable

import pytest

from gan_parser.parser.models import (
    Calendar,
    CalendarEvent,
    CalendarEventType,
    DayTypeConfiguration,
    DefaultWeek,
    WeekendDays,
)

FIXTURES_DIR = Path(__file__).parent / 'fixtures'

GAN_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project name="{name}" company="" webLink="" view-date="2024-01-01" view-index="0" gantt-divider-location="421" resource-divider-location="399" version="3.3.3312" locale="en">
    <view id="gantt-chart" zooming-state="default:3"/>
    <calendars>
        <day-types>
            <day-type id="0"/>
            <day-type id="1"/>
            <default-week id="1" name="default" {weekend}/>
            <only-show-weekends value="{only_show_weekends}"/>
        </day-types>
        {calendar_dates}
    </calendars>
    <tasks empty-milestones="true">
        {tasks}
    </tasks>
    {resources}
    <roles roleset-name="Default"/>
</project>
"""

SATURDAY_SUNDAY = 'sun="1" mon="0" tue="0" wed="0" thu="0" fri="0" sat="1"'


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample .gan files."""
    return FIXTURES_DIR


@pytest.fixture
def make_gan_document() -> Callable[..., str]:
    """Factory building a small, valid .gan document around the given fragments."""

    def _make(
        tasks: str = '',
        calendar_dates: str = '',
        weekend: str = SATURDAY_SUNDAY,
        only_show_weekends: str = 'false',
        resources: str = '',
        name: str = 'Test project',
    ) -> str:
        return GAN_TEMPLATE.format(
            name=name,
            tasks=tasks,
            calendar_dates=calendar_dates,
            weekend=weekend,
            only_show_weekends=only_show_weekends,
            resources=resources,
        )

    return _make


@pytest.fixture
def make_calendar() -> Callable[..., Calendar]:
    """Factory for calendars; Saturday and Sunday are weekend days by default."""

    def _make(
        weekend_days: WeekendDays = WeekendDays(saturday=True, sunday=True),
        events=(),
        runnable_on_weekends: bool = False,
    ) -> Calendar:
        return Calendar(
            day_type_config=DayTypeConfiguration(
                type_ids=('0', '1'),
                default_week=DefaultWeek(id='1', name='default', weekend_days=weekend_days),
                is_task_runnable_on_weekends=runnable_on_weekends,
            ),
            events=tuple(events),
        )

    return _make


@pytest.fixture
def holiday() -> Callable[..., CalendarEvent]:
    """Factory for holiday events; year=None recurs every year."""

    def _make(month: int, day: int, year=None) -> CalendarEvent:
        return CalendarEvent(month=month, day=day, type=CalendarEventType.HOLIDAY, year=year)

    return _make


@pytest.fixture
def sample_project():
    """The parsed sample-project.gan fixture."""
    from gan_parser.parser.gan_parser import load_gantt_project
    return load_gantt_project(FIXTURES_DIR / 'sample-project.gan')
