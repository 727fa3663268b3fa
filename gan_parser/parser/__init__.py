"""
GanttProject .gan file parsing.

This module provides:
- Domain model for projects, calendars, tasks and resources
- Workday calendar arithmetic
- XML-to-tree conversion, validation and conversion to the domain model
"""

from .models import (
    CalendarEventType,
    DependencyConstraintType,
    DependencyHardnessType,
    TaskPriorityType,
    Calendar,
    Project,
    Task,
)
from .calendar import is_holiday, is_weekend, is_workday, add_workdays, count_workdays
from .gan_parser import parse_gantt_project_xml, load_gantt_project

__all__ = [
    'CalendarEventType',
    'DependencyConstraintType',
    'DependencyHardnessType',
    'TaskPriorityType',
    'Calendar',
    'Project',
    'Task',
    'is_holiday',
    'is_weekend',
    'is_workday',
    'add_workdays',
    'count_workdays',
    'parse_gantt_project_xml',
    'load_gantt_project',
]
