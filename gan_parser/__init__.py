"""
Parser for GanttProject .gan files.

Usage:
    from gan_parser import parse_gantt_project_xml, collect_tasks_depth_first

    project = parse_gantt_project_xml(xml_text)
    for task in collect_tasks_depth_first(project):
        print(task.name, task.start_date, task.end_date)
"""

from .exceptions import (
    GanParserError,
    XMLStructureError,
    WorkdayOverflowError,
    SchemaValidationError,
    ParseError,
    ValidationIssue,
)
from .parser import (
    parse_gantt_project_xml,
    load_gantt_project,
    is_holiday,
    is_weekend,
    is_workday,
    add_workdays,
    count_workdays,
)
from .utils.tasks import walk_tasks_depth_first, collect_tasks_depth_first, tasks_to_dataframe

__version__ = '0.1.0'

__all__ = [
    'GanParserError',
    'XMLStructureError',
    'WorkdayOverflowError',
    'SchemaValidationError',
    'ParseError',
    'ValidationIssue',
    'parse_gantt_project_xml',
    'load_gantt_project',
    'is_holiday',
    'is_weekend',
    'is_workday',
    'add_workdays',
    'count_workdays',
    'walk_tasks_depth_first',
    'collect_tasks_depth_first',
    'tasks_to_dataframe',
]
