"""
Input schemas for .gan files.

This module defines Pydantic models for every element of a GanttProject
file and coerces the string-typed XML attributes into typed values.

Usage:
    from gan_parser.schemas import validate_project_tree, SchemaValidationError

    try:
        xml_project = validate_project_tree(tree['project'])
    except SchemaValidationError as e:
        for issue in e.issues:
            print(issue)
"""

from .elements import XMLProject, XMLTask
from .validator import (
    validate_project_tree,
    find_excessive_task_depth,
    prune_excessive_task_depth,
    ValidationIssue,
    SchemaValidationError,
    ParseError,
)

__all__ = [
    'XMLProject',
    'XMLTask',
    'validate_project_tree',
    'find_excessive_task_depth',
    'prune_excessive_task_depth',
    'ValidationIssue',
    'SchemaValidationError',
    'ParseError',
]
