"""
Schema validation for the generic tree of a .gan file.

Validates the <project> node against `XMLProject` and reports every problem
found in a single pass:
  - missing required attributes or elements
  - attribute values that fail number, boolean, date or enum coercion
  - task trees nested deeper than settings.MAX_TASK_DEPTH

Nothing is returned unless the whole tree is valid.
"""

import logging
from typing import Any, List, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from gan_parser.config.settings import settings
from gan_parser.exceptions import (
    IssuePath,
    ParseError,
    SchemaValidationError,
    ValidationIssue,
)
from gan_parser.schemas.elements import XMLProject

logger = logging.getLogger(__name__)

__all__ = [
    'IssuePath',
    'ParseError',
    'SchemaValidationError',
    'ValidationIssue',
    'issues_from_pydantic',
    'prune_excessive_task_depth',
    'find_excessive_task_depth',
    'validate_project_tree',
]


def issues_from_pydantic(error: PydanticValidationError) -> List[ValidationIssue]:
    """Convert a pydantic ValidationError into issues, keeping their order."""
    return [
        ValidationIssue(
            path=tuple(detail['loc']),
            message=detail['msg'],
            input=detail.get('input'),
        )
        for detail in error.errors()
    ]


def _path_sort_key(issue: ValidationIssue) -> tuple:
    # Index parts sort numerically; ints and names never share a position
    return tuple((0, part, '') if isinstance(part, int) else (1, 0, part) for part in issue.path)


def prune_excessive_task_depth(
    project_node: Any,
    max_depth: Optional[int] = None,
) -> Tuple[Any, List[ValidationIssue]]:
    """
    Cut off tasks nested deeper than `max_depth`.

    Walks the raw tree iteratively, before pydantic recurses into it, and
    returns a copy of the project node without the over-deep subtrees along
    with one issue for each task cut off. The input tree is not modified.
    Only the task tree is copied; everything else is shared.
    """
    if max_depth is None:
        max_depth = settings.MAX_TASK_DEPTH

    if not isinstance(project_node, dict) or not isinstance(project_node.get('tasks'), dict):
        return project_node, []

    pruned = dict(project_node)
    pruned['tasks'] = dict(project_node['tasks'])

    issues = []
    stack = [(pruned['tasks'], ('tasks',), 0)]

    while stack:
        node, path, depth = stack.pop()
        children = node.get('task')
        if children is None:
            continue
        if not isinstance(children, list):
            children = [children]

        if depth + 1 > max_depth:
            for index in range(len(children)):
                issues.append(ValidationIssue(
                    path=path + ('task', index),
                    message=f'Task nesting exceeds the maximum depth of {max_depth}',
                ))
            del node['task']
            continue

        copies = [dict(child) if isinstance(child, dict) else child for child in children]
        node['task'] = copies
        for index, child in enumerate(copies):
            if isinstance(child, dict):
                stack.append((child, path + ('task', index), depth + 1))

    return pruned, issues


def find_excessive_task_depth(
    project_node: Any,
    max_depth: Optional[int] = None,
) -> List[ValidationIssue]:
    """Find tasks nested deeper than `max_depth`, one issue per task cut off."""
    return prune_excessive_task_depth(project_node, max_depth)[1]


def validate_project_tree(project_node: Any) -> XMLProject:
    """
    Validate the <project> node of a generic tree.

    Over-deep task branches are reported and left out, and the rest of the
    tree is still validated, so one failure lists every issue in path order.

    Args:
        project_node: Value stored under the "project" key of the tree

    Returns:
        Validated XMLProject

    Raises:
        SchemaValidationError: With every issue found
    """
    # <project/> arrives as "" and is missing everything, not the wrong type
    if project_node == '':
        project_node = {}

    pruned_node, depth_issues = prune_excessive_task_depth(project_node)
    if depth_issues:
        logger.warning(f'Task tree too deep: {len(depth_issues)} task(s) over the limit')

    try:
        xml_project = XMLProject.model_validate(pruned_node)
    except PydanticValidationError as e:
        issues = issues_from_pydantic(e)
        logger.warning(f'Schema validation failed with {len(issues)} issue(s)')
        if depth_issues:
            issues = sorted(depth_issues + issues, key=_path_sort_key)
        raise SchemaValidationError('.gan file could not be parsed', issues) from e

    if depth_issues:
        raise SchemaValidationError('.gan file could not be parsed', depth_issues)
    return xml_project
