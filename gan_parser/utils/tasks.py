"""Task tree traversal and tabular export."""
import logging
from typing import Callable, List, Optional

import pandas as pd

from gan_parser.parser.models import Project, Task

logger = logging.getLogger(__name__)

TaskVisitor = Callable[[Optional[Task], Task], bool]

TASK_COLUMNS = [
    'id',
    'uid',
    'name',
    'parent_id',
    'depth',
    'start_date',
    'end_date',
    'duration_in_days',
    'completion_percentage',
    'priority',
    'is_milestone',
]


def walk_tasks_depth_first(project: Project, visitor: TaskVisitor) -> None:
    """
    Visit all tasks of a project in depth-first (pre-)order.

    The visitor receives the parent task (None for root tasks) and the task.
    Returning False skips the task's subtasks.

    Example:
        walk_tasks_depth_first(project, lambda parent, task: not task.is_milestone)
    """
    # Explicit stack of (parent, task); pushed in reverse to keep sibling order
    stack = [(None, task) for task in reversed(project.task_set.tasks)]

    while stack:
        parent, task = stack.pop()
        if visitor(parent, task):
            stack.extend((task, subtask) for subtask in reversed(task.subtasks))


def collect_tasks_depth_first(project: Project) -> List[Task]:
    """Return every task of the project, flattened in depth-first order."""
    tasks = []

    def collect(parent: Optional[Task], task: Task) -> bool:
        tasks.append(task)
        return True

    walk_tasks_depth_first(project, collect)
    return tasks


def tasks_to_dataframe(project: Project) -> pd.DataFrame:
    """
    Flatten the task tree into a DataFrame, one row per task.

    Rows are in depth-first order; root tasks have depth 0 and no parent_id.

    Args:
        project: Parsed project

    Returns:
        DataFrame with TASK_COLUMNS
    """
    rows = []
    depths: dict[int, int] = {}

    def add_row(parent: Optional[Task], task: Task) -> bool:
        depth = depths[id(parent)] + 1 if parent is not None else 0
        depths[id(task)] = depth
        rows.append({
            'id': task.id,
            'uid': task.uid,
            'name': task.name,
            'parent_id': parent.id if parent is not None else None,
            'depth': depth,
            'start_date': task.start_date,
            'end_date': task.end_date,
            'duration_in_days': task.duration_in_days,
            'completion_percentage': task.completion_percentage,
            'priority': task.priority.name,
            'is_milestone': task.is_milestone,
        })
        return True

    walk_tasks_depth_first(project, add_row)
    logger.debug(f'Flattened {len(rows)} tasks')

    df = pd.DataFrame(rows, columns=TASK_COLUMNS)
    df['parent_id'] = df['parent_id'].astype('Int64')
    return df
