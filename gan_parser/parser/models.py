"""
Domain model for GanttProject projects.

Defines enums for the format's coded attributes and frozen dataclasses for
every element of a parsed .gan file. All dates are naive calendar dates.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class CalendarEventType(str, Enum):
    """Kinds of calendar events. Only holidays affect scheduling."""
    HOLIDAY = "HOLIDAY"
    WORKING_DAY = "WORKING_DAY"
    NEUTRAL = "NEUTRAL"


class DependencyConstraintType(str, Enum):
    """Dependency constraint codes as stored in the `type` attribute."""
    START_START = "1"
    FINISH_START = "2"
    FINISH_FINISH = "3"
    START_FINISH = "4"


class DependencyHardnessType(str, Enum):
    """How strictly a dependency is enforced."""
    STRONG = "Strong"
    RUBBER = "Rubber"


class TaskPriorityType(str, Enum):
    """Task priority codes. The numeric codes are not ordered by priority."""
    LOWEST = "3"
    LOW = "0"
    NORMAL = "1"
    HIGH = "2"
    HIGHEST = "4"


@dataclass(frozen=True)
class Field:
    """A column shown in a chart view."""
    id: str
    name: str
    width: float
    order: float


@dataclass(frozen=True)
class Option:
    """A view option; the value lives either in an attribute or in the text."""
    id: str
    value: Optional[str] = None
    text: Optional[str] = None


@dataclass(frozen=True)
class View:
    id: str
    zoom_state: Optional[str] = None
    fields: tuple[Field, ...] = ()
    timeline: Optional[str] = None
    options: tuple[Option, ...] = ()


@dataclass(frozen=True)
class WeekendDays:
    """Which days of the week are weekend days."""
    sunday: bool = False
    monday: bool = False
    tuesday: bool = False
    wednesday: bool = False
    thursday: bool = False
    friday: bool = False
    saturday: bool = False


@dataclass(frozen=True)
class DefaultWeek:
    id: str
    name: str
    weekend_days: WeekendDays = field(default_factory=WeekendDays)


@dataclass(frozen=True)
class DayTypeConfiguration:
    """Day types in use, the default week and the weekend scheduling policy."""
    type_ids: tuple[str, ...]
    default_week: DefaultWeek
    # When true, weekends are not skipped while counting workdays
    is_task_runnable_on_weekends: bool = False


@dataclass(frozen=True)
class CalendarEvent:
    """
    A dated calendar annotation.

    An event without a year recurs every year on its month and day.
    """
    month: int
    day: int
    type: CalendarEventType
    year: Optional[int] = None
    color: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Calendar:
    day_type_config: DayTypeConfiguration
    events: tuple[CalendarEvent, ...] = ()
    base_id: Optional[str] = None


@dataclass(frozen=True)
class TaskProperty:
    """Definition of a task column, built-in ("default") or custom."""
    id: str
    name: str
    type: str
    value_type: str
    default_value: Optional[str] = None
    calculation_selected_field: Optional[str] = None


@dataclass(frozen=True)
class Dependency:
    """A link from the owning task to a successor. Purely descriptive."""
    successor_task_id: int
    constraint_type: DependencyConstraintType
    lag_in_days: int
    hardness_type: DependencyHardnessType


@dataclass(frozen=True)
class CustomProperty:
    property_id: str
    value: Optional[str] = None


@dataclass(frozen=True)
class Task:
    """
    A task and its subtasks.

    `end_date` is derived from `start_date`, `duration_in_days` and the
    project calendar by the converter; it is never read from the file.
    """

    id: int
    uid: str
    name: str
    start_date: date
    end_date: date
    duration_in_days: int
    completion_percentage: float
    is_milestone: bool = False
    is_project_task: bool = False
    color: Optional[str] = None
    shape: Optional[str] = None

    # Earliest start constraint
    earliest_start_date: Optional[date] = None
    is_earliest_start_date_enabled: bool = False

    priority: TaskPriorityType = TaskPriorityType.NORMAL
    web_link: Optional[str] = None
    is_expanded: bool = True

    # Cost
    manual_cost: Optional[float] = None
    is_cost_calculated: bool = False

    notes: Optional[str] = None
    dependencies: tuple[Dependency, ...] = ()
    custom_properties: tuple[CustomProperty, ...] = ()
    subtasks: tuple['Task', ...] = ()
    legacy_fixed_start: Optional[str] = None

    def has_subtasks(self) -> bool:
        """Check if task is a summary task."""
        return len(self.subtasks) > 0


@dataclass(frozen=True)
class TaskSet:
    allow_empty_milestones: bool
    task_properties: tuple[TaskProperty, ...] = ()
    # Root tasks only; children live under Task.subtasks
    tasks: tuple[Task, ...] = ()


@dataclass(frozen=True)
class CustomPropertyDefinition:
    id: str
    name: str
    type: str
    default_value: Optional[str] = None
    ms_project_type: Optional[str] = None


@dataclass(frozen=True)
class Rate:
    name: str
    value: float


@dataclass(frozen=True)
class ResourceCustomProperty:
    definition_id: str
    value: str


@dataclass(frozen=True)
class Resource:
    """
    A person or asset that can be allocated to tasks.

    `role` is passed through as stored. A resource without an assigned role
    carries the placeholder code "Default:0".
    """
    id: int
    name: str
    role: str
    email: str
    phone: str
    rate: Optional[Rate] = None
    custom_properties: tuple[ResourceCustomProperty, ...] = ()


@dataclass(frozen=True)
class ResourceSet:
    property_definitions: tuple[CustomPropertyDefinition, ...] = ()
    resources: tuple[Resource, ...] = ()


@dataclass(frozen=True)
class Allocation:
    """Assignment of a resource to a task."""
    task_id: int
    resource_id: int
    is_coordinator: bool
    workload_percentage: float
    role: Optional[str] = None


@dataclass(frozen=True)
class Vacation:
    """A resource's absence. Does not affect date computation."""
    resource_id: int
    start_date: date
    end_date: date


@dataclass(frozen=True)
class BaselineTask:
    id: int
    start_date: date
    end_date: date
    duration_in_days: int
    is_milestone: bool
    # True when the task had subtasks at snapshot time
    is_summary: bool


@dataclass(frozen=True)
class Baseline:
    """A named snapshot of task dates. Tasks are flat, not a tree."""
    name: str
    tasks: tuple[BaselineTask, ...] = ()


@dataclass(frozen=True)
class Role:
    id: str
    name: str


@dataclass(frozen=True)
class RoleSet:
    name: Optional[str] = None
    roles: tuple[Role, ...] = ()


@dataclass(frozen=True)
class Project:
    """Root of a parsed .gan file."""

    name: str
    company: str
    web_link: str
    view_date: date
    view_index: int
    gantt_divider_location: int
    resource_divider_location: int
    version: str
    locale: str
    calendar: Calendar
    task_set: TaskSet
    description: Optional[str] = None
    views: tuple[View, ...] = ()
    resource_set: ResourceSet = field(default_factory=ResourceSet)
    allocations: tuple[Allocation, ...] = ()
    vacations: tuple[Vacation, ...] = ()
    baselines: tuple[Baseline, ...] = ()
    role_sets: tuple[RoleSet, ...] = ()

    def get_tasks(self) -> tuple[Task, ...]:
        """Get the root tasks of the project."""
        return self.task_set.tasks
