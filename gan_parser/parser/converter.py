"""
Conversion of validated .gan elements into the domain model.

The calendar is converted first; every task and baseline task end date is
then derived from it with `add_workdays(start, duration - 1, calendar)`,
so a one-day task ends on its start date.
"""

import logging
from urllib.parse import unquote

from gan_parser.parser.calendar import add_workdays
from gan_parser.parser.models import (
    Allocation,
    Baseline,
    BaselineTask,
    Calendar,
    CalendarEvent,
    CustomProperty,
    CustomPropertyDefinition,
    DayTypeConfiguration,
    DefaultWeek,
    Dependency,
    Field,
    Option,
    Project,
    Rate,
    Resource,
    ResourceCustomProperty,
    ResourceSet,
    Role,
    RoleSet,
    Task,
    TaskPriorityType,
    TaskProperty,
    TaskSet,
    Vacation,
    View,
    WeekendDays,
)
from gan_parser.schemas.elements import (
    XMLAllocation,
    XMLBaseline,
    XMLBaselineTask,
    XMLCalendar,
    XMLCalendarEvent,
    XMLCustomProperty,
    XMLCustomPropertyDefinition,
    XMLDayTypeConfiguration,
    XMLDefaultWeek,
    XMLDependency,
    XMLField,
    XMLOption,
    XMLProject,
    XMLResource,
    XMLResourceSet,
    XMLRoleSet,
    XMLTask,
    XMLTaskProperty,
    XMLTaskSet,
    XMLVacation,
    XMLView,
)

logger = logging.getLogger(__name__)

# Value of a default-week flag marking a weekend day
WEEKEND_FLAG = 1


def convert_field(xml_field: XMLField) -> Field:
    return Field(
        id=xml_field.id,
        name=xml_field.name,
        width=xml_field.width,
        order=xml_field.order,
    )


def convert_option(xml_option: XMLOption) -> Option:
    return Option(id=xml_option.id, value=xml_option.value, text=xml_option.text)


def convert_view(xml_view: XMLView) -> View:
    return View(
        id=xml_view.id,
        zoom_state=xml_view.zooming_state,
        fields=tuple(convert_field(f) for f in xml_view.field),
        timeline=xml_view.timeline,
        options=tuple(convert_option(o) for o in xml_view.option),
    )


# ============================================================================
# Calendar
# ============================================================================

def convert_default_week(xml_default_week: XMLDefaultWeek) -> DefaultWeek:
    return DefaultWeek(
        id=xml_default_week.id,
        name=xml_default_week.name,
        weekend_days=WeekendDays(
            sunday=xml_default_week.sun == WEEKEND_FLAG,
            monday=xml_default_week.mon == WEEKEND_FLAG,
            tuesday=xml_default_week.tue == WEEKEND_FLAG,
            wednesday=xml_default_week.wed == WEEKEND_FLAG,
            thursday=xml_default_week.thu == WEEKEND_FLAG,
            friday=xml_default_week.fri == WEEKEND_FLAG,
            saturday=xml_default_week.sat == WEEKEND_FLAG,
        ),
    )


def convert_day_type_configuration(xml_config: XMLDayTypeConfiguration) -> DayTypeConfiguration:
    return DayTypeConfiguration(
        type_ids=tuple(day_type.id for day_type in xml_config.day_type),
        default_week=convert_default_week(xml_config.default_week),
        is_task_runnable_on_weekends=xml_config.only_show_weekends.value,
    )


def convert_calendar_event(xml_event: XMLCalendarEvent) -> CalendarEvent:
    return CalendarEvent(
        year=xml_event.year,
        month=xml_event.month,
        day=xml_event.date,
        type=xml_event.type,
        color=xml_event.color,
        description=xml_event.text,
    )


def convert_calendar(xml_calendar: XMLCalendar) -> Calendar:
    return Calendar(
        base_id=xml_calendar.base_id,
        day_type_config=convert_day_type_configuration(xml_calendar.day_types),
        events=tuple(convert_calendar_event(e) for e in xml_calendar.date),
    )


# ============================================================================
# Tasks
# ============================================================================

def convert_task_property(xml_property: XMLTaskProperty) -> TaskProperty:
    simple_select = xml_property.simple_select
    return TaskProperty(
        id=xml_property.id,
        name=xml_property.name,
        type=xml_property.type,
        value_type=xml_property.valuetype,
        default_value=xml_property.defaultvalue,
        calculation_selected_field=simple_select.select if simple_select else None,
    )


def convert_dependency(xml_dependency: XMLDependency) -> Dependency:
    return Dependency(
        successor_task_id=xml_dependency.id,
        constraint_type=xml_dependency.type,
        lag_in_days=xml_dependency.difference,
        hardness_type=xml_dependency.hardness,
    )


def convert_custom_property(xml_property: XMLCustomProperty) -> CustomProperty:
    return CustomProperty(property_id=xml_property.taskproperty_id, value=xml_property.value)


def convert_task(xml_task: XMLTask, calendar: Calendar) -> Task:
    """Convert a task and, recursively, its subtasks."""
    start_date = xml_task.start
    duration_in_days = xml_task.duration

    return Task(
        id=xml_task.id,
        uid=xml_task.uid,
        name=xml_task.name,
        color=xml_task.color,
        shape=xml_task.shape,
        is_milestone=xml_task.meeting,
        is_project_task=bool(xml_task.project),
        start_date=start_date,
        end_date=add_workdays(start_date, duration_in_days - 1, calendar),
        duration_in_days=duration_in_days,
        completion_percentage=xml_task.complete,
        earliest_start_date=xml_task.third_date,
        is_earliest_start_date_enabled=xml_task.third_date_constraint == 1,
        priority=xml_task.priority if xml_task.priority is not None else TaskPriorityType.NORMAL,
        web_link=unquote(xml_task.web_link) if xml_task.web_link is not None else None,
        is_expanded=xml_task.expand,
        manual_cost=xml_task.cost_manual_value,
        is_cost_calculated=bool(xml_task.cost_calculated),
        notes=xml_task.notes,
        dependencies=tuple(convert_dependency(d) for d in xml_task.depend),
        custom_properties=tuple(convert_custom_property(p) for p in xml_task.customproperty),
        subtasks=tuple(convert_task(subtask, calendar) for subtask in xml_task.task),
        legacy_fixed_start=xml_task.fixed_start,
    )


def convert_task_set(xml_task_set: XMLTaskSet, calendar: Calendar) -> TaskSet:
    task_properties = ()
    if xml_task_set.taskproperties is not None:
        task_properties = tuple(convert_task_property(p) for p in xml_task_set.taskproperties.taskproperty)

    return TaskSet(
        allow_empty_milestones=xml_task_set.empty_milestones,
        task_properties=task_properties,
        tasks=tuple(convert_task(task, calendar) for task in xml_task_set.task),
    )


# ============================================================================
# Resources
# ============================================================================

def convert_custom_property_definition(xml_definition: XMLCustomPropertyDefinition) -> CustomPropertyDefinition:
    return CustomPropertyDefinition(
        id=xml_definition.id,
        name=xml_definition.name,
        type=xml_definition.type,
        default_value=xml_definition.default_value,
        ms_project_type=xml_definition.msproject_type,
    )


def convert_resource(xml_resource: XMLResource) -> Resource:
    # `function` holds the role code as stored, including the
    # "Default:0" placeholder written for resources without a role
    return Resource(
        id=xml_resource.id,
        name=xml_resource.name,
        role=xml_resource.function,
        email=xml_resource.contacts,
        phone=xml_resource.phone,
        rate=Rate(name=xml_resource.rate.name, value=xml_resource.rate.value) if xml_resource.rate else None,
        custom_properties=tuple(
            ResourceCustomProperty(definition_id=p.definition_id, value=p.value)
            for p in xml_resource.custom_property
        ),
    )


def convert_resource_set(xml_resource_set: XMLResourceSet) -> ResourceSet:
    return ResourceSet(
        property_definitions=tuple(
            convert_custom_property_definition(d) for d in xml_resource_set.custom_property_definition
        ),
        resources=tuple(convert_resource(r) for r in xml_resource_set.resource),
    )


def convert_allocation(xml_allocation: XMLAllocation) -> Allocation:
    return Allocation(
        task_id=xml_allocation.task_id,
        resource_id=xml_allocation.resource_id,
        role=xml_allocation.function,
        is_coordinator=xml_allocation.responsible,
        workload_percentage=xml_allocation.load,
    )


def convert_vacation(xml_vacation: XMLVacation) -> Vacation:
    return Vacation(
        resource_id=xml_vacation.resourceid,
        start_date=xml_vacation.start,
        end_date=xml_vacation.end,
    )


# ============================================================================
# Baselines and roles
# ============================================================================

def convert_baseline_task(xml_baseline_task: XMLBaselineTask, calendar: Calendar) -> BaselineTask:
    start_date = xml_baseline_task.start
    duration_in_days = xml_baseline_task.duration

    return BaselineTask(
        id=xml_baseline_task.id,
        start_date=start_date,
        end_date=add_workdays(start_date, duration_in_days - 1, calendar),
        duration_in_days=duration_in_days,
        is_milestone=xml_baseline_task.meeting,
        is_summary=xml_baseline_task.super_,
    )


def convert_baseline(xml_baseline: XMLBaseline, calendar: Calendar) -> Baseline:
    return Baseline(
        name=xml_baseline.name,
        tasks=tuple(convert_baseline_task(t, calendar) for t in xml_baseline.previous_task),
    )


def convert_role_set(xml_role_set: XMLRoleSet) -> RoleSet:
    return RoleSet(
        name=xml_role_set.roleset_name,
        roles=tuple(Role(id=role.id, name=role.name) for role in xml_role_set.role),
    )


# ============================================================================
# Project
# ============================================================================

def convert_to_project(xml_project: XMLProject) -> Project:
    """
    Convert a validated <project> element into a Project.

    Missing optional containers (resources, allocations, vacations,
    baselines) become empty collections.
    """
    calendar = convert_calendar(xml_project.calendars)
    task_set = convert_task_set(xml_project.tasks, calendar)

    resource_set = ResourceSet()
    if xml_project.resources is not None:
        resource_set = convert_resource_set(xml_project.resources)

    allocations = ()
    if xml_project.allocations is not None:
        allocations = tuple(convert_allocation(a) for a in xml_project.allocations.allocation)

    vacations = ()
    if xml_project.vacations is not None:
        vacations = tuple(convert_vacation(v) for v in xml_project.vacations.vacation)

    baselines = ()
    if xml_project.previous is not None:
        baselines = tuple(convert_baseline(b, calendar) for b in xml_project.previous.previous_tasks)

    logger.debug(
        f'Converted project {xml_project.name!r}: {len(task_set.tasks)} root tasks, '
        f'{len(resource_set.resources)} resources, {len(baselines)} baselines'
    )

    return Project(
        name=xml_project.name,
        company=xml_project.company,
        web_link=xml_project.web_link,
        view_date=xml_project.view_date,
        view_index=xml_project.view_index,
        gantt_divider_location=xml_project.gantt_divider_location,
        resource_divider_location=xml_project.resource_divider_location,
        version=xml_project.version,
        locale=xml_project.locale,
        description=xml_project.description,
        views=tuple(convert_view(v) for v in xml_project.view),
        calendar=calendar,
        task_set=task_set,
        resource_set=resource_set,
        allocations=allocations,
        vacations=vacations,
        baselines=baselines,
        role_sets=tuple(convert_role_set(r) for r in xml_project.roles),
    )
