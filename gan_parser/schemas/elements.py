"""
Pydantic models for the elements of a .gan file.

Each model validates one element of the generic tree produced by
`gan_parser.parser.xml_tree`. Attribute fields are aliased to their
prefixed keys ("@_id"), child elements to their tag names. Models mirror
the element structure written by GanttProject's XmlSerializer; the domain
converter turns them into `gan_parser.parser.models` objects.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from gan_parser.parser.models import (
    CalendarEventType,
    DependencyConstraintType,
    DependencyHardnessType,
    TaskPriorityType,
)
from gan_parser.schemas.fields import (
    XMLBool,
    XMLDate,
    XMLInt,
    XMLList,
    XMLNumber,
    XMLOptionalElement,
    XMLText,
    XMLYear,
)


class XMLElement(BaseModel):
    """Base for all element schemas. Unknown attributes and children are ignored."""

    model_config = ConfigDict(frozen=True, extra='ignore', populate_by_name=True)


# ============================================================================
# Views
# ============================================================================

class XMLField(XMLElement):
    id: str = Field(alias='@_id')
    name: str = Field(alias='@_name')
    width: XMLNumber = Field(alias='@_width')
    order: XMLNumber = Field(alias='@_order')


class XMLOption(XMLElement):
    id: str = Field(alias='@_id')
    value: Optional[str] = Field(default=None, alias='@_value')
    text: Optional[str] = Field(default=None, alias='#text')


class XMLView(XMLElement):
    id: str = Field(alias='@_id')
    zooming_state: Optional[str] = Field(default=None, alias='@_zooming-state')
    field: XMLList[XMLField] = Field(default_factory=list, alias='field')
    timeline: Optional[XMLText] = Field(default=None, alias='timeline')
    option: XMLList[XMLOption] = Field(default_factory=list, alias='option')


# ============================================================================
# Calendar
# ============================================================================

class XMLDayType(XMLElement):
    id: str = Field(alias='@_id')


class XMLDefaultWeek(XMLElement):
    """Weekday flags: 1 marks a weekend day."""
    id: str = Field(alias='@_id')
    name: str = Field(alias='@_name')
    sun: XMLNumber = Field(alias='@_sun')
    mon: XMLNumber = Field(alias='@_mon')
    tue: XMLNumber = Field(alias='@_tue')
    wed: XMLNumber = Field(alias='@_wed')
    thu: XMLNumber = Field(alias='@_thu')
    fri: XMLNumber = Field(alias='@_fri')
    sat: XMLNumber = Field(alias='@_sat')


class XMLOnlyShowWeekends(XMLElement):
    value: XMLBool = Field(alias='@_value')


class XMLDayTypeConfiguration(XMLElement):
    day_type: XMLList[XMLDayType] = Field(default_factory=list, alias='day-type')
    default_week: XMLDefaultWeek = Field(alias='default-week')
    only_show_weekends: XMLOnlyShowWeekends = Field(alias='only-show-weekends')


class XMLCalendarEvent(XMLElement):
    year: XMLYear = Field(alias='@_year', description='Empty for yearly recurring events')
    month: XMLInt = Field(alias='@_month')
    date: XMLInt = Field(alias='@_date', description='Day of month')
    type: CalendarEventType = Field(alias='@_type')
    color: Optional[str] = Field(default=None, alias='@_color')
    text: Optional[str] = Field(default=None, alias='#text')


class XMLCalendar(XMLElement):
    base_id: Optional[str] = Field(default=None, alias='@_base-id')
    day_types: XMLDayTypeConfiguration = Field(alias='day-types')
    date: XMLList[XMLCalendarEvent] = Field(default_factory=list, alias='date')


# ============================================================================
# Tasks
# ============================================================================

class XMLCalculationSimpleSelect(XMLElement):
    select: str = Field(alias='@_select')


class XMLTaskProperty(XMLElement):
    id: str = Field(alias='@_id')
    name: str = Field(alias='@_name')
    type: str = Field(alias='@_type')
    valuetype: str = Field(alias='@_valuetype')
    defaultvalue: Optional[str] = Field(default=None, alias='@_defaultvalue')
    simple_select: Optional[XMLCalculationSimpleSelect] = Field(default=None, alias='simple-select')


class XMLTaskPropertySet(XMLElement):
    taskproperty: XMLList[XMLTaskProperty] = Field(alias='taskproperty')


class XMLDependency(XMLElement):
    id: XMLInt = Field(alias='@_id', description='Successor task id')
    type: DependencyConstraintType = Field(alias='@_type')
    difference: XMLInt = Field(alias='@_difference', description='Lag in days')
    hardness: DependencyHardnessType = Field(alias='@_hardness')


class XMLCustomProperty(XMLElement):
    taskproperty_id: str = Field(alias='@_taskproperty-id')
    value: Optional[str] = Field(default=None, alias='@_value')


class XMLTask(XMLElement):
    """A <task> element; nested <task> elements are its subtasks."""

    id: XMLInt = Field(alias='@_id')
    uid: str = Field(alias='@_uid')
    name: str = Field(alias='@_name')
    color: Optional[str] = Field(default=None, alias='@_color')
    shape: Optional[str] = Field(default=None, alias='@_shape')
    meeting: XMLBool = Field(alias='@_meeting', description='Milestone flag')
    project: Optional[XMLBool] = Field(default=None, alias='@_project')
    start: XMLDate = Field(alias='@_start')
    duration: XMLInt = Field(alias='@_duration')
    complete: XMLNumber = Field(alias='@_complete')
    third_date: Optional[XMLDate] = Field(default=None, alias='@_thirdDate')
    third_date_constraint: Optional[XMLInt] = Field(default=None, alias='@_thirdDate-constraint')
    priority: Optional[TaskPriorityType] = Field(default=None, alias='@_priority')
    web_link: Optional[str] = Field(default=None, alias='@_webLink')
    expand: XMLBool = Field(alias='@_expand')
    cost_manual_value: Optional[XMLNumber] = Field(default=None, alias='@_cost-manual-value')
    cost_calculated: Optional[XMLBool] = Field(default=None, alias='@_cost-calculated')
    fixed_start: Optional[str] = Field(default=None, alias='@_fixed-start')
    notes: Optional[XMLText] = Field(default=None, alias='notes')
    depend: XMLList[XMLDependency] = Field(default_factory=list, alias='depend')
    customproperty: XMLList[XMLCustomProperty] = Field(default_factory=list, alias='customproperty')
    task: XMLList[XMLTask] = Field(default_factory=list, alias='task')


class XMLTaskSet(XMLElement):
    empty_milestones: XMLBool = Field(alias='@_empty-milestones')
    taskproperties: XMLOptionalElement[XMLTaskPropertySet] = Field(default=None, alias='taskproperties')
    task: XMLList[XMLTask] = Field(default_factory=list, alias='task')


# ============================================================================
# Resources, allocations and vacations
# ============================================================================

class XMLCustomPropertyDefinition(XMLElement):
    id: str = Field(alias='@_id')
    name: str = Field(alias='@_name')
    type: str = Field(alias='@_type')
    default_value: Optional[str] = Field(default=None, alias='@_default-value')
    msproject_type: Optional[str] = Field(default=None, alias='@_MSPROJECT_TYPE')


class XMLRate(XMLElement):
    name: str = Field(alias='@_name')
    value: XMLNumber = Field(alias='@_value')


class XMLResourceCustomProperty(XMLElement):
    definition_id: str = Field(alias='@_definition-id')
    value: str = Field(alias='@_value')


class XMLResource(XMLElement):
    id: XMLInt = Field(alias='@_id')
    name: str = Field(alias='@_name')
    function: str = Field(alias='@_function', description='Role code, e.g. "Default:0"')
    contacts: str = Field(alias='@_contacts')
    phone: str = Field(alias='@_phone')
    rate: Optional[XMLRate] = Field(default=None, alias='rate')
    custom_property: XMLList[XMLResourceCustomProperty] = Field(default_factory=list, alias='custom-property')


class XMLResourceSet(XMLElement):
    custom_property_definition: XMLList[XMLCustomPropertyDefinition] = Field(
        default_factory=list, alias='custom-property-definition'
    )
    resource: XMLList[XMLResource] = Field(default_factory=list, alias='resource')


class XMLAllocation(XMLElement):
    task_id: XMLInt = Field(alias='@_task-id')
    resource_id: XMLInt = Field(alias='@_resource-id')
    function: Optional[str] = Field(default=None, alias='@_function')
    responsible: XMLBool = Field(alias='@_responsible')
    load: XMLNumber = Field(alias='@_load')


class XMLAllocationSet(XMLElement):
    allocation: XMLList[XMLAllocation] = Field(alias='allocation')


class XMLVacation(XMLElement):
    start: XMLDate = Field(alias='@_start')
    end: XMLDate = Field(alias='@_end')
    resourceid: XMLInt = Field(alias='@_resourceid')


class XMLVacationSet(XMLElement):
    vacation: XMLList[XMLVacation] = Field(alias='vacation')


# ============================================================================
# Baselines and roles
# ============================================================================

class XMLBaselineTask(XMLElement):
    id: XMLInt = Field(alias='@_id')
    start: XMLDate = Field(alias='@_start')
    duration: XMLInt = Field(alias='@_duration')
    meeting: XMLBool = Field(alias='@_meeting')
    super_: XMLBool = Field(alias='@_super', description='Task had subtasks')


class XMLBaseline(XMLElement):
    name: str = Field(alias='@_name')
    previous_task: XMLList[XMLBaselineTask] = Field(default_factory=list, alias='previous-task')


class XMLBaselineSet(XMLElement):
    previous_tasks: XMLList[XMLBaseline] = Field(default_factory=list, alias='previous-tasks')


class XMLRole(XMLElement):
    id: str = Field(alias='@_id')
    name: str = Field(alias='@_name')


class XMLRoleSet(XMLElement):
    roleset_name: Optional[str] = Field(default=None, alias='@_roleset-name')
    role: XMLList[XMLRole] = Field(default_factory=list, alias='role')


# ============================================================================
# Project
# ============================================================================

class XMLProject(XMLElement):
    """The <project> root element."""

    name: str = Field(alias='@_name')
    company: str = Field(alias='@_company')
    web_link: str = Field(alias='@_webLink')
    view_date: XMLDate = Field(alias='@_view-date')
    view_index: XMLInt = Field(alias='@_view-index')
    gantt_divider_location: XMLInt = Field(alias='@_gantt-divider-location')
    resource_divider_location: XMLInt = Field(alias='@_resource-divider-location')
    version: str = Field(alias='@_version')
    locale: str = Field(alias='@_locale')
    description: Optional[XMLText] = Field(default=None, alias='description')
    view: XMLList[XMLView] = Field(alias='view')
    calendars: XMLCalendar = Field(alias='calendars')
    tasks: XMLTaskSet = Field(alias='tasks')
    resources: XMLOptionalElement[XMLResourceSet] = Field(default=None, alias='resources')
    allocations: XMLOptionalElement[XMLAllocationSet] = Field(default=None, alias='allocations')
    vacations: XMLOptionalElement[XMLVacationSet] = Field(default=None, alias='vacations')
    previous: XMLOptionalElement[XMLBaselineSet] = Field(default=None, alias='previous')
    roles: XMLList[XMLRoleSet] = Field(alias='roles')


XMLTask.model_rebuild()
