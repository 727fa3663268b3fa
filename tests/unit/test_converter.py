"""
Unit tests for conversion into the domain model.

Documents use a Saturday/Sunday weekend; 2024-01-04 is a Thursday.
"""

from datetime import date

import pytest

from gan_parser.exceptions import GanParserError, WorkdayOverflowError
from gan_parser.parser.gan_parser import parse_gantt_project_xml
from gan_parser.parser.models import (
    DependencyConstraintType,
    DependencyHardnessType,
    TaskPriorityType,
)


def task_xml(task_id, start='2024-01-04', duration='1', children='', **attributes):
    attrs = {
        'id': str(task_id),
        'uid': f'uid-{task_id}',
        'name': f'task {task_id}',
        'meeting': 'false',
        'start': start,
        'duration': duration,
        'complete': '0',
        'expand': 'true',
    }
    attrs.update(attributes)
    rendered = ' '.join(f'{key}="{value}"' for key, value in attrs.items())
    return f'<task {rendered}>{children}</task>'


class TestTaskDates:
    """Test end date computation."""

    @pytest.mark.parametrize('start, duration, end', [
        ('2024-01-04', '2', date(2024, 1, 5)),
        ('2024-01-04', '1', date(2024, 1, 4)),
        ('2024-01-05', '2', date(2024, 1, 8)),
        ('2024-01-04', '0', date(2024, 1, 4)),
        ('4/1/2024', '2', date(2024, 1, 5)),
    ])
    def test_end_date(self, make_gan_document, start, duration, end):
        project = parse_gantt_project_xml(make_gan_document(tasks=task_xml(0, start=start, duration=duration)))
        assert project.task_set.tasks[0].end_date == end

    def test_holidays_extend_end_date(self, make_gan_document):
        document = make_gan_document(
            tasks=task_xml(0, start='2024-01-05', duration='2'),
            calendar_dates='<date year="2024" month="1" date="8" type="HOLIDAY"/>',
        )
        assert parse_gantt_project_xml(document).task_set.tasks[0].end_date == date(2024, 1, 9)

    def test_weekend_days_count_when_tasks_run_on_weekends(self, make_gan_document):
        document = make_gan_document(
            tasks=task_xml(0, start='2024-01-05', duration='2'),
            only_show_weekends='true',
        )
        project = parse_gantt_project_xml(document)
        assert project.calendar.day_type_config.is_task_runnable_on_weekends
        assert project.task_set.tasks[0].end_date == date(2024, 1, 6)

    def test_end_date_past_last_calendar_date(self, make_gan_document):
        document = make_gan_document(tasks=task_xml(0, start='9999-12-01', duration='100'))
        with pytest.raises(WorkdayOverflowError) as exc_info:
            parse_gantt_project_xml(document)
        assert isinstance(exc_info.value, GanParserError)

    def test_weekend_flags(self, make_gan_document):
        document = make_gan_document(weekend='sun="0" mon="1" tue="0" wed="0" thu="0" fri="0" sat="0"')
        weekend_days = parse_gantt_project_xml(document).calendar.day_type_config.default_week.weekend_days
        assert weekend_days.monday
        assert not weekend_days.saturday
        assert not weekend_days.sunday


class TestTaskAttributes:
    """Test task field mapping."""

    def test_required_fields(self, make_gan_document):
        task = parse_gantt_project_xml(make_gan_document(tasks=task_xml(7, complete='40'))).task_set.tasks[0]
        assert task.id == 7
        assert task.uid == 'uid-7'
        assert task.name == 'task 7'
        assert task.start_date == date(2024, 1, 4)
        assert task.duration_in_days == 1
        assert task.completion_percentage == 40
        assert task.is_milestone is False
        assert task.is_expanded is True

    def test_optional_fields_default(self, make_gan_document):
        task = parse_gantt_project_xml(make_gan_document(tasks=task_xml(0))).task_set.tasks[0]
        assert task.priority == TaskPriorityType.NORMAL
        assert task.color is None
        assert task.web_link is None
        assert task.notes is None
        assert task.earliest_start_date is None
        assert task.is_earliest_start_date_enabled is False
        assert task.is_project_task is False
        assert task.is_cost_calculated is False
        assert task.dependencies == ()
        assert task.subtasks == ()
        assert not task.has_subtasks()

    @pytest.mark.parametrize('code, priority', [
        ('3', TaskPriorityType.LOWEST),
        ('0', TaskPriorityType.LOW),
        ('1', TaskPriorityType.NORMAL),
        ('2', TaskPriorityType.HIGH),
        ('4', TaskPriorityType.HIGHEST),
    ])
    def test_priority_codes(self, make_gan_document, code, priority):
        task = parse_gantt_project_xml(make_gan_document(tasks=task_xml(0, priority=code))).task_set.tasks[0]
        assert task.priority == priority

    def test_web_link_is_percent_decoded(self, make_gan_document):
        document = make_gan_document(tasks=task_xml(0, webLink='https%3A%2F%2Fexample.test%2Fa%20b'))
        task = parse_gantt_project_xml(document).task_set.tasks[0]
        assert task.web_link == 'https://example.test/a b'

    def test_earliest_start(self, make_gan_document):
        document = make_gan_document(tasks=task_xml(0, **{'thirdDate': '2024-01-02', 'thirdDate-constraint': '1'}))
        task = parse_gantt_project_xml(document).task_set.tasks[0]
        assert task.earliest_start_date == date(2024, 1, 2)
        assert task.is_earliest_start_date_enabled is True

    def test_legacy_fixed_start_is_kept(self, make_gan_document):
        document = make_gan_document(tasks=task_xml(0, **{'fixed-start': 'true'}))
        assert parse_gantt_project_xml(document).task_set.tasks[0].legacy_fixed_start == 'true'

    @pytest.mark.parametrize('code, constraint', [
        ('1', DependencyConstraintType.START_START),
        ('2', DependencyConstraintType.FINISH_START),
        ('3', DependencyConstraintType.FINISH_FINISH),
        ('4', DependencyConstraintType.START_FINISH),
    ])
    def test_dependency_types(self, make_gan_document, code, constraint):
        depend = f'<depend id="1" type="{code}" difference="-1" hardness="Rubber"/>'
        document = make_gan_document(tasks=task_xml(0, children=depend) + task_xml(1))
        dependency = parse_gantt_project_xml(document).task_set.tasks[0].dependencies[0]
        assert dependency.successor_task_id == 1
        assert dependency.constraint_type == constraint
        assert dependency.lag_in_days == -1
        assert dependency.hardness_type == DependencyHardnessType.RUBBER

    def test_subtasks_keep_document_order(self, make_gan_document):
        children = task_xml(1) + task_xml(2, children=task_xml(3))
        document = make_gan_document(tasks=task_xml(0, children=children, expand='false'))
        root = parse_gantt_project_xml(document).task_set.tasks[0]
        assert root.is_expanded is False
        assert [t.id for t in root.subtasks] == [1, 2]
        assert [t.id for t in root.subtasks[1].subtasks] == [3]

    def test_task_tree_cannot_be_modified(self, make_gan_document):
        """Converted collections are tuples, so the tree stays as parsed."""
        project = parse_gantt_project_xml(make_gan_document(tasks=task_xml(0, children=task_xml(1))))
        assert isinstance(project.task_set.tasks, tuple)
        assert isinstance(project.task_set.tasks[0].subtasks, tuple)
        with pytest.raises(AttributeError):
            project.task_set.tasks.append(project.task_set.tasks[0])


class TestResourcesAndMetadata:
    """Test resource, allocation and metadata mapping."""

    RESOURCES = """
    <resources>
        <resource id="0" name="Jane" function="Default:0" contacts="jane@example.test" phone="">
            <rate name="standard" value="64"/>
        </resource>
        <resource id="1" name="Joe" function="Default:1" contacts="" phone="555"/>
    </resources>
    <allocations>
        <allocation task-id="0" resource-id="1" function="Default:0" responsible="false" load="100.0"/>
    </allocations>
    <vacations>
        <vacation start="2024-01-01" end="2024-02-01" resourceid="0"/>
    </vacations>
    """

    def test_resources(self, make_gan_document):
        project = parse_gantt_project_xml(make_gan_document(tasks=task_xml(0), resources=self.RESOURCES))
        jane, joe = project.resource_set.resources
        assert jane.role == 'Default:0'
        assert jane.email == 'jane@example.test'
        assert jane.rate.name == 'standard'
        assert jane.rate.value == 64
        assert joe.role == 'Default:1'
        assert joe.rate is None

    def test_allocations(self, make_gan_document):
        project = parse_gantt_project_xml(make_gan_document(tasks=task_xml(0), resources=self.RESOURCES))
        allocation = project.allocations[0]
        assert allocation.task_id == 0
        assert allocation.resource_id == 1
        assert allocation.role == 'Default:0'
        assert allocation.is_coordinator is False
        assert allocation.workload_percentage == 100

    def test_vacations_do_not_move_end_dates(self, make_gan_document):
        project = parse_gantt_project_xml(make_gan_document(
            tasks=task_xml(0, start='2024-01-04', duration='2'),
            resources=self.RESOURCES,
        ))
        vacation = project.vacations[0]
        assert (vacation.resource_id, vacation.start_date, vacation.end_date) == (
            0, date(2024, 1, 1), date(2024, 2, 1)
        )
        assert project.task_set.tasks[0].end_date == date(2024, 1, 5)

    def test_missing_containers_become_empty(self, make_gan_document):
        project = parse_gantt_project_xml(make_gan_document())
        assert project.resource_set.resources == ()
        assert project.allocations == ()
        assert project.vacations == ()
        assert project.baselines == ()
        assert project.description is None
        assert project.get_tasks() == ()

    def test_task_property_without_default(self, make_gan_document):
        tasks = '<taskproperties><taskproperty id="tpd0" name="type" type="default" valuetype="icon"/></taskproperties>'
        project = parse_gantt_project_xml(make_gan_document(tasks=tasks))
        task_property = project.task_set.task_properties[0]
        assert task_property.default_value is None
        assert task_property.calculation_selected_field is None
