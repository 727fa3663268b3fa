"""
Command line interface for inspecting .gan files.

Usage:
    gan-parser summary <file.gan> [--json]
    gan-parser tasks <file.gan> [--output tasks.csv]

Commands:
    summary     Show project metadata and element counts
    tasks       Show the flattened task tree with computed end dates

Exit status is 1 when the file cannot be read, is not well-formed XML or
fails schema validation; every validation issue is printed.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from gan_parser.config.settings import settings
from gan_parser.exceptions import SchemaValidationError, WorkdayOverflowError, XMLStructureError
from gan_parser.parser.gan_parser import load_gantt_project
from gan_parser.parser.models import Project
from gan_parser.utils.logger import configure_logging
from gan_parser.utils.tasks import collect_tasks_depth_first, tasks_to_dataframe


def project_summary(project: Project) -> dict:
    """Collect metadata and counts for display."""
    return {
        'name': project.name,
        'company': project.company,
        'version': project.version,
        'locale': project.locale,
        'view_date': project.view_date.isoformat(),
        'root_tasks': len(project.task_set.tasks),
        'total_tasks': len(collect_tasks_depth_first(project)),
        'task_properties': len(project.task_set.task_properties),
        'resources': len(project.resource_set.resources),
        'allocations': len(project.allocations),
        'vacations': len(project.vacations),
        'baselines': len(project.baselines),
        'calendar_events': len(project.calendar.events),
    }


def cmd_summary(args, project: Project) -> int:
    """Print project metadata and counts."""
    summary = project_summary(project)

    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        for key, value in summary.items():
            print(f'{key:>16}: {value}')

    return 0


def cmd_tasks(args, project: Project) -> int:
    """Print or export the flattened task table."""
    df = tasks_to_dataframe(project)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_path, index=False)
        print(f'Exported {len(df)} tasks to {output_path}')
    elif df.empty:
        print('No tasks')
    else:
        print(df.to_string(index=False))

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gan-parser',
        description='Inspect GanttProject .gan files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    summary_parser = subparsers.add_parser('summary', help='Show project metadata and counts')
    summary_parser.add_argument('file', help='Path to a .gan file')
    summary_parser.add_argument('--json', action='store_true', help='Output as JSON')
    summary_parser.set_defaults(handler=cmd_summary)

    tasks_parser = subparsers.add_parser('tasks', help='Show the flattened task tree')
    tasks_parser.add_argument('file', help='Path to a .gan file')
    tasks_parser.add_argument('--output', '-o', metavar='CSV', help='Write tasks to a CSV file')
    tasks_parser.set_defaults(handler=cmd_tasks)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logger = configure_logging('gan_parser')
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    problems = settings.validate_required_settings()
    if problems:
        for problem in problems:
            print(f'ERROR: {problem}', file=sys.stderr)
        return 1

    try:
        project = load_gantt_project(args.file)
    except FileNotFoundError as e:
        print(f'ERROR: {e}', file=sys.stderr)
        return 1
    except XMLStructureError as e:
        print(f'ERROR: {e}', file=sys.stderr)
        return 1
    except SchemaValidationError as e:
        print(f'ERROR: {e.message}:', file=sys.stderr)
        for issue in e.issues:
            print(f'  - {issue}', file=sys.stderr)
        return 1
    except WorkdayOverflowError as e:
        print(f'ERROR: {e}', file=sys.stderr)
        return 1

    return args.handler(args, project)


if __name__ == '__main__':
    sys.exit(main())
