"""Exceptions raised while reading .gan files."""

from dataclasses import dataclass
from typing import Any, List, Tuple, Union


class GanParserError(Exception):
    """Base class for all parser errors."""


class XMLStructureError(GanParserError):
    """
    Raised when the input is not well-formed XML or has no <project> root.

    Line and column are kept when the underlying XML parser reports them.
    """

    def __init__(self, message: str, line: int = None, column: int = None):
        super().__init__(message)
        self.line = line
        self.column = column


class WorkdayOverflowError(GanParserError, ValueError):
    """Raised when a calendar yields no workday within the scan limit."""


IssuePath = Tuple[Union[str, int], ...]


@dataclass(frozen=True)
class ValidationIssue:
    """One problem found in the tree, located by its path from <project>."""

    path: IssuePath
    message: str
    input: Any = None

    def format_path(self) -> str:
        """Render the path as e.g. tasks.task[0].@_start."""
        rendered = ''
        for part in self.path:
            if isinstance(part, int):
                rendered += f'[{part}]'
            elif rendered:
                rendered += f'.{part}'
            else:
                rendered = str(part)
        return rendered or '<project>'

    def __str__(self) -> str:
        return f'{self.format_path()}: {self.message}'


class SchemaValidationError(GanParserError):
    """Raised when schema validation fails. Carries every issue found."""

    def __init__(self, message: str, issues: List[ValidationIssue]):
        if not issues:
            raise ValueError('SchemaValidationError requires at least one issue')
        super().__init__(message)
        self.message = message
        self.issues = list(issues)

    def __str__(self) -> str:
        return self.message + ''.join(f'\n  - {issue}' for issue in self.issues)


# Alias for callers that catch ParseError
ParseError = SchemaValidationError
