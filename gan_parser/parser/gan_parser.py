"""
Entry point for reading GanttProject .gan files.

Parsing runs in three steps, each of which can fail as a whole:
1. XML text -> generic tree (XMLStructureError on malformed XML or a
   missing <project> root)
2. generic tree -> validated elements (SchemaValidationError listing every
   issue)
3. validated elements -> Project
"""

import logging
from pathlib import Path
from typing import Union

from gan_parser.exceptions import XMLStructureError
from gan_parser.parser.converter import convert_to_project
from gan_parser.parser.models import Project
from gan_parser.parser.xml_tree import parse_xml_string
from gan_parser.schemas.validator import validate_project_tree

logger = logging.getLogger(__name__)

PROJECT_ELEMENT = 'project'


def parse_gantt_project_xml(xml_string: str) -> Project:
    """
    Parse the contents of a .gan file into a Project.

    Args:
        xml_string: The contents of a .gan file

    Returns:
        A validated Project

    Raises:
        XMLStructureError: If the text is not well-formed XML or its root
            element is not <project>
        SchemaValidationError: If any element or attribute is invalid

    Example:
        try:
            project = parse_gantt_project_xml(Path('plan.gan').read_text(encoding='utf-8'))
        except SchemaValidationError as e:
            for issue in e.issues:
                print(issue)
    """
    tree = parse_xml_string(xml_string)

    if PROJECT_ELEMENT not in tree:
        root_tag = next(iter(tree))
        raise XMLStructureError(f'Expected a <{PROJECT_ELEMENT}> root element, found <{root_tag}>')

    xml_project = validate_project_tree(tree[PROJECT_ELEMENT])
    return convert_to_project(xml_project)


def load_gantt_project(file_path: Union[str, Path]) -> Project:
    """
    Read and parse a .gan file.

    Args:
        file_path: Path to the .gan file (UTF-8)

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f'File not found: {file_path}')

    logger.info(f'Parsing {file_path}')
    return parse_gantt_project_xml(file_path.read_text(encoding='utf-8'))
