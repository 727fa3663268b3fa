"""
Generic XML-to-tree conversion.

Turns an XML document into nested dicts without any knowledge of the .gan
format:

- attributes become keys prefixed with ATTRIBUTE_PREFIX ("@_id")
- child elements become keys named after their tag; a tag seen once maps
  to a single node, a repeated tag maps to a list of nodes
- text content is stored under TEXT_KEY, or is the node itself when the
  element has no attributes and no children
- an element with no attributes, children or text becomes ""

Schema validation is responsible for undoing the single-vs-list and
empty-string ambiguities this mapping introduces.
"""

import xml.etree.ElementTree as ET
from typing import Any

from gan_parser.exceptions import XMLStructureError

ATTRIBUTE_PREFIX = '@_'
TEXT_KEY = '#text'


def parse_xml_string(xml_string: str) -> dict[str, Any]:
    """
    Parse XML text into a generic tree.

    Args:
        xml_string: Complete XML document

    Returns:
        Single-entry dict mapping the root tag to its node

    Raises:
        XMLStructureError: If the text is not well-formed XML
    """
    try:
        root = ET.fromstring(xml_string.lstrip('\ufeff'))
    except ET.ParseError as e:
        line, column = e.position if e.position else (None, None)
        raise XMLStructureError(f'Malformed XML: {e}', line=line, column=column) from e

    return {root.tag: element_to_node(root)}


def element_to_node(element: ET.Element) -> Any:
    """
    Convert an element and its descendants into a generic node.

    Walks the element tree with an explicit stack so deeply nested documents
    do not hit the interpreter's recursion limit.
    """
    converted: dict[int, Any] = {}
    stack = [(element, False)]

    while stack:
        current, children_done = stack.pop()
        if not children_done:
            stack.append((current, True))
            stack.extend((child, False) for child in reversed(list(current)))
            continue

        children = [(child.tag, converted.pop(id(child))) for child in current]
        converted[id(current)] = _build_node(current, children)

    return converted[id(element)]


def _build_node(element: ET.Element, children: list[tuple[str, Any]]) -> Any:
    """Assemble one node from an element's attributes, converted children and text."""
    node: dict[str, Any] = {
        f'{ATTRIBUTE_PREFIX}{name}': value for name, value in element.attrib.items()
    }

    for tag, child in children:
        if tag not in node:
            node[tag] = child
        elif isinstance(node[tag], list):
            node[tag].append(child)
        else:
            node[tag] = [node[tag], child]

    text = _collect_text(element)
    if text:
        if not node:
            return text
        node[TEXT_KEY] = text

    if not node:
        return ''
    return node


def _collect_text(element: ET.Element) -> str:
    """Join the element's own text with the tails of its children, trimmed."""
    parts = [element.text or '']
    parts.extend(child.tail or '' for child in element)
    return ''.join(parts).strip()
