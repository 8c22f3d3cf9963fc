"""ClassLoom UML Parser: textual class diagram parsing.

Public API:
    parse_text(text, notation) → Diagram
    get_parser(notation) → BaseNotationParser
    list_notations() → list[str]
"""

from .access import resolve_access
from .base import BaseNotationParser
from .entities import parse_class, parse_interface
from .grouping import LineGroup, group_lines
from .members import parse_arguments, parse_method, parse_property
from .models import (
    AccessLevel,
    Argument,
    ClassDeclaration,
    Diagram,
    EntityKind,
    InterfaceDeclaration,
    Method,
    ParseError,
    Property,
    TypeDeclaration,
    Value,
    ValueKind,
    to_dict,
    to_json,
)
from .utils import DEFAULT_NOTATION, get_parser, list_notations
from .values import parse_value

__all__ = [
    "parse_text",
    "get_parser",
    "list_notations",
    "BaseNotationParser",
    "group_lines",
    "LineGroup",
    "parse_class",
    "parse_interface",
    "parse_property",
    "parse_method",
    "parse_arguments",
    "resolve_access",
    "parse_value",
    "AccessLevel",
    "Argument",
    "ClassDeclaration",
    "Diagram",
    "EntityKind",
    "InterfaceDeclaration",
    "Method",
    "ParseError",
    "Property",
    "TypeDeclaration",
    "Value",
    "ValueKind",
    "to_dict",
    "to_json",
]


def parse_text(text: str, notation: str = DEFAULT_NOTATION) -> Diagram:
    """Parse diagram text into a structured Diagram.

    Args:
        text: Diagram source
        notation: Notation identifier. Defaults to the indented UML notation.

    Returns:
        Diagram containing declarations in source order
    """
    return get_parser(notation).parse(text)
