"""Entity parsing. Turns a LineGroup into a class or interface declaration."""

from typing import Optional, Tuple

from .grouping import MEMBER_INDENT, LineGroup
from .members import parse_method, parse_property
from .models import ClassDeclaration, InterfaceDeclaration

IMPLEMENTS_SEPARATOR = "::"
EXTENDS_SEPARATOR = ":"


def _split_header(header: str, separator: str) -> Optional[Tuple[str, str]]:
    """Return ``(name, target)`` when the separator occurs in the header."""
    parts = header.split(separator)
    if len(parts) > 1:
        return parts[0].strip(), parts[1].strip()
    return None


def _strip_indent(line: str) -> str:
    return line[len(MEMBER_INDENT):]


def parse_class(group: LineGroup) -> ClassDeclaration:
    """Parse a class group.

    Both header splits read the unmodified header line. The ``:`` split runs
    last, so it decides the name when a header contains both ``::`` and
    ``:``. Member lines ending in ``)`` are methods, the rest properties.
    """
    header = group.header
    entity = ClassDeclaration(name=header.strip(), line=group.line)

    implemented = _split_header(header, IMPLEMENTS_SEPARATOR)
    if implemented:
        entity.name, target = implemented
        entity.implements = target or None

    extended = _split_header(header, EXTENDS_SEPARATOR)
    if extended:
        entity.name, parent = extended
        # "A :: B" also splits on ":" with an empty middle part
        entity.extends = parent or None

    for line in group.members:
        member = _strip_indent(line)
        if member.strip().endswith(")"):
            entity.methods.append(parse_method(member))
        else:
            entity.properties.append(parse_property(member))

    return entity


def parse_interface(group: LineGroup) -> InterfaceDeclaration:
    """Parse an interface group; every member line is a method."""
    inner = group.header.strip().strip("<>").strip()
    entity = InterfaceDeclaration(name=inner, line=group.line)

    implemented = _split_header(inner, IMPLEMENTS_SEPARATOR)
    if implemented:
        entity.name, target = implemented
        entity.implements = target or None

    for line in group.members:
        entity.methods.append(parse_method(_strip_indent(line)))

    return entity
