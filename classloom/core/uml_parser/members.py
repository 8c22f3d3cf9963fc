"""Member line parsing: properties, methods and argument lists.

Member lines arrive with the two-space group indent already removed, e.g.
``+ speed = 10`` or ``# move(dx, dy = 0)``. The first character is always
the visibility token.
"""

import logging
import re
from typing import List

from .access import resolve_access
from .models import Argument, Method, Property, Value, ValueKind
from .values import parse_value

logger = logging.getLogger(__name__)

# Access token plus its separator
_PREFIX_LENGTH = 2

# Shortest run after the first whitespace character, up to the first "("
_METHOD_NAME_RE = re.compile(r"(?<=\s).*?(?=\()")

# Non-empty parenthesised group closing the line
_ARGUMENTS_RE = re.compile(r"\((.+?)\)$")

ARGUMENT_SEPARATOR = ", "


def parse_property(line: str) -> Property:
    """Parse a property line such as ``- count = 0``."""
    access = resolve_access(line[:1])
    left, sep, right = line.partition("=")
    prop = Property(access=access, name=left.strip()[_PREFIX_LENGTH:].strip())

    if sep:
        default = parse_value(right.strip())
        if default.kind in (ValueKind.STRING, ValueKind.IDENTIFIER):
            default = Value(default.kind, default.value.strip())
        prop.default = default

    return prop


def parse_method(line: str) -> Method:
    """Parse a method line such as ``+ doThing(a, b = 2)``.

    A line without a recoverable name yields an empty name; a line
    without a closing argument group yields no arguments.
    """
    match = _METHOD_NAME_RE.search(line)
    method = Method(
        access=resolve_access(line[:1]),
        name=match.group(0) if match else "",
    )

    args = _ARGUMENTS_RE.search(line)
    if args:
        method.arguments = parse_arguments(args.group(1))

    return method


def parse_arguments(text: str) -> List[Argument]:
    """Split an argument list interior into Argument records.

    The split on ``", "`` is flat: commas inside quotes or nested
    parentheses are not special.
    """
    arguments: List[Argument] = []

    for token in text.split(ARGUMENT_SEPARATOR):
        name, sep, raw_default = token.partition("=")
        raw_default = raw_default.strip()
        arguments.append(
            Argument(
                name=name.strip(),
                default=parse_value(raw_default) if sep and raw_default else None,
            )
        )

    logger.debug("Parsed %d argument(s) from %r", len(arguments), text)
    return arguments
