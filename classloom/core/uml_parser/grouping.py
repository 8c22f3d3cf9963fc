"""Line grouping for the indented UML notation.

A header line starts a group; every following line indented by two spaces
belongs to it. Headers starting with ``<<`` open interface groups, any other
header opens a class group.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from .models import EntityKind

MEMBER_INDENT = "  "
INTERFACE_MARKER = "<<"

_LINE_BREAK_RE = re.compile(r"\r\n|\n|\r")


@dataclass
class LineGroup:
    """One header line plus its member lines."""

    kind: EntityKind
    header: str
    members: List[str] = field(default_factory=list)
    line: int = 0  # 1-based line where the group starts


def split_lines(text: str) -> List[str]:
    """Split on any line-ending style (``\\r\\n``, ``\\n``, ``\\r``)."""
    return _LINE_BREAK_RE.split(text)


def group_lines(text: str) -> List[LineGroup]:
    """Split diagram text into ordered header/member groups.

    Only exactly-empty lines are skipped; a line such as ``0`` or a single
    space is significant. At most one group is open at a time.

    An indented line before any header opens a header-less interface
    group so its members are not lost.
    """
    groups: List[LineGroup] = []
    current: Optional[LineGroup] = None

    for lineno, line in enumerate(split_lines(text), start=1):
        if line == "":
            continue

        if line.startswith(MEMBER_INDENT):
            if current is None:
                current = LineGroup(kind=EntityKind.INTERFACE, header="", line=lineno)
                groups.append(current)
            current.members.append(line)
            continue

        kind = EntityKind.INTERFACE if line.startswith(INTERFACE_MARKER) else EntityKind.CLASS
        current = LineGroup(kind=kind, header=line, line=lineno)
        groups.append(current)

    return groups
