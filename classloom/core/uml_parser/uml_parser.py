"""Indented pseudo-UML notation parser, line-based.

Parses diagrams written as::

    <<Shape>>
      + area()
    Circle : Figure :: Shape
      - radius = 1.0
      + area()

Does NOT use a grammar library. Follows the line-based parser pattern:
group lines, then parse each group into a declaration.
"""

import logging
from typing import List

from .base import BaseNotationParser
from .entities import parse_class, parse_interface
from .grouping import LineGroup, group_lines
from .models import ClassDeclaration, Diagram, EntityKind, ParseError, TypeDeclaration

logger = logging.getLogger(__name__)


class UmlParser(BaseNotationParser):
    """Parser for the indented class/interface notation."""

    def get_notation(self) -> str:
        return "uml"

    def parse(self, text: str) -> Diagram:
        errors: List[ParseError] = []
        entities: List[TypeDeclaration] = []

        for group in group_lines(text):
            if group.kind is EntityKind.INTERFACE:
                entity = parse_interface(group)
            else:
                entity = parse_class(group)
            errors.extend(self._check(group, entity))
            entities.append(entity)

        for err in errors:
            logger.debug("line %d: %s", err.line, err.message)

        return Diagram(
            entities=entities,
            notation=self.get_notation(),
            line_count=self.count_lines(text),
            errors=errors,
        )

    @staticmethod
    def _check(group: LineGroup, entity: TypeDeclaration) -> List[ParseError]:
        """Collect diagnostics for degraded input; never raises."""
        errors: List[ParseError] = []

        if not group.header:
            errors.append(ParseError(
                line=group.line,
                message=f"{len(group.members)} member line(s) appear before any header",
            ))
        elif not entity.name:
            errors.append(ParseError(line=group.line, message="Declaration has an empty name"))

        for method in entity.methods:
            if not method.name:
                errors.append(ParseError(
                    line=group.line,
                    message=f"Method without a name in {entity.kind.value} '{entity.name}'",
                ))

        if isinstance(entity, ClassDeclaration):
            for prop in entity.properties:
                if not prop.name:
                    errors.append(ParseError(
                        line=group.line,
                        message=f"Property without a name in class '{entity.name}'",
                    ))

        return errors
