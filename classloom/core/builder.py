"""ClassLoom front controller.

Wires a ClassLoomConfig to the notation parser registry. Rendering and
file mapping belong to callers; this layer only produces the Diagram and
its JSON view.
"""

import logging
from typing import Optional

from .config import ClassLoomConfig
from .uml_parser import BaseNotationParser, Diagram, get_parser, to_json

logger = logging.getLogger(__name__)


class ClassLoom:
    """Entry point used by rendering and file-mapping collaborators."""

    def __init__(self, config: ClassLoomConfig):
        """Bind the controller to a configuration.

        Raises:
            TypeError: If config is not a ClassLoomConfig
        """
        if not isinstance(config, ClassLoomConfig):
            raise TypeError(
                "The first parameter of ClassLoom.__init__() needs to be an instance of "
                f"{ClassLoomConfig.__module__}.{ClassLoomConfig.__qualname__}, "
                f"{type(config).__name__} given"
            )
        self._config = config
        self._parser: Optional[BaseNotationParser] = None

    @property
    def config(self) -> ClassLoomConfig:
        return self._config

    @property
    def parser(self) -> BaseNotationParser:
        if self._parser is None:
            self._parser = get_parser(self._config.notation)
        return self._parser

    def build(self, text: str) -> Diagram:
        """Parse diagram text with the configured notation."""
        diagram = self.parser.parse(text)
        logger.info(
            f"Parsed {len(diagram)} declaration(s) from {diagram.line_count} line(s) "
            f"({len(diagram.errors)} warning(s))"
        )
        return diagram

    def render_json(self, diagram: Diagram) -> str:
        """Serialize a Diagram using the configured indent."""
        return to_json(diagram, indent=self._config.json_indent)
