"""Base interface for textual diagram notation parsers.

Defines the Strategy pattern base class that all notation parsers implement.
Parsers are stateless: one instance may serve any number of concurrent calls.
"""

import logging
from abc import ABC, abstractmethod

from .models import Diagram

logger = logging.getLogger(__name__)


class BaseNotationParser(ABC):
    """Abstract base for notation-specific diagram parsers.

    Subclasses implement:
    - get_notation(): returns the notation identifier
    - parse(): converts diagram text into a Diagram
    """

    @abstractmethod
    def get_notation(self) -> str:
        """Return the notation identifier (e.g., 'uml')."""
        ...

    @abstractmethod
    def parse(self, text: str) -> Diagram:
        """Parse diagram text into a Diagram.

        Implementations must not raise for malformed input; problems are
        reported through Diagram.errors instead.

        Args:
            text: Full diagram source

        Returns:
            Diagram with entities in source order
        """
        ...

    @staticmethod
    def count_lines(text: str) -> int:
        """Count lines the way an editor would, ignoring a final newline."""
        if not text:
            return 0
        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        return normalized.count("\n") + (0 if normalized.endswith("\n") else 1)
