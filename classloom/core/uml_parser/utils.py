"""UML parser utilities.

Notation registry and helper functions.
"""

from typing import Dict, List, TYPE_CHECKING

if TYPE_CHECKING:
    from .base import BaseNotationParser

DEFAULT_NOTATION = "uml"

SUPPORTED_NOTATIONS = ("uml",)

# Parser registry, lazy-loaded to avoid import overhead
_parser_registry: Dict[str, "BaseNotationParser"] = {}


def get_parser(notation: str = DEFAULT_NOTATION) -> "BaseNotationParser":
    """Get a parser instance for the given notation.

    Parsers are stateless, so one cached instance per notation is shared.

    Args:
        notation: Notation identifier (e.g., "uml")

    Returns:
        Parser instance

    Raises:
        ValueError: If notation is not supported
    """
    if notation not in _parser_registry:
        if notation == "uml":
            from .uml_parser import UmlParser
            _parser_registry["uml"] = UmlParser()
        else:
            raise ValueError(
                f"Unsupported notation: {notation}. "
                f"Supported: {list(SUPPORTED_NOTATIONS)}"
            )

    return _parser_registry[notation]


def list_notations() -> List[str]:
    """Return the identifiers of all supported notations."""
    return list(SUPPORTED_NOTATIONS)
