"""Access-level resolution for member lines."""

from .models import AccessLevel

# UML visibility symbols
_SYMBOLS = {
    "+": AccessLevel.PUBLIC,
    "#": AccessLevel.PROTECTED,
    "-": AccessLevel.PRIVATE,
}

# Keywords accepted verbatim (case-sensitive)
_KEYWORDS = {level.value: level for level in AccessLevel}


def resolve_access(token: str) -> AccessLevel:
    """Map a visibility symbol or keyword to an AccessLevel.

    Unknown tokens fall back to PUBLIC.
    """
    if token in _SYMBOLS:
        return _SYMBOLS[token]
    return _KEYWORDS.get(token, AccessLevel.PUBLIC)
