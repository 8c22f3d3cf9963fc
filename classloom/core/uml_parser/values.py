"""Literal value coercion for property and argument defaults."""

import re

from .models import Value, ValueKind

_INTEGER_RE = re.compile(r"^[-+]?\d+$")
_FLOAT_RE = re.compile(r"^[-+]?(?:\d+\.\d*|\.\d+)(?:[eE][-+]?\d+)?$")

_BOOLEANS = {"true": True, "false": False}


def _is_quoted(token: str) -> bool:
    return len(token) >= 2 and token[0] == token[-1] and token[0] in ("'", '"')


def parse_value(token: str) -> Value:
    """Classify a trimmed literal token into a typed Value.

    Checked in order: quoted string, integer, decimal number,
    ``true``/``false``, ``null``. Anything else is kept verbatim as an
    identifier. Matching is case-sensitive.

    Args:
        token: Literal text with surrounding whitespace already removed

    Returns:
        Value tagged with its ValueKind
    """
    if _is_quoted(token):
        return Value(ValueKind.STRING, token[1:-1])
    if _INTEGER_RE.match(token):
        try:
            return Value(ValueKind.INTEGER, int(token))
        except ValueError:
            # Past the interpreter's int conversion digit limit
            return Value(ValueKind.IDENTIFIER, token)
    if _FLOAT_RE.match(token):
        return Value(ValueKind.FLOAT, float(token))
    if token in _BOOLEANS:
        return Value(ValueKind.BOOLEAN, _BOOLEANS[token])
    if token == "null":
        return Value(ValueKind.NULL, None)
    return Value(ValueKind.IDENTIFIER, token)
