"""UML parser data models.

Defines the structured diagram representation produced by notation parsers.
These are pure data containers with no parsing logic.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional

SCHEMA_VERSION = "1.0.0"


class AccessLevel(str, Enum):
    """Member visibility qualifier."""
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


class ValueKind(Enum):
    """Classification of a literal default value."""
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    NULL = "null"
    STRING = "string"
    IDENTIFIER = "identifier"  # Bare token, e.g. a constant name


class EntityKind(Enum):
    """Variant tag of a type declaration."""
    CLASS = "class"
    INTERFACE = "interface"


@dataclass(frozen=True)
class Value:
    """A typed literal taken from a property or argument default."""

    kind: ValueKind
    value: Any  # int | float | bool | None | str


@dataclass
class Argument:
    name: str
    default: Optional[Value] = None


@dataclass
class Property:
    access: AccessLevel
    name: str
    default: Optional[Value] = None


@dataclass
class Method:
    access: AccessLevel
    name: str
    arguments: List[Argument] = field(default_factory=list)


@dataclass
class TypeDeclaration(ABC):
    """A class or interface parsed from one header line plus its members."""

    name: str
    extends: Optional[str] = None
    implements: Optional[str] = None
    methods: List[Method] = field(default_factory=list)
    line: int = 0  # 1-based line where the declaration starts

    @property
    @abstractmethod
    def kind(self) -> EntityKind:
        ...


@dataclass
class ClassDeclaration(TypeDeclaration):
    properties: List[Property] = field(default_factory=list)

    @property
    def kind(self) -> EntityKind:
        return EntityKind.CLASS


@dataclass
class InterfaceDeclaration(TypeDeclaration):

    @property
    def kind(self) -> EntityKind:
        return EntityKind.INTERFACE


@dataclass
class ParseError:
    """A problem encountered during parsing.

    Diagram parsing is permissive, so these are recorded as diagnostics
    rather than raised.
    """

    line: int
    message: str
    severity: str = "warning"  # "warning" | "error"


@dataclass
class Diagram:
    """Complete parse output for one diagram text.

    Entities are kept in the order they appear in the source.
    """

    entities: List[TypeDeclaration] = field(default_factory=list)
    notation: str = "uml"
    line_count: int = 0
    errors: List[ParseError] = field(default_factory=list)

    def __iter__(self) -> Iterator[TypeDeclaration]:
        return iter(self.entities)

    def __len__(self) -> int:
        return len(self.entities)

    def __getitem__(self, index: int) -> TypeDeclaration:
        return self.entities[index]

    @property
    def classes(self) -> List[ClassDeclaration]:
        return [e for e in self.entities if isinstance(e, ClassDeclaration)]

    @property
    def interfaces(self) -> List[InterfaceDeclaration]:
        return [e for e in self.entities if isinstance(e, InterfaceDeclaration)]

    def get(self, name: str) -> Optional[TypeDeclaration]:
        """Return the first entity with the given name, if any."""
        return next((e for e in self.entities if e.name == name), None)


# ──────────────────────────────────────────────────────────────────
# JSON Serialization
# ──────────────────────────────────────────────────────────────────

def _value_to_dict(value: Optional[Value]) -> Optional[Dict[str, Any]]:
    if value is None:
        return None
    return {"type": value.kind.value, "value": value.value}


def _method_to_dict(method: Method) -> Dict[str, Any]:
    return {
        "access": method.access.value,
        "name": method.name,
        "arguments": [
            {"name": arg.name, "default": _value_to_dict(arg.default)}
            for arg in method.arguments
        ],
    }


def entity_to_dict(entity: TypeDeclaration) -> Dict[str, Any]:
    """Serialize one declaration to a JSON-compatible dict."""
    data: Dict[str, Any] = {
        "type": entity.kind.value,
        "name": entity.name,
        "line": entity.line,
    }
    if entity.extends is not None:
        data["extends"] = entity.extends
    if entity.implements is not None:
        data["implements"] = entity.implements
    if isinstance(entity, ClassDeclaration):
        data["properties"] = [
            {
                "access": prop.access.value,
                "name": prop.name,
                "default": _value_to_dict(prop.default),
            }
            for prop in entity.properties
        ]
    data["methods"] = [_method_to_dict(m) for m in entity.methods]
    return data


def to_dict(diagram: Diagram) -> Dict[str, Any]:
    """Serialize a Diagram to a JSON-compatible dict."""
    return {
        "schema_version": SCHEMA_VERSION,
        "notation": diagram.notation,
        "line_count": diagram.line_count,
        "entities": [entity_to_dict(e) for e in diagram.entities],
        "errors": [
            {"line": err.line, "message": err.message, "severity": err.severity}
            for err in diagram.errors
        ],
    }


def to_json(diagram: Diagram, indent: Optional[int] = 2) -> str:
    """Render a Diagram as a JSON document."""
    return json.dumps(to_dict(diagram), indent=indent)
