"""Tests for the UML diagram parser."""

import pytest
from classloom.core.uml_parser import (
    AccessLevel,
    ClassDeclaration,
    Diagram,
    EntityKind,
    InterfaceDeclaration,
    TypeDeclaration,
    Value,
    ValueKind,
    get_parser,
    group_lines,
    list_notations,
    parse_class,
    parse_interface,
    parse_text,
    to_dict,
    to_json,
)
from classloom.core.uml_parser.grouping import LineGroup


# =========================================================================
# Sample diagram fixtures
# =========================================================================

CAR = "Car\n  + speed = 10\n  + drive()\n"

SHAPES = '''<<Shape>>
  + area()
  + scale(factor = 1.0)
Figure
  # origin = null
Circle : Figure
  - radius = 1
  + area()
Square :: Shape
  - side = 2
'''

HEADERS_ONLY = "Alpha\nBeta : Alpha\n<<Gamma>>\nDelta :: Gamma\n"

INTERLEAVED = '''Engine
  - power = 100
<<Startable>>
  + start()
Wheel
  - size = 17
  + rotate(speed)
'''

ORPHAN_MEMBERS = "  + lonely()\nCar\n  + drive()\n"

CRLF = "Car\r\n  + speed = 10\r\n\r\n  + drive()\r\nBike\r  + ring()\r"


# =========================================================================
# Tests: End to end
# =========================================================================

class TestEndToEnd:
    def test_car(self):
        diagram = parse_text(CAR)
        assert isinstance(diagram, Diagram)
        assert len(diagram) == 1

        car = diagram[0]
        assert isinstance(car, ClassDeclaration)
        assert car.kind is EntityKind.CLASS
        assert car.name == "Car"
        assert car.extends is None
        assert car.implements is None
        assert len(car.properties) == 1
        assert car.properties[0].access is AccessLevel.PUBLIC
        assert car.properties[0].name == "speed"
        assert car.properties[0].default == Value(ValueKind.INTEGER, 10)
        assert len(car.methods) == 1
        assert car.methods[0].access is AccessLevel.PUBLIC
        assert car.methods[0].name == "drive"
        assert car.methods[0].arguments == []

    def test_empty_input(self):
        diagram = parse_text("")
        assert len(diagram) == 0
        assert diagram.entities == []
        assert diagram.errors == []
        assert diagram.line_count == 0

    def test_source_order_preserved(self):
        diagram = parse_text(SHAPES)
        assert [e.name for e in diagram] == ["Shape", "Figure", "Circle", "Square"]
        assert [e.kind for e in diagram] == [
            EntityKind.INTERFACE,
            EntityKind.CLASS,
            EntityKind.CLASS,
            EntityKind.CLASS,
        ]

    def test_headers_only(self):
        diagram = parse_text(HEADERS_ONLY)
        assert len(diagram) == 4
        for entity in diagram:
            assert entity.methods == []
            if isinstance(entity, ClassDeclaration):
                assert entity.properties == []

    def test_deterministic(self):
        assert parse_text(SHAPES) == parse_text(SHAPES)

    def test_interleaved_groups_keep_their_members(self):
        diagram = parse_text(INTERLEAVED)
        engine, startable, wheel = diagram.entities

        assert [p.name for p in engine.properties] == ["power"]
        assert engine.methods == []
        assert isinstance(startable, InterfaceDeclaration)
        assert [m.name for m in startable.methods] == ["start"]
        assert [p.name for p in wheel.properties] == ["size"]
        assert [m.name for m in wheel.methods] == ["rotate"]
        assert wheel.methods[0].arguments[0].name == "speed"

    def test_classes_and_interfaces_views(self):
        diagram = parse_text(SHAPES)
        assert [c.name for c in diagram.classes] == ["Figure", "Circle", "Square"]
        assert [i.name for i in diagram.interfaces] == ["Shape"]
        assert diagram.get("Circle").extends == "Figure"
        assert diagram.get("Missing") is None

    def test_line_numbers(self):
        diagram = parse_text(SHAPES)
        assert [e.line for e in diagram] == [1, 4, 6, 9]
        assert diagram.line_count == 10


# =========================================================================
# Tests: Line grouping
# =========================================================================

class TestLineGrouping:
    def test_mixed_line_endings(self):
        groups = group_lines(CRLF)
        assert [g.header for g in groups] == ["Car", "Bike"]
        assert groups[0].members == ["  + speed = 10", "  + drive()"]
        assert groups[1].members == ["  + ring()"]

    def test_zero_line_is_not_skipped(self):
        groups = group_lines("0\n  + x = 1\n")
        assert len(groups) == 1
        assert groups[0].header == "0"
        assert groups[0].kind is EntityKind.CLASS

    def test_interface_marker(self):
        groups = group_lines("<<Shape>>\n  + area()\nShape2\n")
        assert groups[0].kind is EntityKind.INTERFACE
        assert groups[1].kind is EntityKind.CLASS

    def test_member_joins_open_group_regardless_of_tag(self):
        groups = group_lines("<<Io>>\n  + read()\n  + write(data)\n")
        assert len(groups) == 1
        assert groups[0].members == ["  + read()", "  + write(data)"]

    def test_single_space_line_opens_group(self):
        groups = group_lines("Car\n \n  + drive()\n")
        assert [g.header for g in groups] == ["Car", " "]
        assert groups[0].members == []
        assert groups[1].members == ["  + drive()"]

    def test_orphan_members_form_headerless_group(self):
        groups = group_lines(ORPHAN_MEMBERS)
        assert groups[0].header == ""
        assert groups[0].kind is EntityKind.INTERFACE
        assert groups[0].members == ["  + lonely()"]
        assert groups[1].header == "Car"


# =========================================================================
# Tests: Entity headers
# =========================================================================

def _class(header: str, *members: str) -> ClassDeclaration:
    return parse_class(LineGroup(kind=EntityKind.CLASS, header=header, members=list(members)))


def _interface(header: str, *members: str) -> InterfaceDeclaration:
    return parse_interface(LineGroup(kind=EntityKind.INTERFACE, header=header, members=list(members)))


class TestClassHeaders:
    def test_plain_name(self):
        entity = _class("Foo")
        assert entity.name == "Foo"
        assert entity.extends is None
        assert entity.implements is None

    def test_implements(self):
        entity = _class("Foo :: Bar")
        assert entity.name == "Foo"
        assert entity.implements == "Bar"
        assert entity.extends is None

    def test_extends(self):
        entity = _class("Foo : Bar")
        assert entity.name == "Foo"
        assert entity.extends == "Bar"
        assert entity.implements is None

    def test_extends_and_implements(self):
        entity = _class("Foo : Bar :: Baz")
        assert entity.name == "Foo"
        assert entity.extends == "Bar"
        assert entity.implements == "Baz"

    def test_colon_split_decides_name(self):
        entity = _class("Foo :: Bar : Baz")
        assert entity.name == "Foo"
        assert entity.implements == "Bar : Baz"
        assert entity.extends is None

    def test_name_is_trimmed(self):
        assert _class("Foo   ").name == "Foo"

    def test_empty_parents_are_absent(self):
        diagram = parse_text("Foo ::\nBar :\n")
        foo, bar = diagram.entities
        assert foo.name == "Foo"
        assert foo.implements is None
        assert foo.extends is None
        assert bar.name == "Bar"
        assert bar.extends is None
        assert "implements" not in to_dict(diagram)["entities"][0]

    def test_members_classified_by_closing_paren(self):
        entity = _class("Foo", "  - count = 0", "  + reset()", "  # label")
        assert [p.name for p in entity.properties] == ["count", "label"]
        assert [m.name for m in entity.methods] == ["reset"]
        assert entity.properties[0].access is AccessLevel.PRIVATE
        assert entity.properties[0].default == Value(ValueKind.INTEGER, 0)
        assert entity.properties[1].access is AccessLevel.PROTECTED
        assert entity.properties[1].default is None

    def test_trailing_space_after_paren_is_still_method(self):
        entity = _class("Foo", "  + run() ")
        assert entity.properties == []
        assert entity.methods[0].name == "run"


class TestInterfaceHeaders:
    def test_angle_brackets_stripped(self):
        entity = _interface("<<Shape>>")
        assert isinstance(entity, InterfaceDeclaration)
        assert entity.kind is EntityKind.INTERFACE
        assert entity.name == "Shape"
        assert entity.implements is None
        assert entity.extends is None

    def test_implements(self):
        entity = _interface("<<Circle :: Shape>>")
        assert entity.name == "Circle"
        assert entity.implements == "Shape"

    def test_single_colon_is_not_extends(self):
        entity = _interface("<<Circle : Shape>>")
        assert entity.name == "Circle : Shape"
        assert entity.extends is None

    def test_empty_implements_is_absent(self):
        entity = _interface("<<Shape ::>>")
        assert entity.name == "Shape"
        assert entity.implements is None

    def test_base_declaration_is_abstract(self):
        with pytest.raises(TypeError):
            TypeDeclaration(name="Loose")

    def test_members_are_methods(self):
        entity = _interface("<<Shape>>", "  + area()", "  # scale(factor = 2)")
        assert [m.name for m in entity.methods] == ["area", "scale"]
        assert entity.methods[1].access is AccessLevel.PROTECTED
        assert entity.methods[1].arguments[0].default == Value(ValueKind.INTEGER, 2)
        assert not hasattr(entity, "properties")


# =========================================================================
# Tests: Diagnostics
# =========================================================================

class TestDiagnostics:
    def test_clean_diagram_has_no_errors(self):
        assert parse_text(SHAPES).errors == []

    def test_orphan_members_reported(self):
        diagram = parse_text(ORPHAN_MEMBERS)
        assert len(diagram) == 2
        assert diagram[0].name == ""
        assert diagram[0].methods[0].name == "lonely"
        assert len(diagram.errors) == 1
        assert diagram.errors[0].line == 1
        assert diagram.errors[0].severity == "warning"

    def test_empty_name_kept_and_reported(self):
        diagram = parse_text(" \n  + go()\n")
        assert len(diagram) == 1
        assert diagram[0].name == ""
        assert any("empty name" in e.message for e in diagram.errors)

    def test_method_without_name_reported(self):
        diagram = parse_text("Foo\n  +bar()\n")
        assert diagram[0].methods[0].name == ""
        assert any("Method without a name" in e.message for e in diagram.errors)

    def test_malformed_input_never_raises(self):
        text = "<<\n  (\n  )\n::\n:\n  =\n  + (, , =)\n"
        diagram = parse_text(text)
        assert len(diagram) == 3

    def test_oversized_integer_literal_does_not_abort(self):
        digits = "1" * 5000
        diagram = parse_text(f"Big\n  + n = {digits}\nSmall\n  + m = 1\n")
        assert [e.name for e in diagram] == ["Big", "Small"]
        assert diagram[0].properties[0].default == Value(ValueKind.IDENTIFIER, digits)
        assert diagram[1].properties[0].default == Value(ValueKind.INTEGER, 1)


# =========================================================================
# Tests: Registry and serialization
# =========================================================================

class TestRegistry:
    def test_uml_parser_cached(self):
        assert get_parser("uml") is get_parser("uml")
        assert get_parser("uml").get_notation() == "uml"

    def test_unknown_notation(self):
        with pytest.raises(ValueError, match="Unsupported notation"):
            get_parser("plantuml")

    def test_list_notations(self):
        assert list_notations() == ["uml"]


class TestSerialization:
    def test_to_dict(self):
        data = to_dict(parse_text(CAR))
        assert data["notation"] == "uml"
        assert data["entities"] == [
            {
                "type": "class",
                "name": "Car",
                "line": 1,
                "properties": [
                    {"access": "public", "name": "speed", "default": {"type": "integer", "value": 10}},
                ],
                "methods": [
                    {"access": "public", "name": "drive", "arguments": []},
                ],
            }
        ]
        assert data["errors"] == []

    def test_interface_has_no_properties_key(self):
        data = to_dict(parse_text("<<Shape>> \n  + area()\n"))
        assert "properties" not in data["entities"][0]

    def test_to_json_compact(self):
        text = to_json(parse_text(HEADERS_ONLY), indent=None)
        assert "\n" not in text
        assert '"extends": "Alpha"' in text
