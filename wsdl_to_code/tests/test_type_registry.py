"""
Tests for type classification, deduplication and inheritance linking.
"""

from __future__ import annotations

import pytest

from wsdl_to_code.pipeline.config import GeneratorConfig
from wsdl_to_code.pipeline.document.nodes import TypeNode
from wsdl_to_code.pipeline.model import (
    ArrayType,
    ComplexType,
    EnumType,
    PatternType,
    TypeKind,
    TypeRegistry,
    TypeRegistryBuilder,
    classify,
)


def complex_node(name, parts, base=None, **kwargs) -> TypeNode:
    return TypeNode(name=name, is_complex=True, parts=dict(parts), base=base, **kwargs)


def build(nodes, shared_types=False) -> TypeRegistry:
    config = GeneratorConfig(shared_types=shared_types)
    return TypeRegistryBuilder(config).build(nodes)


class TestClassification:
    def test_complex_node_gives_complex_type(self):
        node = complex_node("Address", [("street", "string"), ("zip", "string")])
        schema_type = classify(node, GeneratorConfig())

        assert isinstance(schema_type, ComplexType)
        assert schema_type.kind is TypeKind.COMPLEX
        assert [m.name for m in schema_type.members] == ["street", "zip"]
        assert [m.type_name for m in schema_type.members] == ["string", "string"]

    def test_array_flag_gives_array_type_only(self):
        node = complex_node("ArrayOfString", [("string", "string[]")], is_array=True)
        schema_type = classify(node, GeneratorConfig())

        assert schema_type.kind is TypeKind.ARRAY
        assert isinstance(schema_type, ArrayType)
        assert schema_type.item_type == "string"

    def test_complex_wins_over_enumeration_and_pattern(self):
        node = complex_node("Odd", [("a", "string")], enumerations=["x"], pattern="[a-z]+")
        assert classify(node, GeneratorConfig()).kind is TypeKind.COMPLEX

    def test_enumeration_wins_over_pattern(self):
        node = TypeNode(name="Color", enumerations=["red", "green", "red"], pattern="[a-z]+", restriction="string")
        schema_type = classify(node, GeneratorConfig())

        assert isinstance(schema_type, EnumType)
        assert schema_type.values == ["red", "green"]
        assert schema_type.restriction == "string"

    def test_pattern(self):
        node = TypeNode(name="ZipCode", pattern=r"\d{5}", restriction="string")
        schema_type = classify(node, GeneratorConfig())

        assert isinstance(schema_type, PatternType)
        assert schema_type.value == r"\d{5}"
        assert schema_type.restriction == "string"

    def test_unmatched_node_is_dropped(self):
        registry = build([TypeNode(name="Celsius", restriction="double")])
        assert len(registry) == 0
        assert "Celsius" not in registry

    def test_abstract_flag_is_kept(self):
        node = complex_node("Report", [("issued", "dateTime")], is_abstract=True)
        assert classify(node, GeneratorConfig()).abstract is True

    def test_identifier_uses_class_prefix_and_suffix(self):
        config = GeneratorConfig(class_prefix="Ws", class_suffix="Type")
        schema_type = classify(complex_node("getWeather", []), config)

        assert schema_type.name == "getWeather"
        assert schema_type.identifier == "WsGetWeatherType"


class TestNullability:
    @pytest.mark.parametrize(
        "nillable,min_occurs,expected",
        [
            (False, 1, False),
            (False, 0, True),
            (True, 1, True),
            (True, 0, True),
        ],
    )
    def test_nillable_or_min_occurs_zero(self, nillable, min_occurs, expected):
        node = complex_node("T", [("value", "string")], nillable={"value": nillable}, min_occurs={"value": min_occurs})
        member = classify(node, GeneratorConfig()).members[0]
        assert member.nullable is expected

    def test_undeclared_attributes_mean_required(self):
        node = complex_node("T", [("value", "string")])
        assert classify(node, GeneratorConfig()).members[0].nullable is False

    def test_address_zip_is_nullable(self):
        node = complex_node(
            "Address",
            [("street", "string"), ("zip", "string")],
            nillable={"zip": False},
            min_occurs={"zip": 0},
        )
        registry = build([node])
        address = registry.get("Address")

        assert address.kind is TypeKind.COMPLEX
        street, zip_code = address.members
        assert street.nullable is False
        assert zip_code.name == "zip"
        assert zip_code.nullable is True


class TestDeduplication:
    def address(self, name):
        return complex_node(name, [("street", "string"), ("zip", "string")], min_occurs={"zip": 0})

    def test_same_shape_collapses_to_first_declaration(self):
        registry = build([self.address("AddressV1"), self.address("AddressV2")], shared_types=True)

        assert len(registry) == 1
        assert registry.names == ["AddressV1"]
        assert registry.get("AddressV2") is None

    def test_without_shared_types_both_are_kept(self):
        registry = build([self.address("AddressV1"), self.address("AddressV2")])
        assert registry.names == ["AddressV1", "AddressV2"]

    def test_different_nullability_is_a_different_shape(self):
        other = complex_node("AddressV2", [("street", "string"), ("zip", "string")])
        registry = build([self.address("AddressV1"), other], shared_types=True)
        assert registry.names == ["AddressV1", "AddressV2"]

    def test_variant_is_part_of_the_shape(self):
        plain = complex_node("Strings", [("item", "string[]")])
        array = complex_node("ArrayOfString", [("item", "string[]")], is_array=True)
        registry = build([plain, array], shared_types=True)
        assert registry.names == ["Strings", "ArrayOfString"]

    def test_equal_enumerations_collapse(self):
        first = TypeNode(name="Color", enumerations=["red", "green"], restriction="string")
        second = TypeNode(name="Colour", enumerations=["red", "green"], restriction="string")
        registry = build([first, second], shared_types=True)
        assert registry.names == ["Color"]

    def test_structural_id_ignores_name(self):
        first = classify(self.address("AddressV1"), GeneratorConfig())
        second = classify(self.address("AddressV2"), GeneratorConfig())
        assert first.structural_id == second.structural_id


class TestInheritance:
    def test_forward_reference_to_base_resolves(self):
        child = complex_node("WeatherReport", [("temperature", "double")], base="Report")
        base = complex_node("Report", [("issued", "dateTime")])
        registry = build([child, base])

        assert registry.get("WeatherReport").base is registry.get("Report")

    def test_base_must_be_complex(self):
        nodes = [
            complex_node("A", [], base="Color"),
            complex_node("B", [], base="ZipCode"),
            complex_node("C", [], base="ArrayOfString"),
            complex_node("D", [], base="Missing"),
            TypeNode(name="Color", enumerations=["red"]),
            TypeNode(name="ZipCode", pattern=r"\d{5}"),
            complex_node("ArrayOfString", [("string", "string[]")], is_array=True),
        ]
        registry = build(nodes)

        for name in ("A", "B", "C", "D"):
            assert registry.get(name).base is None

    def test_dropped_type_with_base_is_ignored(self):
        nodes = [
            TypeNode(name="Celsius", base="Report"),
            complex_node("Report", []),
        ]
        registry = build(nodes)
        assert registry.names == ["Report"]

    def test_linking_does_not_change_structural_id(self):
        child = complex_node("Child", [("a", "string")], base="Parent")
        parent = complex_node("Parent", [("b", "string")])
        registry = build([child, parent])
        assert registry.find_by_structural_id("complex(a:string)") is registry.get("Child")


class TestRegistry:
    def test_register_returns_false_for_duplicates(self):
        registry = TypeRegistry()
        first = ComplexType(name="A", identifier="A")
        second = ComplexType(name="B", identifier="B")

        assert registry.register("A", first, deduplicate=True) is True
        assert registry.register("B", second, deduplicate=True) is False
        assert registry.types == [first]

    def test_shared_registry_across_builds(self):
        registry = TypeRegistry()
        config = GeneratorConfig()
        TypeRegistryBuilder(config, registry).build([complex_node("Report", [])])
        TypeRegistryBuilder(config, registry).build([complex_node("Child", [], base="Report")])

        assert registry.names == ["Report", "Child"]
        assert registry.get("Child").base is registry.get("Report")

    def test_replaced_name_releases_its_shape(self):
        registry = TypeRegistry()
        first = classify(complex_node("Address", [("street", "string")]), GeneratorConfig())
        second = classify(complex_node("Address", [("line", "string")]), GeneratorConfig())
        location = classify(complex_node("Location", [("street", "string")]), GeneratorConfig())

        assert registry.register("Address", first, deduplicate=True) is True
        assert registry.register("Address", second, deduplicate=True) is True
        assert registry.find_by_structural_id(first.structural_id) is None

        assert registry.register("Location", location, deduplicate=True) is True
        assert registry.names == ["Address", "Location"]
        assert registry.find_by_structural_id(first.structural_id) is location

    def test_replaced_shape_points_to_surviving_type(self):
        registry = TypeRegistry()
        v1 = classify(complex_node("AddressV1", [("street", "string")]), GeneratorConfig())
        v2 = classify(complex_node("AddressV2", [("street", "string")]), GeneratorConfig())
        other = classify(complex_node("AddressV1", [("line", "string")]), GeneratorConfig())
        registry.register("AddressV1", v1)
        registry.register("AddressV2", v2)
        registry.register("AddressV1", other)

        assert registry.find_by_structural_id(v1.structural_id) is v2
        assert registry.find_by_structural_id(other.structural_id) is other

    def test_get_none(self):
        assert TypeRegistry().get(None) is None
