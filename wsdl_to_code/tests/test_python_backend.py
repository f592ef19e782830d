"""
Tests for the Python backend.
"""

from __future__ import annotations

import ast

import pytest

from wsdl_to_code.pipeline.backends import PythonBackend
from wsdl_to_code.pipeline.config import GeneratorConfig
from wsdl_to_code.pipeline.model import ArrayType, ComplexType, EnumType, Operation, PatternType, ServiceClass


def render(types, operations=(), config=None, documentation="") -> str:
    backend = PythonBackend(config or GeneratorConfig())
    service_class = ServiceClass(name="Weather", documentation=documentation, operations=list(operations))
    return backend.generate(service_class, list(types))


class TestTypeTranslation:
    @pytest.fixture
    def backend(self):
        backend = PythonBackend(GeneratorConfig())
        backend.generate(ServiceClass(name="Empty"), [])
        return backend

    @pytest.mark.parametrize(
        "type_name,expected",
        [
            ("string", "str"),
            ("int", "int"),
            ("boolean", "bool"),
            ("double", "float"),
            ("base64Binary", "bytes"),
            ("void", "None"),
            ("string[]", "list[str]"),
            ("somethingElse", "Any"),
        ],
    )
    def test_builtin_types(self, backend, type_name, expected):
        assert backend.translate_type(type_name) == expected

    def test_module_types_record_imports(self, backend):
        assert backend.translate_type("dateTime") == "datetime.datetime"
        assert backend.translate_type("decimal") == "decimal.Decimal"
        assert backend.module_imports == {"datetime", "decimal"}


class TestRendering:
    def test_nullable_members_default_to_none(self):
        address = ComplexType(name="Address", identifier="Address")
        address.add_member("string", "street", False)
        address.add_member("string", "zip", True)
        code = render([address])

        assert "    street: str\n" in code
        assert "    zip: str | None = None\n" in code
        ast.parse(code)

    def test_member_names_become_identifiers(self):
        odd = ComplexType(name="Odd", identifier="Odd")
        odd.add_member("string", "class", False)
        odd.add_member("string", "first-name", False)
        code = render([odd])

        assert "    class_: str\n" in code
        assert "    first_name: str\n" in code

    def test_base_is_rendered_first(self):
        child = ComplexType(name="Child", identifier="Child")
        parent = ComplexType(name="Parent", identifier="Parent", abstract=True)
        child.set_base_type(parent)
        code = render([child, parent])

        assert code.index("class Parent(ABC):") < code.index("class Child(Parent):")
        assert "from abc import ABC" in code

    def test_base_outside_the_rendered_types_is_not_extended(self):
        child = ComplexType(name="Child", identifier="Child")
        child.set_base_type(ComplexType(name="Parent", identifier="Parent"))
        assert "class Child:" in render([child])

    def test_array_alias(self):
        item = ComplexType(name="Report", identifier="Report")
        reports = ArrayType(name="ArrayOfReport", identifier="ArrayOfReport")
        reports.add_member("Report[]", "Report", True)
        strings = ArrayType(name="ArrayOfString", identifier="ArrayOfString")
        strings.add_member("string[]", "string", True)
        code = render([reports, strings, item])

        assert "ArrayOfReport = list['Report']" in code
        assert "ArrayOfString = list[str]" in code

    def test_enum_member_names(self):
        enum_type = EnumType(name="Mode", identifier="Mode", values=["on", "off-line", "1st", "On"])
        code = render([enum_type])

        assert "    ON = 'on'" in code
        assert "    OFF_LINE = 'off-line'" in code
        assert "    VALUE_1ST = '1st'" in code
        assert "    ON_2 = 'On'" in code
        assert "from enum import Enum" in code

    def test_pattern_class(self):
        code = render([PatternType(name="ZipCode", identifier="ZipCode", value=r"\d{5}")])

        assert "class ZipCode(str):" in code
        assert r"PATTERN = re.compile('\\d{5}')" in code
        assert "import re" in code

    def test_service_methods(self):
        operations = [
            Operation(name="GetWeather", params={"parameters": "GetWeather"}, returns="GetWeatherResponse"),
            Operation(name="Ping", documentation='Checks the "service"'),
        ]
        code = render([], operations, documentation="Weather forecasts.")

        assert '    """Weather forecasts."""' in code
        assert "    def get_weather(self, parameters: Any) -> Any:" in code
        assert "return self._client.service['GetWeather'](parameters)" in code
        assert "    def ping(self) -> None:" in code
        assert "return self._client.service['Ping']()" in code
        ast.parse(code)

    def test_generation_comment(self):
        config = GeneratorConfig(generation_comment="wsdl_to_code weather.wsdl")
        assert render([], config=config).startswith("# Generated by wsdl_to_code weather.wsdl\n")

    def test_generation_comment_disabled(self):
        config = GeneratorConfig(add_generation_comment=False)
        assert render([], config=config).startswith("from __future__ import annotations\n")
