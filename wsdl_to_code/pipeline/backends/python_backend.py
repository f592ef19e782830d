"""
Python code generation backend.

Generates a Python client module from a service and its types:
dataclasses for complex types, list aliases for array types, Enum
classes for enumerations, validating str subclasses for patterns and
one service class forwarding calls to a SOAP client.
"""

from __future__ import annotations

import re
from typing import Any

from ...utils import to_python_identifier
from ..config import GeneratorConfig
from ..model.service import Operation, ServiceClass
from ..model.types import ComplexType, SchemaType, TypeKind
from .base import CodeBackend

_ENUM_MEMBER_PATTERN = re.compile(r"[^0-9a-zA-Z]+")


class PythonBackend(CodeBackend):
    """Python code generation backend."""

    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"

    TYPE_MAP = {
        "string": "str",
        "normalizedString": "str",
        "token": "str",
        "anyURI": "str",
        "QName": "str",
        "NCName": "str",
        "Name": "str",
        "ID": "str",
        "IDREF": "str",
        "language": "str",
        "duration": "str",
        "int": "int",
        "integer": "int",
        "long": "int",
        "short": "int",
        "byte": "int",
        "unsignedInt": "int",
        "unsignedLong": "int",
        "unsignedShort": "int",
        "unsignedByte": "int",
        "positiveInteger": "int",
        "negativeInteger": "int",
        "nonNegativeInteger": "int",
        "nonPositiveInteger": "int",
        "boolean": "bool",
        "float": "float",
        "double": "float",
        "decimal": "decimal.Decimal",
        "dateTime": "datetime.datetime",
        "date": "datetime.date",
        "time": "datetime.time",
        "base64Binary": "bytes",
        "hexBinary": "bytes",
        "anyType": "Any",
        "void": "None",
    }

    def __init__(self, config: GeneratorConfig):
        super().__init__(config)
        self.python_imports: set[tuple[str, str]] = set()
        self.module_imports: set[str] = set()
        self._types_by_name: dict[str, SchemaType] = {}

    def generate(self, service_class: ServiceClass, types: list[SchemaType]) -> str:
        """Generate the client module."""
        # Reset import tracking
        self.python_imports = {("dataclasses", "dataclass")}
        self.module_imports = set()
        self._types_by_name = {schema_type.name: schema_type for schema_type in types}

        simple_types = [t for t in types if t.kind in (TypeKind.ENUM, TypeKind.PATTERN)]
        complex_types = self._order_by_inheritance([t for t in types if t.kind is TypeKind.COMPLEX])
        array_types = [t for t in types if t.kind is TypeKind.ARRAY]

        class_content = ""
        for schema_type in [*simple_types, *complex_types, *array_types]:
            rendered = self.class_template.render(self._prepare_type_context(schema_type))
            class_content += rendered + "\n\n"

        service_content = self.service_template.render(self._prepare_service_context(service_class))

        comment = ""
        if self.config.add_generation_comment:
            comment = self.config.generation_comment or "wsdl_to_code"

        prefix = self.prefix_template.render(
            generation_comment=comment,
            required_imports=self._assemble_imports(),
        )

        return prefix + class_content + service_content

    def translate_type(self, type_name: str) -> str:
        """Translate a schema type name to a Python type string."""
        if type_name.endswith("[]"):
            return f"list[{self.translate_type(type_name[:-2])}]"

        schema_type = self._types_by_name.get(type_name)
        if schema_type is not None:
            return schema_type.identifier

        python_type = self.TYPE_MAP.get(type_name, "Any")
        if python_type == "Any":
            self.python_imports.add(("typing", "Any"))
        elif "." in python_type:
            self.module_imports.add(python_type.split(".", 1)[0])
        return python_type

    def _order_by_inheritance(self, types: list[SchemaType]) -> list[SchemaType]:
        """Order complex types so that every base precedes its subclasses."""
        ordered: list[SchemaType] = []
        placed: set[int] = set()
        rendered = {id(t) for t in types}

        def place(schema_type: SchemaType, visiting: set[int]) -> None:
            if id(schema_type) in placed or id(schema_type) in visiting:
                return
            visiting.add(id(schema_type))
            base = schema_type.base
            if base is not None and id(base) in rendered:
                place(base, visiting)
            placed.add(id(schema_type))
            ordered.append(schema_type)

        for schema_type in types:
            place(schema_type, set())
        return ordered

    def _prepare_type_context(self, schema_type: SchemaType) -> dict[str, Any]:
        """
        Prepare the template context for a type.

        Args:
            schema_type: The classified type

        Returns:
            Dictionary of template variables
        """
        context: dict[str, Any] = {
            "KIND": schema_type.kind.value,
            "CLASS_NAME": schema_type.identifier,
            "ORIGINAL_NAME": schema_type.name,
        }
        if schema_type.kind is TypeKind.ARRAY:
            item_type = self.translate_type(schema_type.item_type)
            # Quote generated classes: aliases are evaluated at import time
            is_class = schema_type.item_type in self._types_by_name
            context["ITEM_TYPE"] = repr(item_type) if is_class else item_type
        elif schema_type.kind is TypeKind.COMPLEX:
            context.update(self._prepare_complex_context(schema_type))
        elif schema_type.kind is TypeKind.ENUM:
            self.python_imports.add(("enum", "Enum"))
            context["enum"] = self._enum_members(schema_type.values)
        elif schema_type.kind is TypeKind.PATTERN:
            self.module_imports.add("re")
            context["PATTERN"] = schema_type.value
        else:
            raise ValueError(f"Unknown type kind {schema_type.kind}")
        return context

    def _prepare_complex_context(self, complex_type: ComplexType) -> dict[str, Any]:
        extends = None
        if complex_type.base is not None and complex_type.base.name in self._types_by_name:
            extends = complex_type.base.identifier
        elif complex_type.abstract:
            extends = "ABC"
            self.python_imports.add(("abc", "ABC"))

        properties = []
        for member in complex_type.members:
            type_str = self.translate_type(member.type_name)
            properties.append(
                {
                    "name": to_python_identifier(member.name),
                    "original_name": member.name,
                    "type": f"{type_str} | None" if member.nullable else type_str,
                    "init": "None" if member.nullable else None,
                }
            )
        return {"EXTENDS": extends, "properties": properties}

    def _enum_members(self, values: list[str]) -> dict[str, str]:
        """Map enumeration values to unique upper-case member names."""
        members: dict[str, str] = {}
        for value in values:
            name = _ENUM_MEMBER_PATTERN.sub("_", value).strip("_").upper() or "EMPTY"
            if name[0].isdigit():
                name = f"VALUE_{name}"
            candidate, index = name, 2
            while candidate in members:
                candidate = f"{name}_{index}"
                index += 1
            members[candidate] = value
        return members

    def _prepare_service_context(self, service_class: ServiceClass) -> dict[str, Any]:
        self.python_imports.add(("typing", "Any"))
        return {
            "CLASS_NAME": service_class.name,
            "DOCUMENTATION": service_class.documentation,
            "methods": [self._prepare_operation_context(operation) for operation in service_class.operations],
        }

    def _prepare_operation_context(self, operation: Operation) -> dict[str, Any]:
        params = [{"name": to_python_identifier(name), "type": self.translate_type(type_name)} for name, type_name in operation.params.items()]
        return {
            "name": to_python_identifier(operation.method_name),
            "operation": operation.name,
            "params": params,
            "returns": self.translate_type(operation.returns),
            "documentation": operation.documentation,
        }

    def _assemble_imports(self) -> list[str]:
        """Assemble import lines: module imports first, then from-imports."""
        lines = [f"import {module}" for module in sorted(self.module_imports)]
        grouped: dict[str, list[str]] = {}
        for module, name in sorted(self.python_imports):
            grouped.setdefault(module, []).append(name)
        lines.extend(f"from {module} import {', '.join(names)}" for module, names in grouped.items())
        return lines
