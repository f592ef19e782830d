"""
Service, operation and method entities.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...utils import class_identifier, pascal_to_snake_case
from ..config import GeneratorConfig
from .registry import TypeRegistry
from .types import Member, SchemaType


@dataclass
class Operation:
    """An operation of the service, in document order."""

    name: str = ""
    params: dict[str, str] = field(default_factory=dict)  # param name -> type name
    returns: str = "void"
    documentation: str = ""

    @property
    def request_type_name(self) -> str | None:
        """Type of the wrapped request body.

        The request body is the operation's single parameter; operations
        with no parameter or several unwrapped parameters have none.
        """
        if len(self.params) != 1:
            return None
        return next(iter(self.params.values()))

    @property
    def method_name(self) -> str:
        return pascal_to_snake_case(self.name)


@dataclass
class Method:
    """A callable bound to resolved request and response types."""

    name: str = ""
    request_type: str = ""
    response_type: str = ""
    params_in: list[Member] = field(default_factory=list)
    params_out: list[Member] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "request_type": self.request_type,
            "response_type": self.response_type,
            "params_in": [member.to_dict() for member in self.params_in],
            "params_out": [member.to_dict() for member in self.params_out],
        }


@dataclass
class Location:
    """An endpoint where the service can be reached."""

    url: str = ""

    def to_dict(self) -> dict:
        return {"url": self.url}


@dataclass
class ServiceClass:
    """Render model of the generated service class."""

    name: str = ""
    documentation: str = ""
    operations: list[Operation] = field(default_factory=list)


class Service:
    """The service of a loaded description."""

    def __init__(self, config: GeneratorConfig, name: str, registry: TypeRegistry, documentation: str = ""):
        """
        Initialize the service.

        Args:
            config: Generator configuration (class naming)
            name: Declared service name
            registry: The type registry the service was built with
            documentation: Service documentation
        """
        self.config = config
        self.name = name
        self.registry = registry
        self.documentation = documentation
        # operation name -> operation, in declaration order
        self._operations: dict[str, Operation] = {}

    @property
    def identifier(self) -> str:
        return class_identifier(self.name, self.config.class_prefix, self.config.class_suffix)

    @property
    def types(self) -> list[SchemaType]:
        return self.registry.types

    @property
    def operations(self) -> list[Operation]:
        return list(self._operations.values())

    def add_operation(self, operation: Operation) -> None:
        """Add an operation; a later declaration of a name replaces the earlier one in place."""
        self._operations[operation.name] = operation

    def get_operation(self, name: str) -> Operation | None:
        return self._operations.get(name)

    def get_class(self) -> ServiceClass:
        return ServiceClass(name=self.identifier, documentation=self.documentation, operations=self.operations)
