"""
Service filters applied before rendering.
"""

from __future__ import annotations

import logging

from .config import GeneratorConfig
from .model.registry import TypeRegistry
from .model.service import Service
from .model.types import TypeKind, members_of

logger = logging.getLogger(__name__)


class DefaultFilter:
    """Passes the service through unchanged."""

    def filter(self, service: Service) -> Service:
        return service


class OperationFilter:
    """Keeps the selected operations and the types they reach."""

    def __init__(self, operation_names: list[str]):
        self.operation_names = list(operation_names)

    def filter(self, service: Service) -> Service:
        """
        Build a service restricted to the selected operations.

        Types are kept when reachable from a kept operation's parameters
        or return type, through members and base types. Kept types stay
        in registration order.
        """
        registry = TypeRegistry()
        filtered = Service(service.config, service.name, registry, service.documentation)

        wanted: set[str] = set()
        for operation in service.operations:
            if operation.name not in self.operation_names:
                continue
            filtered.add_operation(operation)
            self._collect([*operation.params.values(), operation.returns], service.registry, wanted)

        missing = set(self.operation_names) - {operation.name for operation in filtered.operations}
        for name in sorted(missing):
            logger.warning("Operation %s not found in service %s", name, service.name)

        for name in service.registry.names:
            if name in wanted:
                registry.register(name, service.registry.get(name))
        return filtered

    def _collect(self, type_names: list[str], registry: TypeRegistry, wanted: set[str]) -> None:
        pending = [type_name.removesuffix("[]") for type_name in type_names]
        while pending:
            name = pending.pop()
            schema_type = registry.get(name)
            if name in wanted or schema_type is None:
                continue
            wanted.add(name)
            pending.extend(member.type_name.removesuffix("[]") for member in members_of(schema_type))
            if schema_type.kind in (TypeKind.COMPLEX, TypeKind.ARRAY) and schema_type.base is not None:
                pending.append(schema_type.base.name)


def create_filter(config: GeneratorConfig) -> DefaultFilter | OperationFilter:
    """Create the filter matching the configuration."""
    if config.operation_names:
        return OperationFilter(config.operation_names)
    return DefaultFilter()
