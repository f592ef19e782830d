"""
Type registry builder.

Phase 2 of the pipeline. Runs two full, sequential passes over the
type nodes of a document:

1. classify every node into a type variant and register it,
2. link inheritance, once every node is registered, so that forward
   references to base types declared later resolve.
"""

from __future__ import annotations

import logging

from ...utils import class_identifier
from ..config import GeneratorConfig
from ..document.nodes import TypeNode
from .registry import TypeRegistry
from .types import ArrayType, ComplexType, EnumType, PatternType, SchemaType, TypeKind

logger = logging.getLogger(__name__)


def is_nullable(node: TypeNode, member_name: str) -> bool:
    """A member accepts null when it is nillable or may be absent."""
    return node.is_element_nillable(member_name) or node.get_element_min_occurs(member_name) == 0


def classify(node: TypeNode, config: GeneratorConfig) -> SchemaType | None:
    """
    Classify a type node into exactly one type variant.

    Precedence: complex (array when flagged), then enumeration, then
    pattern. Nodes matching none of these produce no type.

    Args:
        node: The raw type node
        config: Generator configuration (class naming)

    Returns:
        The classified type, or None for unsupported declarations
    """
    identifier = class_identifier(node.name, config.class_prefix, config.class_suffix)

    if node.is_complex:
        complex_type: ComplexType
        if node.is_array:
            complex_type = ArrayType(name=node.name, identifier=identifier)
        else:
            complex_type = ComplexType(name=node.name, identifier=identifier)
        complex_type.abstract = node.is_abstract
        for member_name, type_name in node.parts.items():
            complex_type.add_member(type_name, member_name, is_nullable(node, member_name))
        return complex_type

    if node.enumerations:
        enum_type = EnumType(name=node.name, identifier=identifier, restriction=node.restriction)
        for value in node.enumerations:
            enum_type.add_value(value)
        return enum_type

    if node.pattern:
        pattern_type = PatternType(name=node.name, identifier=identifier, restriction=node.restriction)
        pattern_type.set_value(node.pattern)
        return pattern_type

    return None


class TypeRegistryBuilder:
    """Classifies type nodes into a registry and links inheritance."""

    def __init__(self, config: GeneratorConfig, registry: TypeRegistry | None = None):
        """
        Initialize the builder.

        Args:
            config: Generator configuration
            registry: Registry to fill; several documents may share one
        """
        self.config = config
        self.registry = registry if registry is not None else TypeRegistry()

    def build(self, nodes: list[TypeNode]) -> TypeRegistry:
        """Run both passes over the nodes and return the registry."""
        logger.info("Loading types")
        self.load_types(nodes)
        self.link_inheritance(nodes)
        logger.info("Done loading types")
        return self.registry

    def load_types(self, nodes: list[TypeNode]) -> None:
        """First pass: classify and register every node."""
        for node in nodes:
            schema_type = classify(node, self.config)
            if schema_type is None:
                logger.debug("Type %s matches no supported declaration, skipping", node.name)
                continue

            logger.debug("Loading type %s", schema_type.identifier)
            if not self.registry.register(node.name, schema_type, deduplicate=self.config.shared_types):
                existing = self.registry.find_by_structural_id(schema_type.structural_id)
                logger.debug("Type %s shares its structure with %s, skipping", node.name, existing.name)

    def link_inheritance(self, nodes: list[TypeNode]) -> None:
        """Second pass: attach base types that resolve to registered complex types."""
        for node in nodes:
            if not node.base:
                continue
            schema_type = self.registry.get(node.name)
            base_type = self.registry.get(node.base)
            if schema_type is None or schema_type.kind not in (TypeKind.COMPLEX, TypeKind.ARRAY):
                continue
            if base_type is None or base_type.kind is not TypeKind.COMPLEX:
                logger.debug("Base %s of %s is not a registered complex type", node.base, node.name)
                continue
            schema_type.set_base_type(base_type)
