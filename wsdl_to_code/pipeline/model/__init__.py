"""
Model module.

Contains the classified type variants, the type registry and its
builder, and the service entities.
"""

from __future__ import annotations

from .builder import TypeRegistryBuilder, classify, is_nullable
from .registry import TypeRegistry
from .service import Location, Method, Operation, Service, ServiceClass
from .types import ArrayType, ComplexType, EnumType, Member, PatternType, SchemaType, TypeKind, members_of

__all__ = [
    "TypeKind",
    "Member",
    "ComplexType",
    "ArrayType",
    "EnumType",
    "PatternType",
    "SchemaType",
    "members_of",
    "TypeRegistry",
    "TypeRegistryBuilder",
    "classify",
    "is_nullable",
    "Operation",
    "Method",
    "Location",
    "Service",
    "ServiceClass",
]
