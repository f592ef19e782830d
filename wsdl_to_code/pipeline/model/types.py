"""
Type model definitions.

A classified type is exactly one of four variants, tagged by TypeKind.
Consumers dispatch on ``kind`` rather than probing classes, so the
variant set stays closed: ComplexType, ArrayType, EnumType, PatternType.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(Enum):
    """Kind of a classified schema type."""

    COMPLEX = "complex"  # A structure with ordered members
    ARRAY = "array"  # A structure wrapping one repeated member
    ENUM = "enum"  # A restriction to enumerated values
    PATTERN = "pattern"  # A restriction to a regular expression


@dataclass
class Member:
    """A member of a complex type."""

    name: str = ""
    type_name: str = ""
    nullable: bool = False

    @property
    def shape(self) -> str:
        return f"{self.name}:{self.type_name}{'?' if self.nullable else ''}"

    def to_dict(self) -> dict:
        return {"name": self.name, "type": self.type_name, "nullable": self.nullable}


@dataclass
class ComplexType:
    """A structure type."""

    name: str = ""  # Declared schema name
    identifier: str = ""  # Generated class name
    members: list[Member] = field(default_factory=list)
    base: ComplexType | None = None
    abstract: bool = False
    kind: TypeKind = field(default=TypeKind.COMPLEX, init=False)

    def add_member(self, type_name: str, name: str, nullable: bool) -> None:
        self.members.append(Member(name=name, type_name=type_name, nullable=nullable))

    def set_base_type(self, base: ComplexType) -> None:
        self.base = base

    @property
    def structural_id(self) -> str:
        """Shape signature, independent of the declared name."""
        abstract = "abstract " if self.abstract else ""
        members = ",".join(member.shape for member in self.members)
        return f"{abstract}{self.kind.value}({members})"


@dataclass
class ArrayType(ComplexType):
    """A structure wrapping a single repeated member."""

    kind: TypeKind = field(default=TypeKind.ARRAY, init=False)

    @property
    def item_type(self) -> str:
        """Type name of the array items (``[]`` suffix removed)."""
        if not self.members:
            return "anyType"
        return self.members[0].type_name.removesuffix("[]")


@dataclass
class EnumType:
    """A simple type restricted to enumerated values."""

    name: str = ""
    identifier: str = ""
    restriction: str | None = None
    values: list[str] = field(default_factory=list)
    kind: TypeKind = field(default=TypeKind.ENUM, init=False)

    def add_value(self, value: str) -> None:
        # values form an ordered set
        if value not in self.values:
            self.values.append(value)

    @property
    def structural_id(self) -> str:
        return f"{self.kind.value}<{self.restriction or ''}>({'|'.join(self.values)})"


@dataclass
class PatternType:
    """A simple type restricted to a regular expression."""

    name: str = ""
    identifier: str = ""
    restriction: str | None = None
    value: str = ""
    kind: TypeKind = field(default=TypeKind.PATTERN, init=False)

    def set_value(self, value: str) -> None:
        self.value = value

    @property
    def structural_id(self) -> str:
        return f"{self.kind.value}<{self.restriction or ''}>({self.value})"


SchemaType = ComplexType | ArrayType | EnumType | PatternType


def members_of(schema_type: SchemaType) -> list[Member]:
    """Ordered members of a type; simple types have none."""
    if schema_type.kind in (TypeKind.COMPLEX, TypeKind.ARRAY):
        return list(schema_type.members)
    if schema_type.kind in (TypeKind.ENUM, TypeKind.PATTERN):
        return []
    raise ValueError(f"Unknown type kind {schema_type.kind}")
