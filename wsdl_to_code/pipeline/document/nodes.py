"""
Raw document node definitions.

These nodes mirror the service description as parsed, before any
classification: names are local (namespace prefixes stripped) and
nothing is resolved against other nodes.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TypeNode:
    """One data-type declaration of a schema."""

    name: str = ""
    is_complex: bool = False
    is_array: bool = False
    is_abstract: bool = False

    # member name -> type name, in declaration order
    parts: dict[str, str] = field(default_factory=dict)

    # Per-member occurrence attributes, only for declared attributes
    nillable: dict[str, bool] = field(default_factory=dict)
    min_occurs: dict[str, int] = field(default_factory=dict)

    # Simple type restrictions
    enumerations: list[str] = field(default_factory=list)
    pattern: str | None = None
    restriction: str | None = None

    # Base type of a complexContent extension/restriction
    base: str | None = None

    def is_element_nillable(self, name: str) -> bool:
        """Whether the member explicitly accepts a nil value."""
        return self.nillable.get(name, False)

    def get_element_min_occurs(self, name: str) -> int | None:
        """The declared minOccurs of a member, None when not declared."""
        return self.min_occurs.get(name)


@dataclass
class OperationNode:
    """One operation of a port type."""

    name: str = ""

    # parameter name -> type name, in message part order
    params: dict[str, str] = field(default_factory=dict)
    returns: str = "void"
    documentation: str = ""


@dataclass
class ServiceNode:
    """The service declaration of a document."""

    name: str = ""
    documentation: str = ""
