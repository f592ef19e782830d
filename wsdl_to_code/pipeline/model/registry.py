"""
Registry of classified types.

Types are looked up by declared name when binding operations, and by
structural identifier when deduplicating shared types. The two keys
live in separate maps so that "same name" and "same shape" never collide.
"""

from __future__ import annotations

from collections.abc import Iterator

from .types import SchemaType


class TypeRegistry:
    """Ordered registry of classified types."""

    def __init__(self):
        self._by_name: dict[str, SchemaType] = {}
        self._by_structural_id: dict[str, SchemaType] = {}

    def register(self, name: str, schema_type: SchemaType, deduplicate: bool = False) -> bool:
        """
        Register a type under its declared name.

        Args:
            name: Declared schema name
            schema_type: The classified type
            deduplicate: Skip the type if one with the same shape is registered

        Returns:
            True if the type was registered, False if it was discarded as a duplicate
        """
        structural_id = schema_type.structural_id
        if deduplicate and structural_id in self._by_structural_id:
            return False
        previous = self._by_name.get(name)
        self._by_name[name] = schema_type
        if previous is not None and previous is not schema_type:
            self._forget_structure(previous)
        self._by_structural_id.setdefault(structural_id, schema_type)
        return True

    def _forget_structure(self, replaced: SchemaType) -> None:
        """Point the shape of a replaced type at a surviving type, or drop it."""
        structural_id = replaced.structural_id
        if self._by_structural_id.get(structural_id) is not replaced:
            return
        del self._by_structural_id[structural_id]
        for schema_type in self._by_name.values():
            if schema_type.structural_id == structural_id:
                self._by_structural_id[structural_id] = schema_type
                break

    def get(self, name: str | None) -> SchemaType | None:
        if name is None:
            return None
        return self._by_name.get(name)

    def find_by_structural_id(self, structural_id: str) -> SchemaType | None:
        return self._by_structural_id.get(structural_id)

    @property
    def names(self) -> list[str]:
        return list(self._by_name)

    @property
    def types(self) -> list[SchemaType]:
        """Registered types in registration order."""
        return list(self._by_name.values())

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[SchemaType]:
        return iter(self.types)

    def __len__(self) -> int:
        return len(self._by_name)
