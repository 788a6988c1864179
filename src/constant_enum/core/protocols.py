"""Protocols for record-like values.

Registry entries satisfy ``Identifiable`` so they can stand in wherever a
persisted record with ``id``/``name`` is expected.
"""
from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class Identifiable(Protocol):
    """Protocol for records with a numeric id and a symbolic name."""

    @property
    def id(self) -> int:
        """Numeric record identifier."""
        ...

    @property
    def name(self) -> Any:
        """Symbolic record name."""
        ...


# Display-label collaborator, e.g. ``"asset_type" -> "Asset Type"``.
Titleizer = Callable[[str], str]


__all__ = ["Identifiable", "Titleizer"]
