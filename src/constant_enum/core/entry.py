"""Immutable registry entries.

An entry is one named, identified member of a registry. Entries declared with
an attribute map expose every key of that map as a read-only attribute::

    >>> photo = AssetType.find(1)
    >>> photo.bucket
    'photos'
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from constant_enum.utils.text import slugify, titleize

from .protocols import Titleizer

# Attribute lookups for these never fall through to the attribute map.
_NATIVE_FIELDS = frozenset({"name", "id", "attributes", "enum_type", "titleizer"})


@dataclass(frozen=True)
class Entry:
    """One member of a constant enum registry.

    Attributes:
        name: Symbolic name, unique within its registry
        id: Numeric identifier
        attributes: Extra fields from an attribute-map declaration, or None
        enum_type: Type name of the owning registry
        titleizer: Display-label function used by ``title``
    """

    name: Any
    id: int
    attributes: Optional[Mapping[str, Any]] = field(default=None, hash=False)
    enum_type: str = ""
    titleizer: Titleizer = field(default=titleize, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        if self.attributes is not None:
            object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __getattr__(self, item: str) -> Any:
        # Only reached when normal lookup fails.
        if item.startswith("__") or item in _NATIVE_FIELDS:
            raise AttributeError(item)
        attributes = self.__dict__.get("attributes")
        if attributes is not None and item in attributes:
            return attributes[item]
        owner = self.enum_type or type(self).__name__
        raise AttributeError(f"{owner} entry {self.name!r} has no attribute {item!r}")

    def __reduce__(self) -> Tuple[Any, ...]:
        # mappingproxy cannot be pickled or deep-copied.
        attributes = dict(self.attributes) if self.attributes is not None else None
        return (type(self), (self.name, self.id, attributes, self.enum_type, self.titleizer))

    @property
    def slug(self) -> str:
        return slugify(self.name)

    @property
    def title(self) -> str:
        return self.titleizer(str(self.name))

    def __str__(self) -> str:
        return str(self.name)

    def to_param(self) -> str:
        """Return the id as text, for use as an opaque external identifier."""
        return str(self.id)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict of name, id and declared attributes."""
        result: Dict[str, Any] = {"name": self.name, "id": self.id}
        if self.attributes is not None:
            result.update(self.attributes)
        return result


__all__ = ["Entry"]
