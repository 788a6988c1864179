"""In-memory registry for constant enums.

A registry maps a fixed set of symbolic names to numeric ids and answers
record-store style queries against them. It is built once from a literal
declaration and is read-only afterwards::

    Genre = Registry.declare("Genre", {"skate": 1, "surf": 2, "snow": 3, "bike": 4})

    Genre["surf"]                    # 2
    Genre.find(3).title              # "Snow"
    Genre.SNOW                       # 3

    AssetType = Registry.declare("AssetType", {
        "photo": {"id": 1, "type": "jpg", "bucket": "photos"},
        "video": {"id": 2, "type": "mp4", "bucket": "videos"},
    })

    AssetType.where(type="mp4")      # [Entry(name='video', ...)]

A registry created without a declaration (``Registry("Empty")``) has no
mapping at all: ``enum()``, ``ids()`` and ``names()`` return None and any
query over entries raises ``RecordNotFound``.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from constant_enum.utils.text import constant_name, titleize as default_titleize

from .entry import Entry
from .exceptions import InvalidDeclarationError, RecordNotFound
from .protocols import Titleizer

logger = logging.getLogger(__name__)


class Registry:
    """Read-only registry of named, identified entries.

    Attributes:
        type_name: Name of the declared enum type, used in error messages
    """

    def __init__(self, type_name: str, *, titleize: Titleizer = default_titleize) -> None:
        """Create an undeclared registry.

        Use ``Registry.declare`` to build one with entries.
        """
        self.type_name = type_name
        self._titleize = titleize
        self._enum: Optional[Dict[Any, Any]] = None
        self._by_name: Optional[Dict[Any, Entry]] = None
        self._by_id: Optional[Dict[Any, Entry]] = None
        self._constants: Optional[Dict[str, Any]] = None

    @classmethod
    def declare(
        cls,
        type_name: str,
        entries: Mapping[Any, Any],
        *,
        titleize: Titleizer = default_titleize,
    ) -> "Registry":
        """Build a registry from a ``name -> id`` or ``name -> {id: ..., ...}`` mapping.

        Args:
            type_name: Name of the enum type (e.g. "Genre")
            entries: Ordered mapping of names to ids or attribute maps
            titleize: Display-label function for titles and dropdowns

        Returns:
            Declared registry

        Raises:
            InvalidDeclarationError: If entries is not a mapping, or an
                attribute map has no ``id``
        """
        registry = cls(type_name, titleize=titleize)
        registry._load(entries)
        return registry

    def _load(self, entries: Mapping[Any, Any]) -> None:
        if not isinstance(entries, Mapping):
            raise InvalidDeclarationError(
                f"{self.type_name} must be declared with a mapping of name: id, "
                f"got {type(entries).__name__}",
                context={"entity_type": self.type_name},
            )

        enum: Dict[Any, Any] = {}
        by_name: Dict[Any, Entry] = {}
        declared_at: Dict[Any, int] = {}
        constants: Dict[str, Any] = {}

        for position, (name, value) in enumerate(entries.items()):
            if isinstance(value, Mapping):
                if "id" not in value:
                    raise InvalidDeclarationError(
                        f"{self.type_name}.{name} attribute map has no 'id'",
                        context={"entity_type": self.type_name, "name": name},
                    )
                entry = self.build(name, value["id"], value)
            else:
                entry = self.build(name, value)

            if name in by_name:
                logger.warning("%s: duplicate name %r replaces earlier entry", self.type_name, name)

            enum[name] = entry.id
            by_name[name] = entry
            declared_at[name] = position

            const = constant_name(name)
            if not const:
                logger.debug("%s: name %r yields no constant", self.type_name, name)
            elif const in constants:
                logger.debug("%s: constant %s already bound, keeping first", self.type_name, const)
            else:
                constants[const] = entry.id

        # Only live entries are indexed; on a shared id the latest declaration wins.
        by_id: Dict[Any, Entry] = {}
        for name in sorted(by_name, key=declared_at.__getitem__):
            entry = by_name[name]
            if entry.id in by_id:
                logger.warning(
                    "%s: id %r of %r shadows %r for id lookups",
                    self.type_name, entry.id, name, by_id[entry.id].name,
                )
            by_id[entry.id] = entry

        self._enum = enum
        self._by_name = by_name
        self._by_id = by_id
        self._constants = constants
        logger.debug("Declared %s with %d entries", self.type_name, len(by_name))

    def build(self, name: Any, id: Any, attributes: Optional[Mapping[str, Any]] = None) -> Entry:
        """Create an entry owned by this registry without registering it."""
        return Entry(
            name=name,
            id=id,
            attributes=attributes,
            enum_type=self.type_name,
            titleizer=self._titleize,
        )

    # ---------- Declaration views ----------

    @property
    def declared(self) -> bool:
        return self._by_name is not None

    def enum(self) -> Optional[Dict[Any, Any]]:
        """Return the name -> id mapping, e.g. for an ORM enum field."""
        return dict(self._enum) if self._enum is not None else None

    def ids(self) -> Optional[List[Any]]:
        return list(self._enum.values()) if self._enum is not None else None

    def names(self) -> Optional[List[Any]]:
        return list(self._enum.keys()) if self._enum is not None else None

    @property
    def constants(self) -> Optional[Mapping[str, Any]]:
        """Derived constants such as ``{"SKATE": 1}``; first declared wins."""
        if self._constants is None:
            return None
        return MappingProxyType(self._constants)

    def __getattr__(self, item: str) -> Any:
        if item.startswith("_"):
            raise AttributeError(item)
        constants = self.__dict__.get("_constants")
        if constants is not None and item in constants:
            return constants[item]
        raise AttributeError(f"{self.__dict__.get('type_name', 'Registry')} has no constant {item!r}")

    # ---------- Queries ----------

    def _entries(self) -> Dict[Any, Entry]:
        if self._by_name is None:
            raise RecordNotFound(
                f"Couldn't find {self.type_name}: no entries have been declared",
                entity_type=self.type_name,
            )
        return self._by_name

    def all(self) -> List[Entry]:
        return self.where()

    def where(self, criteria: Optional[Mapping[str, Any]] = None, /, **kwargs: Any) -> List[Entry]:
        """Return entries matching every criterion, in declaration order.

        ``where()`` with no criteria returns everything. ``name`` is compared
        as text; every other field is compared with ``==`` against the entry
        attribute of that name, so unknown fields raise ``AttributeError``.
        """
        entries = self._entries()
        conditions = {**(criteria or {}), **kwargs}
        return [entry for entry in entries.values() if _matches(entry, conditions)]

    def find_by(self, criteria: Optional[Mapping[str, Any]] = None, /, **kwargs: Any) -> Optional[Entry]:
        results = self.where(criteria, **kwargs)
        return results[0] if results else None

    def find_by_or_fail(self, criteria: Optional[Mapping[str, Any]] = None, /, **kwargs: Any) -> Entry:
        """Return the first entry matching the criteria.

        Raises:
            RecordNotFound: If nothing matches
        """
        conditions = {**(criteria or {}), **kwargs}
        entry = self.find_by(conditions)
        if entry is None:
            raise RecordNotFound(
                f"Couldn't find {self.type_name} with {_describe(conditions)}",
                entity_type=self.type_name,
                criteria=conditions,
            )
        return entry

    def find(self, id: Any) -> Entry:
        """Return the entry with this id; the last declared wins on duplicates.

        Raises:
            RecordNotFound: If no entry has this id
        """
        self._entries()  # raises when undeclared
        entry = (self._by_id or {}).get(id)
        if entry is None:
            raise RecordNotFound(
                f"Couldn't find {self.type_name} with {_describe({'id': id})}",
                entity_type=self.type_name,
                criteria={"id": id},
            )
        return entry

    def find_by_id(self, id: Any) -> Optional[Entry]:
        try:
            return self.find(id)
        except RecordNotFound:
            return None

    def find_by_name_or_fail(self, name: Any) -> Entry:
        return self.find_by_or_fail(name=name)

    def find_by_name(self, name: Any) -> Optional[Entry]:
        try:
            return self.find_by_name_or_fail(name)
        except RecordNotFound:
            return None

    def find_by_slug_or_fail(self, slug: str) -> Entry:
        return self.find_by_or_fail(slug=slug)

    def find_by_slug(self, slug: str) -> Optional[Entry]:
        try:
            return self.find_by_slug_or_fail(slug)
        except RecordNotFound:
            return None

    def __getitem__(self, key: Any) -> Any:
        """``Genre["surf"]`` and ``Genre[2]`` both return the id."""
        if isinstance(key, int) and not isinstance(key, bool):
            return self.find(key).id
        return self.find_by_name_or_fail(key).id

    def __contains__(self, key: Any) -> bool:
        if not self.declared:
            return False
        if isinstance(key, Entry):
            return key in self._entries().values()
        if isinstance(key, int) and not isinstance(key, bool):
            return self.find_by_id(key) is not None
        return self.find_by_name(key) is not None

    def count(self) -> int:
        return len(self._entries())

    def dropdown(self) -> List[Tuple[str, Any]]:
        """Return ``(title, name)`` pairs for populating a select box."""
        return [(self._titleize(str(name)), name) for name in self._entries()]

    def slugs(self) -> List[str]:
        """Return every slug, e.g. for route constraints."""
        return [entry.slug for entry in self.all()]

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.all())

    def find_each(self) -> Iterator[Entry]:
        yield from self

    def __repr__(self) -> str:
        if not self.declared:
            return f"<Registry {self.type_name} (undeclared)>"
        return f"<Registry {self.type_name}: {self.count()} entries>"


def _matches(entry: Entry, conditions: Mapping[str, Any]) -> bool:
    for key, expected in conditions.items():
        if str(key) == "name":
            if str(entry.name) != str(expected):
                return False
        elif getattr(entry, key) != expected:
            return False
    return True


def _describe(conditions: Mapping[str, Any]) -> str:
    return " ".join(f"{key}={value!r}" for key, value in conditions.items())


declare = Registry.declare


__all__ = ["Registry", "declare"]
