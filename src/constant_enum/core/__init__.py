"""Registry engine for constant enums.

- **Registry**: declaration, indexes and record-store style queries
- **Entry**: immutable named, identified member of a registry
- **Loader**: YAML declarations validated against the bundled schema
- **Exceptions**: InvalidDeclarationError, RecordNotFound
"""
from __future__ import annotations

from .entry import Entry
from .exceptions import (
    ConstantEnumError,
    InvalidDeclarationError,
    RecordNotFound,
    SchemaValidationError,
)
from .loader import (
    build_registries,
    load_declarations,
    parse_declarations,
    validate_declarations,
)
from .protocols import Identifiable, Titleizer
from .registry import Registry, declare

__all__ = [
    # Registry
    "Registry",
    "declare",
    "Entry",
    # Protocols
    "Identifiable",
    "Titleizer",
    # Loading
    "build_registries",
    "load_declarations",
    "parse_declarations",
    "validate_declarations",
    # Exceptions
    "ConstantEnumError",
    "InvalidDeclarationError",
    "RecordNotFound",
    "SchemaValidationError",
]
