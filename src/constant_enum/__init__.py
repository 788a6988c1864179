"""
constant-enum - record-like registries for constant enums

Small classification tables (status, category, type) are declared in code
as ``name -> id`` mappings and queried like database records, without any
storage behind them.
"""
from __future__ import annotations

from .core import (
    ConstantEnumError,
    Entry,
    Identifiable,
    InvalidDeclarationError,
    RecordNotFound,
    Registry,
    SchemaValidationError,
    declare,
    load_declarations,
    parse_declarations,
)

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "ConstantEnumError",
    "Entry",
    "Identifiable",
    "InvalidDeclarationError",
    "RecordNotFound",
    "Registry",
    "SchemaValidationError",
    "declare",
    "load_declarations",
    "parse_declarations",
]
