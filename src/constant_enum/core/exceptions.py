"""Exceptions raised by constant enum registries.

Lookups that come back empty raise ``RecordNotFound``; bad declaration input
raises ``InvalidDeclarationError``. Both carry a ``context`` mapping so callers
can report structured errors.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


class ConstantEnumError(Exception):
    """Base exception for constant enum registries."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class InvalidDeclarationError(ConstantEnumError, ValueError):
    """Raised when a registry declaration is not a name -> id mapping."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        ConstantEnumError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class SchemaValidationError(InvalidDeclarationError):
    """Raised when a declarations document fails schema validation."""


class RecordNotFound(ConstantEnumError, LookupError):
    """Raised when an or-fail lookup matches no entry."""

    def __init__(
        self,
        message: str = "Record not found",
        *,
        entity_type: Optional[str] = None,
        criteria: Optional[Mapping[str, Any]] = None,
    ) -> None:
        criteria = dict(criteria or {})
        ConstantEnumError.__init__(
            self,
            message,
            context={"entity_type": entity_type, "criteria": criteria},
        )
        LookupError.__init__(self, message)
        self.entity_type = entity_type
        self.criteria = criteria


__all__ = [
    "ConstantEnumError",
    "InvalidDeclarationError",
    "SchemaValidationError",
    "RecordNotFound",
]
