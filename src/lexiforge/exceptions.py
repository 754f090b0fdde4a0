"""Custom exceptions for document assembly and session handling."""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class LexiForgeError(Exception):
    """
    Base exception for LexiForge runtime errors.

    Attributes:
        message: Human-readable error description.
        details: Additional error details.
    """
    message: str
    details: Optional[dict] = field(default_factory=dict)

    def __post_init__(self):
        if self.details is None:
            self.details = {}
        super().__init__(str(self))

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


@dataclass
class UnknownFieldError(LexiForgeError):
    """Raised when a field name is not part of the FieldSet key set."""
    field_name: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if self.field_name:
            self.details.setdefault("field_name", self.field_name)


@dataclass
class FieldValueError(LexiForgeError):
    """Raised when a value has the wrong type for its field."""
    field_name: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if self.field_name:
            self.details.setdefault("field_name", self.field_name)


@dataclass
class UnknownDocumentTypeError(LexiForgeError):
    """Raised when switching to a document type missing from the catalog."""
    doc_type: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if self.doc_type:
            self.details.setdefault("doc_type", self.doc_type)


@dataclass
class ClauseNotFoundError(LexiForgeError):
    """Raised when a clause id does not exist in the active template."""
    clause_id: Optional[str] = None

    def __post_init__(self):
        super().__post_init__()
        if self.clause_id:
            self.details.setdefault("clause_id", self.clause_id)
