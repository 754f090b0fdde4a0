"""Audit ledger and version store interfaces for LexiForge."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from ..models.enums import AuditAction, DocType
from ..models.fields import FieldSet


@dataclass(frozen=True)
class AuditEntry:
    """
    Audit ledger record.

    Entries are immutable once recorded.
    """
    id: str
    timestamp: datetime
    actor: str
    action: str
    detail: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "actor": self.actor,
            "action": self.action,
            "detail": self.detail,
        }


@dataclass(frozen=True)
class DocumentVersion:
    """
    Saved snapshot of the form data and document type.

    ``fields`` is a read-only mapping of the field values at save time.
    ``data`` builds a new FieldSet from it on every access, so neither
    the live FieldSet nor a caller holding ``data`` can alter the version.
    """
    id: str
    timestamp: datetime
    fields: Mapping[str, Any]
    doc_type: DocType
    version: int

    @classmethod
    def snapshot(
        cls,
        field_set: FieldSet,
        doc_type: DocType,
        version: int,
        id: str,
        timestamp: datetime,
    ) -> "DocumentVersion":
        return cls(
            id=id,
            timestamp=timestamp,
            fields=MappingProxyType(field_set.to_dict()),
            doc_type=doc_type,
            version=version,
        )

    @property
    def data(self) -> FieldSet:
        """A fresh FieldSet holding the saved values."""
        return FieldSet.from_dict(self.fields)

    @property
    def label(self) -> str:
        return f"Version {self.version}.0"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "version": self.version,
            "label": self.label,
            "doc_type": self.doc_type.value,
            "data": dict(self.fields),
        }


class IAuditLedger(ABC):
    """
    Abstract interface for the session audit trail.

    The ledger is append-only: there is no way to edit or delete an entry.
    """

    @abstractmethod
    def record(self, actor: str, action: AuditAction, detail: str) -> AuditEntry:
        """
        Append an entry.

        Args:
            actor: Label of the user role performing the action.
            action: Fixed action label.
            detail: Free-text detail built from the changed value.

        Returns:
            The recorded entry.
        """
        pass

    @abstractmethod
    def entries(self) -> Tuple[AuditEntry, ...]:
        """Return all retained entries, most recent first."""
        pass


class IVersionStore(ABC):
    """Abstract interface for document version history."""

    @abstractmethod
    def save(self, field_set: FieldSet, doc_type: DocType, actor: str = "System") -> DocumentVersion:
        """
        Snapshot the field set and document type as a new version.

        Returns:
            The created version.
        """
        pass

    @abstractmethod
    def list(self) -> Sequence[DocumentVersion]:
        """Return all versions, most recent first."""
        pass

    @abstractmethod
    def get(self, version_id: str) -> Optional[DocumentVersion]:
        """Look up a version by id."""
        pass

    @abstractmethod
    def restore(self, version: DocumentVersion, actor: str = "System") -> Tuple[FieldSet, DocType]:
        """
        Return the stored state of ``version`` for the caller to apply.

        Returns:
            Tuple of (independent FieldSet copy, document type).
        """
        pass
