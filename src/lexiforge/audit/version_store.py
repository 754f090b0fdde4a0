"""Version history of (FieldSet, document type) snapshots."""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from ..interfaces.audit import DocumentVersion, IAuditLedger, IVersionStore
from ..models.enums import AuditAction, DocType
from ..models.fields import FieldSet


logger = logging.getLogger(__name__)


class VersionStore(IVersionStore):
    """
    In-memory version history.

    Versions are numbered from 1 in save order and kept most recent
    first. A saved version is never modified or removed.
    """

    def __init__(self, ledger: Optional[IAuditLedger] = None):
        """
        Initialize the version store.

        Args:
            ledger: Optional audit ledger that receives save/restore entries.
        """
        self._versions: List[DocumentVersion] = []
        self.ledger = ledger

    def save(self, field_set: FieldSet, doc_type: DocType, actor: str = "System") -> DocumentVersion:
        """
        Snapshot ``field_set`` and ``doc_type`` as the next version.

        Args:
            field_set: Live form data; its values are copied into a read-only snapshot.
            doc_type: Active document type.
            actor: Audit actor label.

        Returns:
            The created DocumentVersion.
        """
        version = DocumentVersion.snapshot(
            field_set,
            doc_type,
            version=len(self._versions) + 1,
            id=str(uuid.uuid4()),
            timestamp=datetime.now(timezone.utc),
        )
        self._versions.insert(0, version)

        if self.ledger is not None:
            self.ledger.record(actor, AuditAction.SAVED_VERSION, f"Created {version.label}")
        logger.info(f"Saved {version.label} ({doc_type.value})")
        return version

    def list(self) -> Tuple[DocumentVersion, ...]:
        """Return all versions, most recent first."""
        return tuple(self._versions)

    def get(self, version_id: str) -> Optional[DocumentVersion]:
        """Look up a version by id."""
        for version in self._versions:
            if version.id == version_id:
                return version
        return None

    def latest(self) -> Optional[DocumentVersion]:
        return self._versions[0] if self._versions else None

    def __len__(self) -> int:
        return len(self._versions)

    def restore(self, version: DocumentVersion, actor: str = "System") -> Tuple[FieldSet, DocType]:
        """
        Return the state stored in ``version``.

        The returned FieldSet is a fresh copy, so mutating it cannot
        alter history.

        Args:
            version: The version to restore.
            actor: Audit actor label.

        Returns:
            Tuple of (FieldSet copy, document type).
        """
        if self.ledger is not None:
            self.ledger.record(actor, AuditAction.RESTORED_VERSION, f"Reverted to {version.label}")
        logger.info(f"Restored {version.label} ({version.doc_type.value})")
        return version.data, version.doc_type
