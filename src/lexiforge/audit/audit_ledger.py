"""In-memory audit ledger for LexiForge sessions."""

import csv
import io
import json
import uuid
from collections import deque
from datetime import datetime, timezone
from typing import List, Optional, Tuple, Union

from ..interfaces.audit import AuditEntry, IAuditLedger
from ..models.enums import AuditAction


DEFAULT_CAPACITY = 50


class AuditLedger(IAuditLedger):
    """
    Append-only audit trail with fixed capacity.

    New entries go to the front. Once the ledger holds ``capacity``
    entries, recording another discards the oldest one.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize the ledger.

        Args:
            capacity: Maximum number of retained entries.
        """
        if capacity < 1:
            raise ValueError("Audit ledger capacity must be at least 1")
        self._capacity = capacity
        self._entries: deque = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def record(
        self,
        actor: str,
        action: Union[AuditAction, str],
        detail: str,
    ) -> AuditEntry:
        """
        Record an audit entry, timestamped at capture time.

        Args:
            actor: Label of the acting role.
            action: Action label.
            detail: Free-text detail.

        Returns:
            The recorded entry.
        """
        entry = AuditEntry(
            id=str(uuid.uuid4()),
            timestamp=datetime.now(timezone.utc),
            actor=actor,
            action=action.value if isinstance(action, AuditAction) else action,
            detail=detail,
        )
        # appendleft on a bounded deque drops from the right (oldest) end
        self._entries.appendleft(entry)
        return entry

    def entries(self) -> Tuple[AuditEntry, ...]:
        """Return all retained entries, most recent first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get_entries(
        self,
        action: Optional[Union[AuditAction, str]] = None,
        actor: Optional[str] = None,
        start_time: Optional[datetime] = None,
        end_time: Optional[datetime] = None,
    ) -> List[AuditEntry]:
        """
        Query retained entries with optional filters.

        Args:
            action: Filter by action label.
            actor: Filter by actor label.
            start_time: Filter entries at or after this time.
            end_time: Filter entries at or before this time.

        Returns:
            Matching entries, most recent first.
        """
        if isinstance(action, AuditAction):
            action = action.value

        result = []
        for entry in self._entries:
            if action and entry.action != action:
                continue
            if actor and entry.actor != actor:
                continue
            if start_time and entry.timestamp < start_time:
                continue
            if end_time and entry.timestamp > end_time:
                continue
            result.append(entry)
        return result

    def export_log(self, format: str = "json") -> str:
        """
        Export the retained entries.

        Args:
            format: Export format ("json" or "csv").

        Returns:
            Exported log content as a string.

        Raises:
            ValueError: If format is not supported.
        """
        if format not in ("json", "csv"):
            raise ValueError(f"Unsupported export format: {format}. Use 'json' or 'csv'.")

        entries = self.entries()
        if format == "json":
            return self._export_json(entries)
        return self._export_csv(entries)

    def _export_json(self, entries: Tuple[AuditEntry, ...]) -> str:
        """Export entries to JSON format."""
        data = {
            "export_timestamp": datetime.now(timezone.utc).isoformat(),
            "entry_count": len(entries),
            "capacity": self._capacity,
            "entries": [e.to_dict() for e in entries],
        }
        return json.dumps(data, indent=2, ensure_ascii=False)

    def _export_csv(self, entries: Tuple[AuditEntry, ...]) -> str:
        """Export entries to CSV format."""
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(["id", "timestamp", "actor", "action", "detail"])
        for e in entries:
            writer.writerow([e.id, e.timestamp.isoformat(), e.actor, e.action, e.detail])
        return output.getvalue()
