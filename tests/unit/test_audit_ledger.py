"""Unit tests for the audit ledger."""

import csv
import io
import json
from datetime import datetime, timedelta, timezone

import pytest

from lexiforge.audit import AuditLedger, DEFAULT_CAPACITY
from lexiforge.models import AuditAction


@pytest.fixture
def ledger():
    return AuditLedger()


class TestAuditLedger:
    """Tests for recording and retention."""

    def test_record_returns_entry(self, ledger):
        entry = ledger.record("Admin (Legal Lead)", AuditAction.MODIFIED_FIELD, "Updated Client Name: Acme")

        assert entry.id
        assert entry.action == "Modified Field"
        assert entry.actor == "Admin (Legal Lead)"
        assert entry.detail == "Updated Client Name: Acme"
        assert entry.timestamp.tzinfo is not None
        assert ledger.entries() == (entry,)

    def test_most_recent_first(self, ledger):
        first = ledger.record("a", AuditAction.MODIFIED_FIELD, "one")
        second = ledger.record("a", AuditAction.MODIFIED_FIELD, "two")

        assert ledger.entries() == (second, first)

    def test_capacity_drops_oldest(self, ledger):
        for i in range(60):
            ledger.record("a", AuditAction.MODIFIED_FIELD, f"edit {i}")

        entries = ledger.entries()
        assert len(entries) == DEFAULT_CAPACITY == 50
        assert entries[0].detail == "edit 59"
        assert entries[-1].detail == "edit 10"

    def test_entry_ids_are_unique(self, ledger):
        for i in range(20):
            ledger.record("a", AuditAction.MODIFIED_FIELD, str(i))
        ids = [e.id for e in ledger.entries()]
        assert len(set(ids)) == len(ids)

    def test_entries_is_a_snapshot(self, ledger):
        ledger.record("a", AuditAction.MODIFIED_FIELD, "one")
        snapshot = ledger.entries()
        ledger.record("a", AuditAction.MODIFIED_FIELD, "two")

        assert len(snapshot) == 1
        assert len(ledger) == 2

    def test_custom_capacity(self):
        ledger = AuditLedger(capacity=3)
        for i in range(5):
            ledger.record("a", AuditAction.MODIFIED_FIELD, str(i))
        assert [e.detail for e in ledger.entries()] == ["4", "3", "2"]

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            AuditLedger(capacity=0)


class TestAuditLedgerQueries:
    """Tests for filtering and export."""

    def test_filter_by_action_and_actor(self, ledger):
        ledger.record("Admin (Legal Lead)", AuditAction.JURISDICTION_CHANGE, "Applied rules for: Texas")
        ledger.record("Associate (Drafting)", AuditAction.MODIFIED_FIELD, "Updated Client Name: A")
        ledger.record("Admin (Legal Lead)", AuditAction.MODIFIED_FIELD, "Updated Client Name: B")

        modified = ledger.get_entries(action=AuditAction.MODIFIED_FIELD)
        assert [e.detail for e in modified] == ["Updated Client Name: B", "Updated Client Name: A"]

        admin = ledger.get_entries(actor="Admin (Legal Lead)")
        assert len(admin) == 2

        both = ledger.get_entries(action="Modified Field", actor="Associate (Drafting)")
        assert [e.detail for e in both] == ["Updated Client Name: A"]

    def test_filter_by_time(self, ledger):
        ledger.record("a", AuditAction.MODIFIED_FIELD, "x")
        now = datetime.now(timezone.utc)

        assert len(ledger.get_entries(start_time=now - timedelta(minutes=1))) == 1
        assert ledger.get_entries(start_time=now + timedelta(minutes=1)) == []
        assert ledger.get_entries(end_time=now - timedelta(minutes=1)) == []

    def test_export_json(self, ledger):
        ledger.record("a", AuditAction.SESSION_INITIATED, "LexiForge secure session started.")
        data = json.loads(ledger.export_log("json"))

        assert data["entry_count"] == 1
        assert data["capacity"] == 50
        assert data["entries"][0]["action"] == "Session Initiated"

    def test_export_csv(self, ledger):
        ledger.record("a", AuditAction.MODIFIED_FIELD, "Updated Client Name: Smith, Jones")
        rows = list(csv.reader(io.StringIO(ledger.export_log("csv"))))

        assert rows[0] == ["id", "timestamp", "actor", "action", "detail"]
        assert rows[1][4] == "Updated Client Name: Smith, Jones"

    def test_export_unsupported_format(self, ledger):
        with pytest.raises(ValueError, match="Unsupported export format"):
            ledger.export_log("xml")
