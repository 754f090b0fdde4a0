"""Unit tests for the version store."""

import pytest

from lexiforge.audit import AuditLedger, VersionStore
from lexiforge.models import DocType, FieldSet


@pytest.fixture
def ledger():
    return AuditLedger()


@pytest.fixture
def store(ledger):
    return VersionStore(ledger=ledger)


class TestVersionStore:
    """Tests for saving and restoring versions."""

    def test_version_numbers_follow_save_order(self, store):
        v1 = store.save(FieldSet(client_name="A"), DocType.RETAINER)
        v2 = store.save(FieldSet(client_name="B"), DocType.RETAINER)
        v3 = store.save(FieldSet(client_name="C"), DocType.COLLECTION)

        assert [v.version for v in (v1, v2, v3)] == [1, 2, 3]
        assert v3.label == "Version 3.0"
        assert store.list() == (v3, v2, v1)
        assert store.latest() is v3
        assert len(store) == 3

    def test_snapshot_is_isolated_from_later_edits(self, store):
        field_set = FieldSet(client_name="Acme")
        version = store.save(field_set, DocType.RETAINER)

        field_set.set("client_name", "Changed")
        field_set.set("jurisdiction", "Texas")

        assert version.data.client_name == "Acme"
        assert version.data.jurisdiction == "New York"

    def test_restore_round_trip(self, store):
        field_set = FieldSet(client_name="Acme", jurisdiction="California")
        version = store.save(field_set, DocType.END_REP)

        restored, doc_type = store.restore(version)

        assert restored == field_set
        assert doc_type is DocType.END_REP

    def test_restored_copy_cannot_alter_history(self, store):
        version = store.save(FieldSet(client_name="Acme"), DocType.RETAINER)

        restored, _ = store.restore(version)
        restored.set("client_name", "Mutated")

        again, _ = store.restore(version)
        assert again.client_name == "Acme"
        assert version.data.client_name == "Acme"

    def test_listed_version_data_cannot_be_mutated(self, store):
        store.save(FieldSet(client_name="Acme"), DocType.RETAINER)

        store.list()[0].data.set("client_name", "Tampered")
        store.latest().data.set("jurisdiction", "Texas")

        stored = store.list()[0]
        assert stored.data.client_name == "Acme"
        assert stored.data.jurisdiction == "New York"
        assert stored.fields["client_name"] == "Acme"

    def test_snapshot_fields_are_read_only(self, store):
        version = store.save(FieldSet(client_name="Acme"), DocType.RETAINER)

        with pytest.raises(TypeError):
            version.fields["client_name"] = "Tampered"

    def test_numbers_continue_after_restore(self, store):
        v1 = store.save(FieldSet(), DocType.RETAINER)
        store.save(FieldSet(), DocType.RETAINER)
        store.restore(v1)

        assert store.save(FieldSet(), DocType.RETAINER).version == 3

    def test_get_by_id(self, store):
        version = store.save(FieldSet(), DocType.RETAINER)

        assert store.get(version.id) is version
        assert store.get("missing") is None

    def test_ledger_entries(self, store, ledger):
        version = store.save(FieldSet(), DocType.RETAINER, actor="Admin (Legal Lead)")
        store.restore(version, actor="Associate (Drafting)")

        restored_entry, saved_entry = ledger.entries()
        assert saved_entry.action == "Saved Version"
        assert saved_entry.detail == "Created Version 1.0"
        assert saved_entry.actor == "Admin (Legal Lead)"
        assert restored_entry.action == "Restored Version"
        assert restored_entry.detail == "Reverted to Version 1.0"
        assert restored_entry.actor == "Associate (Drafting)"

    def test_works_without_ledger(self):
        store = VersionStore()
        version = store.save(FieldSet(), DocType.FDD_REVIEW)
        restored, doc_type = store.restore(version)

        assert doc_type is DocType.FDD_REVIEW
        assert restored == version.data
        assert restored is not version.data

    def test_to_dict(self, store):
        version = store.save(FieldSet(client_name="Acme"), DocType.RETAINER)
        data = version.to_dict()

        assert data["version"] == 1
        assert data["label"] == "Version 1.0"
        assert data["doc_type"] == "retainer"
        assert data["data"]["client_name"] == "Acme"
        assert data["data"]["billing_type"] == "hourly"
