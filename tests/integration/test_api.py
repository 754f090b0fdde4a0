"""Integration tests for the HTTP API."""

import io

import pytest
from docx import Document
from fastapi.testclient import TestClient

from lexiforge.api.app import DOCX_MEDIA_TYPE, create_app
from lexiforge.config import Settings
from lexiforge.interfaces.explainer import IClauseExplainer


class StaticExplainer(IClauseExplainer):

    async def explain(self, title, content, fallback=None):
        return f"Plain English: {title}"


@pytest.fixture
def client(tmp_path):
    app = create_app(
        settings=Settings(output_dir=str(tmp_path)),
        explainer_factory=StaticExplainer,
    )
    return TestClient(app)


@pytest.fixture
def session_id(client):
    response = client.post("/api/sessions", json={})
    assert response.status_code == 201
    return response.json()["session_id"]


class TestSessions:
    """Tests for session lifecycle endpoints."""

    def test_list_templates(self, client):
        templates = client.get("/api/templates").json()["templates"]
        assert [t["id"] for t in templates] == ["retainer", "end_rep", "collection", "fdd_review"]

    def test_create_with_doc_type(self, client):
        response = client.post("/api/sessions", json={"doc_type": "collection"})
        assert response.status_code == 201
        assert response.json()["doc_type"] == "collection"

    def test_create_unknown_doc_type(self, client):
        assert client.post("/api/sessions", json={"doc_type": "will"}).status_code == 422

    def test_unknown_session(self, client):
        assert client.get("/api/sessions/nope").status_code == 404

    def test_get_session(self, client, session_id):
        data = client.get(f"/api/sessions/{session_id}").json()
        assert data["session_id"] == session_id
        assert data["audit_count"] == 1


class TestDrafting:
    """Tests for the drafting workflow over HTTP."""

    def test_edit_and_resolve(self, client, session_id):
        response = client.patch(
            f"/api/sessions/{session_id}/fields",
            json={"fields": {"client_name": "Acme Corp", "jurisdiction": "California"}},
        )
        assert response.status_code == 200
        assert response.json()["fields"]["client_name"] == "Acme Corp"

        document = client.get(f"/api/sessions/{session_id}/document").json()
        ids = [s["id"] for s in document["sections"]]
        assert document["name"] == "Retainer Agreement"
        assert "ca_disclosure" in ids
        assert document["missing_fields"] == ["matter_description"]

    def test_invalid_field(self, client, session_id):
        response = client.patch(
            f"/api/sessions/{session_id}/fields", json={"fields": {"nickname": "x"}}
        )
        assert response.status_code == 422
        assert response.json()["detail"]["details"]["field_name"] == "nickname"

    def test_invalid_value(self, client, session_id):
        response = client.patch(
            f"/api/sessions/{session_id}/fields", json={"fields": {"billing_type": "barter"}}
        )
        assert response.status_code == 422

    def test_final_review_blocks_edits(self, client, session_id):
        assert client.post(f"/api/sessions/{session_id}/final").json()["is_final"] is True

        response = client.patch(
            f"/api/sessions/{session_id}/fields", json={"fields": {"client_name": "Acme"}}
        )
        assert response.status_code == 409

        client.post(f"/api/sessions/{session_id}/final")
        response = client.patch(
            f"/api/sessions/{session_id}/fields", json={"fields": {"client_name": "Acme"}}
        )
        assert response.status_code == 200

    def test_switch_doc_type(self, client, session_id):
        response = client.put(f"/api/sessions/{session_id}/doc-type", json={"doc_type": "end_rep"})
        assert response.json()["doc_type"] == "end_rep"

        response = client.put(f"/api/sessions/{session_id}/doc-type", json={"doc_type": "will"})
        assert response.status_code == 422

    def test_versions(self, client, session_id):
        client.patch(f"/api/sessions/{session_id}/fields", json={"fields": {"client_name": "Acme"}})
        saved = client.post(f"/api/sessions/{session_id}/versions")
        assert saved.status_code == 201
        version_id = saved.json()["id"]

        client.patch(f"/api/sessions/{session_id}/fields", json={"fields": {"client_name": "Other"}})
        versions = client.get(f"/api/sessions/{session_id}/versions").json()["versions"]
        assert [v["label"] for v in versions] == ["Version 1.0"]

        restored = client.post(f"/api/sessions/{session_id}/versions/{version_id}/restore")
        assert restored.json()["fields"]["client_name"] == "Acme"

        missing = client.post(f"/api/sessions/{session_id}/versions/nope/restore")
        assert missing.status_code == 404

    def test_role_and_audit(self, client, session_id):
        assert client.post(f"/api/sessions/{session_id}/role").json()["user_role"] == "Legal Associate"

        entries = client.get(f"/api/sessions/{session_id}/audit").json()["entries"]
        assert entries[0]["action"] == "Security Elevation"
        assert entries[-1]["action"] == "Session Initiated"

    def test_audit_export(self, client, session_id):
        response = client.get(f"/api/sessions/{session_id}/audit/export", params={"format": "csv"})
        assert response.status_code == 200
        assert response.text.startswith("id,timestamp,actor,action,detail")

        response = client.get(f"/api/sessions/{session_id}/audit/export", params={"format": "xml"})
        assert response.status_code == 400


class TestOutputs:
    """Tests for preview, export and explanations."""

    def test_preview(self, client, session_id):
        response = client.get(f"/api/sessions/{session_id}/preview")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Retainer Agreement" in response.text

    def test_docx_export(self, client, session_id):
        client.patch(f"/api/sessions/{session_id}/fields", json={"fields": {"client_name": "Acme"}})
        response = client.get(f"/api/sessions/{session_id}/export/docx")

        assert response.status_code == 200
        assert response.headers["content-type"] == DOCX_MEDIA_TYPE
        assert 'filename="Retainer Agreement_Acme.docx"' in response.headers["content-disposition"]
        texts = [p.text for p in Document(io.BytesIO(response.content)).paragraphs]
        assert "RETAINER AGREEMENT" in texts

    def test_explain_clause(self, client, session_id):
        response = client.post(f"/api/sessions/{session_id}/clauses/scope/explain")
        assert response.json() == {
            "clause_id": "scope",
            "explanation": "Plain English: Scope of Representation",
        }

    def test_explain_unknown_clause(self, client, session_id):
        response = client.post(f"/api/sessions/{session_id}/clauses/nope/explain")
        assert response.status_code == 404
