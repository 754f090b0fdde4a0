"""FastAPI application exposing LexiForge drafting sessions.

Sessions live in process memory and are lost on restart.

Usage (from project root, after installing fastapi and uvicorn):

    uvicorn lexiforge.api.app:app --reload

Then POST /api/sessions to start a session and drive it with the
field, document-type, version and role endpoints.
"""

import logging
from typing import Any, Callable, Dict, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse, JSONResponse, Response
from pydantic import BaseModel, Field

from ..config.models import Settings
from ..config.settings import load_settings
from ..exceptions import (
    ClauseNotFoundError,
    FieldValueError,
    UnknownDocumentTypeError,
    UnknownFieldError,
)
from ..export.docx_exporter import DocxExporter, export_filename
from ..export.preview_renderer import PreviewRenderer
from ..interfaces.explainer import IClauseExplainer
from ..models.enums import DocType
from ..registry.template_registry import TemplateRegistry, get_default_registry
from ..session.session_controller import SessionController


logger = logging.getLogger(__name__)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class SessionCreateRequest(BaseModel):
    doc_type: Optional[str] = None


class FieldUpdateRequest(BaseModel):
    fields: Dict[str, Any] = Field(default_factory=dict)


class DocTypeRequest(BaseModel):
    doc_type: str


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[TemplateRegistry] = None,
    explainer_factory: Optional[Callable[[], IClauseExplainer]] = None,
) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Runtime settings. Defaults to ``load_settings()``.
        registry: Template registry. Defaults to the built-in catalog.
        explainer_factory: Builds the clause explainer for each new session.
    """
    settings = settings or load_settings()
    registry = registry or get_default_registry()
    sessions: Dict[str, SessionController] = {}
    renderer = PreviewRenderer()
    exporter = DocxExporter(output_dir=settings.output_dir)

    app = FastAPI(title="LexiForge API", version="0.1.0")

    def _get_session(session_id: str) -> SessionController:
        session = sessions.get(session_id)
        if session is None:
            raise HTTPException(status_code=404, detail=f"Session {session_id} not found")
        return session

    def _document_payload(session: SessionController) -> Dict[str, Any]:
        payload = session.resolve().to_dict()
        payload["name"] = session.active_template.name
        return payload

    @app.get("/api/templates")
    async def list_templates() -> JSONResponse:
        return JSONResponse(content={"templates": [t.to_dict() for t in registry.templates()]})

    @app.post("/api/sessions", status_code=201)
    async def create_session(request: Optional[SessionCreateRequest] = None) -> JSONResponse:
        doc_type = DocType.RETAINER
        if request is not None and request.doc_type:
            template = registry.get_template(request.doc_type)
            if template is None:
                raise HTTPException(status_code=422, detail=f"Unknown document type: {request.doc_type}")
            doc_type = template.id

        explainer = explainer_factory() if explainer_factory else None
        session = SessionController(
            registry=registry, settings=settings, explainer=explainer, doc_type=doc_type
        )
        sessions[session.session_id] = session
        logger.info(f"API session created: {session.session_id} ({doc_type.value})")
        return JSONResponse(status_code=201, content=session.to_dict())

    @app.get("/api/sessions/{session_id}")
    async def get_session(session_id: str) -> JSONResponse:
        return JSONResponse(content=_get_session(session_id).to_dict())

    @app.patch("/api/sessions/{session_id}/fields")
    async def update_fields(session_id: str, request: FieldUpdateRequest) -> JSONResponse:
        session = _get_session(session_id)
        if session.is_final:
            raise HTTPException(
                status_code=409,
                detail="Draft is locked for final review. Unlock it to make further edits.",
            )
        try:
            session.update_fields(request.fields)
        except (UnknownFieldError, FieldValueError) as e:
            raise HTTPException(status_code=422, detail=e.to_dict())
        return JSONResponse(content=session.to_dict())

    @app.put("/api/sessions/{session_id}/doc-type")
    async def switch_doc_type(session_id: str, request: DocTypeRequest) -> JSONResponse:
        session = _get_session(session_id)
        try:
            session.switch_doc_type(request.doc_type)
        except UnknownDocumentTypeError as e:
            raise HTTPException(status_code=422, detail=e.to_dict())
        return JSONResponse(content=session.to_dict())

    @app.get("/api/sessions/{session_id}/document")
    async def get_document(session_id: str) -> JSONResponse:
        return JSONResponse(content=_document_payload(_get_session(session_id)))

    @app.post("/api/sessions/{session_id}/versions", status_code=201)
    async def save_version(session_id: str) -> JSONResponse:
        version = _get_session(session_id).save_version()
        return JSONResponse(status_code=201, content=version.to_dict())

    @app.get("/api/sessions/{session_id}/versions")
    async def list_versions(session_id: str) -> JSONResponse:
        session = _get_session(session_id)
        return JSONResponse(content={"versions": [v.to_dict() for v in session.versions.list()]})

    @app.post("/api/sessions/{session_id}/versions/{version_id}/restore")
    async def restore_version(session_id: str, version_id: str) -> JSONResponse:
        session = _get_session(session_id)
        version = session.restore_version(version_id)
        if version is None:
            raise HTTPException(status_code=404, detail=f"Version {version_id} not found")
        return JSONResponse(content=session.to_dict())

    @app.post("/api/sessions/{session_id}/role")
    async def toggle_role(session_id: str) -> JSONResponse:
        session = _get_session(session_id)
        session.toggle_role()
        return JSONResponse(content=session.to_dict())

    @app.post("/api/sessions/{session_id}/final")
    async def toggle_final(session_id: str) -> JSONResponse:
        session = _get_session(session_id)
        session.toggle_final()
        return JSONResponse(content=session.to_dict())

    @app.get("/api/sessions/{session_id}/audit")
    async def get_audit(session_id: str) -> JSONResponse:
        session = _get_session(session_id)
        return JSONResponse(content={"entries": [e.to_dict() for e in session.ledger.entries()]})

    @app.get("/api/sessions/{session_id}/audit/export")
    async def export_audit(session_id: str, format: str = Query("json")) -> Response:
        session = _get_session(session_id)
        try:
            content = session.ledger.export_log(format=format)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        media_type = "application/json" if format == "json" else "text/csv"
        return Response(content=content, media_type=media_type)

    @app.get("/api/sessions/{session_id}/preview", response_class=HTMLResponse)
    async def preview(session_id: str) -> HTMLResponse:
        session = _get_session(session_id)
        html = renderer.render(session.active_template, session.resolve(), session.field_set)
        return HTMLResponse(content=html)

    @app.get("/api/sessions/{session_id}/export/docx")
    async def export_docx(session_id: str) -> Response:
        session = _get_session(session_id)
        template = session.active_template
        content = exporter.export_bytes(template, session.resolve(), session.field_set)
        filename = export_filename(template, session.field_set)
        return Response(
            content=content,
            media_type=DOCX_MEDIA_TYPE,
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.post("/api/sessions/{session_id}/clauses/{clause_id}/explain")
    async def explain_clause(session_id: str, clause_id: str) -> JSONResponse:
        session = _get_session(session_id)
        try:
            explanation = await session.explain_clause(clause_id)
        except ClauseNotFoundError as e:
            raise HTTPException(status_code=404, detail=e.to_dict())
        return JSONResponse(content={"clause_id": clause_id, "explanation": explanation})

    return app


app = create_app()
