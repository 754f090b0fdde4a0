"""Session controller: orchestrates edits, resolution, audit and versions."""

import asyncio
import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Union

from ..audit.audit_ledger import AuditLedger
from ..audit.version_store import VersionStore
from ..config.models import Settings
from ..exceptions import ClauseNotFoundError, UnknownDocumentTypeError
from ..explain.clause_explainer import GeminiClauseExplainer
from ..interfaces.audit import DocumentVersion
from ..interfaces.explainer import IClauseExplainer
from ..models.enums import AuditAction, DocType, UserRole
from ..models.fields import FieldSet
from ..models.template import DocumentTemplate, ResolutionResult
from ..registry.template_registry import TemplateRegistry, get_default_registry
from ..resolver.template_resolver import TemplateResolver


logger = logging.getLogger(__name__)


def new_field_set(settings: Settings) -> FieldSet:
    """FieldSet with firm defaults taken from settings."""
    return FieldSet(
        firm_name=settings.firm_name,
        attorney_name=settings.attorney_name,
        jurisdiction=settings.jurisdiction,
    )


@dataclass
class SessionContext:
    """
    All mutable state of one drafting session.

    The ledger and version store outlive document-type switches.
    """
    field_set: FieldSet
    ledger: AuditLedger
    versions: VersionStore
    doc_type: DocType = DocType.RETAINER
    user_role: UserRole = UserRole.ADMIN
    is_final: bool = False
    session_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class SessionController:
    """
    Entry point for the form/UI layer.

    Routes field edits into the FieldSet and the audit ledger, switches
    the active document type, saves and restores versions, and exposes
    the resolved section list for rendering.
    """

    def __init__(
        self,
        registry: Optional[TemplateRegistry] = None,
        settings: Optional[Settings] = None,
        explainer: Optional[IClauseExplainer] = None,
        doc_type: DocType = DocType.RETAINER,
    ):
        """
        Start a new session.

        Args:
            registry: Template registry. Defaults to the built-in catalog.
            settings: Runtime settings. Defaults to ``Settings()``.
            explainer: Clause explanation service. Defaults to Gemini.
            doc_type: Initially active document type.
        """
        self.settings = settings or Settings()
        self.registry = registry or get_default_registry()
        self.resolver = TemplateResolver(self.registry)
        self.explainer = explainer or GeminiClauseExplainer.from_settings(self.settings)

        if doc_type not in self.registry:
            raise UnknownDocumentTypeError(
                f"Unknown document type: {doc_type.value}", doc_type=doc_type.value
            )

        ledger = AuditLedger(capacity=self.settings.audit_capacity)
        self.context = SessionContext(
            field_set=new_field_set(self.settings),
            ledger=ledger,
            versions=VersionStore(ledger=ledger),
            doc_type=doc_type,
        )
        self._pending_explanations: Dict[str, asyncio.Future] = {}

        self._record(AuditAction.SESSION_INITIATED, "LexiForge secure session started.")
        logger.info(f"Session {self.session_id} started")

    # =========================================================================
    # State accessors
    # =========================================================================

    @property
    def session_id(self) -> str:
        return self.context.session_id

    @property
    def field_set(self) -> FieldSet:
        return self.context.field_set

    @property
    def doc_type(self) -> DocType:
        return self.context.doc_type

    @property
    def user_role(self) -> UserRole:
        return self.context.user_role

    @property
    def is_final(self) -> bool:
        return self.context.is_final

    @property
    def ledger(self) -> AuditLedger:
        return self.context.ledger

    @property
    def versions(self) -> VersionStore:
        return self.context.versions

    @property
    def active_template(self) -> DocumentTemplate:
        return self.registry.get_template(self.context.doc_type)

    @property
    def actor(self) -> str:
        return self.context.user_role.actor_label

    # =========================================================================
    # Inbound operations
    # =========================================================================

    def edit_field(self, name: str, value: Any) -> None:
        """
        Write one field and record it when the field is audited.

        The core does not refuse edits while the draft is final; gating
        input is up to the caller.
        """
        self.context.field_set.set(name, value)
        self._audit_field_change(name)

    def update_fields(self, changes: Mapping[str, Any]) -> None:
        """Apply a partial update; all changes are validated before any is written."""
        self.context.field_set.update(changes)
        for name in changes:
            self._audit_field_change(name)

    def switch_doc_type(self, doc_type: Union[DocType, str]) -> DocumentTemplate:
        """
        Change the active document type. Field values are kept.

        Raises:
            UnknownDocumentTypeError: If the type is not in the registry.
        """
        template = self.registry.get_template(doc_type)
        if template is None:
            value = doc_type.value if isinstance(doc_type, DocType) else str(doc_type)
            raise UnknownDocumentTypeError(f"Unknown document type: {value}", doc_type=value)
        self.context.doc_type = template.id
        return template

    def save_version(self) -> DocumentVersion:
        """Snapshot the current fields and document type."""
        return self.context.versions.save(
            self.context.field_set, self.context.doc_type, actor=self.actor
        )

    def restore_version(self, version_id: str) -> Optional[DocumentVersion]:
        """
        Restore a saved version into the live session.

        Returns:
            The restored version, or None when ``version_id`` is unknown.
            An unknown id changes nothing and records nothing.
        """
        version = self.context.versions.get(version_id)
        if version is None:
            logger.info(f"Restore ignored: unknown version {version_id}")
            return None
        field_set, doc_type = self.context.versions.restore(version, actor=self.actor)
        self.context.field_set = field_set
        self.context.doc_type = doc_type
        return version

    def toggle_role(self) -> UserRole:
        """
        Flip between Admin and Legal Associate. Has no enforcement effect.

        The entry is recorded under the role that made the switch.
        """
        new_role = self.context.user_role.toggled()
        self._record(AuditAction.SECURITY_ELEVATION, f"Switched to {new_role.value}")
        self.context.user_role = new_role
        return self.context.user_role

    def toggle_final(self) -> bool:
        """Flip between drafting and final review. Advisory only."""
        self.context.is_final = not self.context.is_final
        return self.context.is_final

    # =========================================================================
    # Outbound views
    # =========================================================================

    def resolve(self) -> ResolutionResult:
        """Resolve the active template against the current fields."""
        return self.resolver.resolve(self.active_template, self.context.field_set)

    async def explain_clause(self, clause_id: str) -> str:
        """
        Explain a clause of the active template in plain English.

        Concurrent requests for the same clause share one service call.

        Raises:
            ClauseNotFoundError: If the active template has no such clause.
        """
        template = self.active_template
        clause = template.get_clause(clause_id)
        if clause is None:
            raise ClauseNotFoundError(
                f"Clause '{clause_id}' not found in {template.name}", clause_id=clause_id
            )

        key = f"{template.id.value}:{clause.id}"
        pending = self._pending_explanations.get(key)
        # A future left behind by a loop that has since closed can never complete here.
        if pending is not None and pending.get_loop() is not asyncio.get_running_loop():
            pending = None
        if pending is None:
            pending = asyncio.ensure_future(
                self.explainer.explain(clause.title, clause.content, fallback=clause.explanation)
            )
            self._pending_explanations[key] = pending
            pending.add_done_callback(lambda f: self._release_explanation(key, f))
        return await pending

    def _release_explanation(self, key: str, future: asyncio.Future) -> None:
        if self._pending_explanations.get(key) is future:
            del self._pending_explanations[key]

    def to_dict(self) -> Dict[str, Any]:
        """Serializable snapshot of the session state."""
        return {
            "session_id": self.context.session_id,
            "created_at": self.context.created_at.isoformat(),
            "doc_type": self.context.doc_type.value,
            "user_role": self.context.user_role.value,
            "is_final": self.context.is_final,
            "fields": self.context.field_set.to_dict(),
            "version_count": len(self.context.versions),
            "audit_count": len(self.context.ledger),
        }

    # =========================================================================
    # Audit helpers
    # =========================================================================

    def _record(self, action: AuditAction, detail: str) -> None:
        self.context.ledger.record(self.actor, action, detail)

    def _audit_field_change(self, name: str) -> None:
        if name not in self.settings.audited_fields:
            return
        value = self.context.field_set.get(name)
        if name == "jurisdiction":
            self._record(AuditAction.JURISDICTION_CHANGE, f"Applied rules for: {value}")
        elif name == "client_name":
            self._record(AuditAction.MODIFIED_FIELD, f"Updated Client Name: {value}")
        else:
            label = name.replace("_", " ").title()
            shown = value.value if hasattr(value, "value") else value
            self._record(AuditAction.MODIFIED_FIELD, f"Updated {label}: {shown}")
