"""Template and resolution data models for LexiForge."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .enums import ClauseTag, DocType, RuleOperator


@dataclass(frozen=True)
class VisibilityRule:
    """
    Data-driven visibility condition over a single field.

    ``EQUALS`` compares against ``value`` (enum members compare by value),
    ``CONTAINS`` is a case-insensitive substring test, ``IS_TRUE`` checks
    truthiness and ignores ``value``.
    """
    field: str
    operator: RuleOperator
    value: Any = None

    def describe(self) -> str:
        if self.operator is RuleOperator.IS_TRUE:
            return f"{self.field} is true"
        return f"{self.field} {self.operator.value} {self.value!r}"


# A clause condition is either a rule or the name of a registered predicate.
Condition = Union[VisibilityRule, str]


@dataclass(frozen=True)
class ClauseDefinition:
    """
    Clause of a document template.

    ``content`` holds ``{{field_name}}`` placeholders. ``is_immutable``
    marks mandated legal language; the core does not enforce it.
    """
    id: str
    title: str
    content: str
    condition: Optional[Condition] = None
    tag: ClauseTag = ClauseTag.STANDARD
    is_immutable: bool = False
    explanation: Optional[str] = None

    @property
    def is_conditional(self) -> bool:
        return self.condition is not None


@dataclass(frozen=True)
class DocumentTemplate:
    """Catalog entry for one document type."""
    id: DocType
    name: str
    description: str
    clauses: Tuple[ClauseDefinition, ...] = ()
    required_fields: Tuple[str, ...] = ()

    def get_clause(self, clause_id: str) -> Optional[ClauseDefinition]:
        for clause in self.clauses:
            if clause.id == clause_id:
                return clause
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id.value,
            "name": self.name,
            "description": self.description,
            "required_fields": list(self.required_fields),
            "clauses": [
                {
                    "id": c.id,
                    "title": c.title,
                    "tag": c.tag.value,
                    "is_immutable": c.is_immutable,
                    "is_conditional": c.is_conditional,
                }
                for c in self.clauses
            ],
        }


@dataclass
class ResolvedSection:
    """A visible clause with its placeholders substituted."""
    id: str
    title: str
    content: str
    tag: ClauseTag
    is_immutable: bool
    explanation: Optional[str] = None

    @property
    def is_logic_driven(self) -> bool:
        """True for clauses included because of jurisdiction or billing rules."""
        return self.tag in (ClauseTag.JURISDICTION, ClauseTag.BILLING)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "tag": self.tag.value,
            "is_immutable": self.is_immutable,
            "is_logic_driven": self.is_logic_driven,
            "explanation": self.explanation,
        }


@dataclass
class ResolutionResult:
    """
    Output of template resolution.

    Sections keep the template's declared order. ``missing_fields`` lists
    required fields without a meaningful value; it never blocks drafting.
    """
    doc_type: DocType
    sections: List[ResolvedSection] = field(default_factory=list)
    missing_fields: List[str] = field(default_factory=list)

    def __post_init__(self):
        if self.sections is None:
            self.sections = []
        if self.missing_fields is None:
            self.missing_fields = []

    @property
    def is_complete(self) -> bool:
        return len(self.missing_fields) == 0

    @property
    def logic_rule_count(self) -> int:
        """Number of visible sections that are not standard clauses."""
        return sum(1 for s in self.sections if s.tag is not ClauseTag.STANDARD)

    def get_section(self, section_id: str) -> Optional[ResolvedSection]:
        for section in self.sections:
            if section.id == section_id:
                return section
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "doc_type": self.doc_type.value,
            "sections": [s.to_dict() for s in self.sections],
            "missing_fields": list(self.missing_fields),
            "is_complete": self.is_complete,
            "logic_rule_count": self.logic_rule_count,
        }
