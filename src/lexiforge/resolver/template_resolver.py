"""Template resolution: visibility filtering, placeholder substitution and
completeness checking."""

import logging
from enum import Enum
from typing import Dict, Optional, Union

from ..exceptions import UnknownDocumentTypeError
from ..models.enums import DocType
from ..models.fields import FieldSet, PLACEHOLDER_LABELS
from ..models.template import DocumentTemplate, ResolutionResult, ResolvedSection
from ..registry.predicates import is_visible
from ..registry.template_registry import (
    PLACEHOLDER_PATTERN,
    TemplateRegistry,
    get_default_registry,
)


logger = logging.getLogger(__name__)


class TemplateResolver:
    """
    Resolves a document template against a FieldSet.

    Resolution is a pure function of (template, field set): the same
    inputs always produce the same sections and missing fields.
    """

    def __init__(self, registry: Optional[TemplateRegistry] = None):
        self.registry = registry or get_default_registry()

    def resolve(self, template: DocumentTemplate, field_set: FieldSet) -> ResolutionResult:
        """
        Resolve a template into its ordered, visible sections.

        Args:
            template: The document template.
            field_set: Current form data.

        Returns:
            ResolutionResult with rendered sections and missing required fields.
        """
        values = self.substitution_map(field_set)
        sections = []
        for clause in template.clauses:
            if not is_visible(clause.condition, field_set):
                continue
            sections.append(ResolvedSection(
                id=clause.id,
                title=clause.title,
                content=self._substitute(clause.content, values),
                tag=clause.tag,
                is_immutable=clause.is_immutable,
                explanation=clause.explanation,
            ))

        return ResolutionResult(
            doc_type=template.id,
            sections=sections,
            missing_fields=self.missing_fields(template, field_set),
        )

    def resolve_doc_type(
        self,
        doc_type: Union[DocType, str],
        field_set: FieldSet,
    ) -> ResolutionResult:
        """
        Resolve the registry template for ``doc_type``.

        Raises:
            UnknownDocumentTypeError: If the type is not in the registry.
        """
        template = self.registry.get_template(doc_type)
        if template is None:
            value = doc_type.value if isinstance(doc_type, DocType) else str(doc_type)
            raise UnknownDocumentTypeError(f"Unknown document type: {value}", doc_type=value)
        return self.resolve(template, field_set)

    def render(self, content: str, field_set: FieldSet) -> str:
        """Substitute ``{{field}}`` placeholders in a single body of text."""
        return self._substitute(content, self.substitution_map(field_set))

    @staticmethod
    def missing_fields(template: DocumentTemplate, field_set: FieldSet) -> list:
        """Required fields of ``template`` whose value is empty or false."""
        return [name for name in template.required_fields if not field_set.get(name)]

    @staticmethod
    def substitution_map(field_set: FieldSet) -> Dict[str, str]:
        """
        Build the placeholder values for a field set.

        Empty narrative fields map to their bracketed label; other empty
        fields map to an empty string. Boolean fields are also given a
        value, ``Yes`` when true and an empty string when false, so a
        template may print a checkbox answer; ``billing_type`` maps to its
        enum value.
        """
        values = {}
        for name in FieldSet.field_names():
            value = field_set.get(name)
            if isinstance(value, Enum):
                text = value.value
            elif isinstance(value, bool):
                text = "Yes" if value else ""
            else:
                text = value or ""
            if not text and name in PLACEHOLDER_LABELS:
                text = PLACEHOLDER_LABELS[name]
            values[name] = text
        return values

    @staticmethod
    def _substitute(content: str, values: Dict[str, str]) -> str:
        # Unknown identifiers are not in the map and render as "".
        return PLACEHOLDER_PATTERN.sub(lambda m: values.get(m.group(1), ""), content)
