"""HTML preview rendering of resolved documents."""

import os
import re
import uuid
from datetime import date
from typing import Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..models.fields import FieldSet
from ..models.template import DocumentTemplate, ResolutionResult, ResolvedSection


_BRACKETED = re.compile(r"(\[.*?\])")


def new_asset_id() -> str:
    """Random cosmetic id printed in the preview footer."""
    return f"LXF-{uuid.uuid4().hex[:6].upper()}"


class PreviewRenderer:
    """
    Renders the on-screen document preview.

    Uses Jinja2 templates shipped with the package. Bracketed text such
    as ``[CLIENT NAME]`` is marked so the page can highlight it.
    """

    def __init__(self, template_dir: Optional[str] = None):
        """
        Initialize the preview renderer.

        Args:
            template_dir: Directory containing Jinja2 templates.
                         If not provided, uses the package templates directory.
        """
        if template_dir is None:
            template_dir = os.path.join(os.path.dirname(__file__), "templates")

        self.template_dir = template_dir
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(['html', 'xml'])
        )

    def render(
        self,
        template: DocumentTemplate,
        result: ResolutionResult,
        field_set: FieldSet,
        asset_id: Optional[str] = None,
        render_date: Optional[date] = None,
    ) -> str:
        """
        Render the preview page.

        Args:
            template: Template the result was resolved from.
            result: Resolved sections and completeness.
            field_set: Form data for the letterhead.
            asset_id: Footer asset id. A random one is generated if omitted.
            render_date: Date shown in the letterhead. Defaults to today.

        Returns:
            HTML string.
        """
        render_date = render_date or date.today()
        page = self.env.get_template('preview.html')
        return page.render(
            document_name=template.name,
            firm_name=field_set.firm_name,
            jurisdiction=field_set.jurisdiction,
            render_date=render_date.strftime("%B %d, %Y"),
            sections=self._prepare_sections(result.sections),
            is_complete=result.is_complete,
            missing_count=len(result.missing_fields),
            missing_fields=result.missing_fields,
            logic_rule_count=result.logic_rule_count,
            asset_id=asset_id or new_asset_id(),
        )

    def _prepare_sections(self, sections: List[ResolvedSection]) -> List[Dict]:
        """Convert resolved sections to template-friendly format."""
        return [
            {
                'number': idx,
                'id': section.id,
                'title': section.title,
                'parts': self._split_placeholders(section.content),
                'is_immutable': section.is_immutable,
                'is_logic_driven': section.is_logic_driven,
            }
            for idx, section in enumerate(sections, start=1)
        ]

    @staticmethod
    def _split_placeholders(content: str) -> List[Dict]:
        return [
            {'text': part, 'is_placeholder': part.startswith('[')}
            for part in _BRACKETED.split(content)
            if part
        ]
