"""Word (.docx) export of resolved documents."""

import io
import logging
import re
from datetime import date
from pathlib import Path
from typing import Optional, Union

from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt, RGBColor

from ..models.fields import FieldSet
from ..models.template import DocumentTemplate, ResolutionResult


logger = logging.getLogger(__name__)

FOOTER_TEXT = "Generated by LexiForge Document Automation • Confidential"
BODY_FONT = "Times New Roman"


def export_filename(template: DocumentTemplate, field_set: FieldSet, suffix: str = ".docx") -> str:
    """File name in the form ``<template name>_<client name or Draft>.docx``."""
    client = field_set.client_name.strip() or "Draft"
    stem = re.sub(r'[\\/:*?"<>|]+', "", f"{template.name}_{client}")
    return f"{stem}{suffix}"


class DocxExporter:
    """
    Builds Word documents from a resolution result.

    Header and footer carry firm metadata from the FieldSet; the body is
    the numbered list of resolved sections in template order.
    """

    def __init__(self, output_dir: str = "data/generated"):
        """
        Initialize the exporter.

        Args:
            output_dir: Directory for exported files.
        """
        self.output_dir = Path(output_dir)

    def build_document(
        self,
        template: DocumentTemplate,
        result: ResolutionResult,
        field_set: FieldSet,
        export_date: Optional[date] = None,
    ):
        """Build the python-docx Document without saving it."""
        export_date = export_date or date.today()
        doc = Document()
        section = doc.sections[0]

        header = section.header.paragraphs[0]
        header.text = f"{field_set.firm_name} • {field_set.jurisdiction}\t\t{export_date.strftime('%B %d, %Y')}"
        self._style_runs(header, size=10, color=RGBColor(0x66, 0x66, 0x66), font="Arial")

        footer = section.footer.paragraphs[0]
        footer.text = FOOTER_TEXT
        footer.alignment = WD_ALIGN_PARAGRAPH.CENTER
        self._style_runs(footer, size=8, color=RGBColor(0x99, 0x99, 0x99), font="Arial")

        title = doc.add_paragraph()
        title.alignment = WD_ALIGN_PARAGRAPH.CENTER
        run = title.add_run(template.name.upper())
        run.bold = True
        run.font.size = Pt(16)
        run.font.name = BODY_FONT

        for idx, resolved in enumerate(result.sections, start=1):
            heading = doc.add_paragraph()
            heading_run = heading.add_run(f"{idx}. {resolved.title.upper()}")
            heading_run.bold = True
            heading_run.font.size = Pt(11)
            heading_run.font.name = BODY_FONT

            body = doc.add_paragraph()
            lines = resolved.content.split("\n")
            for line_no, line in enumerate(lines):
                body_run = body.add_run(line)
                body_run.font.size = Pt(11)
                body_run.font.name = BODY_FONT
                if line_no < len(lines) - 1:
                    body_run.add_break()

        return doc

    def export(
        self,
        template: DocumentTemplate,
        result: ResolutionResult,
        field_set: FieldSet,
        output_path: Optional[Union[str, Path]] = None,
    ) -> str:
        """
        Export the document to a .docx file.

        Args:
            template: Template the result was resolved from.
            result: Resolved sections.
            field_set: Form data used for header/footer metadata.
            output_path: Target path. Defaults to ``output_dir/<export filename>``.

        Returns:
            Path to the exported file.
        """
        path = Path(output_path) if output_path else self.output_dir / export_filename(template, field_set)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.build_document(template, result, field_set).save(str(path))
        logger.info(f"Exported {template.name} to: {path}")
        return str(path)

    def export_bytes(
        self,
        template: DocumentTemplate,
        result: ResolutionResult,
        field_set: FieldSet,
    ) -> bytes:
        """Export the document to an in-memory .docx payload."""
        buffer = io.BytesIO()
        self.build_document(template, result, field_set).save(buffer)
        return buffer.getvalue()

    @staticmethod
    def _style_runs(paragraph, size: int, color: RGBColor, font: str) -> None:
        for run in paragraph.runs:
            run.font.size = Pt(size)
            run.font.color.rgb = color
            run.font.name = font
