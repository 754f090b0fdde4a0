"""Document export and preview rendering for LexiForge."""

from .docx_exporter import DocxExporter, FOOTER_TEXT, export_filename
from .preview_renderer import PreviewRenderer, new_asset_id

__all__ = [
    "DocxExporter",
    "FOOTER_TEXT",
    "PreviewRenderer",
    "export_filename",
    "new_asset_id",
]
