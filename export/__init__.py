"""Export package - Paginated PDF and flowing Word-compatible exports."""

from .artifacts import ExportArtifact, write_artifact
from .layout import (
    PageGeometry,
    RenderCursor,
    RenderContext,
    DrawnUnit,
    normalize_orientation,
)
from .styles import TextStyle, STYLES
from .pdf_renderer import PdfRenderer, render_course_pdf, download_course_pdf
from .flow_exporter import export_flow, export_flow_artifact, download_course_doc

__all__ = [
    'ExportArtifact',
    'write_artifact',
    'PageGeometry',
    'RenderCursor',
    'RenderContext',
    'DrawnUnit',
    'normalize_orientation',
    'TextStyle',
    'STYLES',
    'PdfRenderer',
    'render_course_pdf',
    'download_course_pdf',
    'export_flow',
    'export_flow_artifact',
    'download_course_doc',
]
