from .assessment_report import AssessmentReport
from .html_renderer import render_html
from .pdf_renderer import ExecutivePDFRenderer, build_pdf_payload

__all__ = [
    "AssessmentReport",
    "ExecutivePDFRenderer",
    "build_pdf_payload",
    "render_html",
]
