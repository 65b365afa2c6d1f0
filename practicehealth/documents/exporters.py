"""
SOP export.

Markdown is the canonical form; HTML is the markdown with line breaks
wrapped in a bare page, and PDF is rendered with reportlab.
"""

import io
import re
from pathlib import Path
from typing import Any, List, Union
from xml.sax.saxutils import escape

from reportlab.lib.colors import HexColor
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from practicehealth.core.models import GeneratedSOP

FORMATS = ("markdown", "html", "pdf")

_BOLD = re.compile(r"\*\*(.+?)\*\*")


def slugify(title: str) -> str:
    return re.sub(r"\s+", "-", title.lower())


def _iso(value) -> str:
    return value.date().isoformat() if hasattr(value, "date") else value.isoformat()


# -------------------------------------------------
# MARKDOWN (CANONICAL)
# -------------------------------------------------
def to_markdown(sop: GeneratedSOP) -> str:
    lines = [
        f"# {sop.title}",
        "",
        f"**Type:** {sop.type.value}",
        f"**Created:** {_iso(sop.created_at)}",
        f"**Last Modified:** {_iso(sop.last_modified)}",
        f"**Status:** {sop.status.value}",
        f"**Next Review:** {_iso(sop.next_review_date)}",
    ]

    rc = sop.regulatory_compliance
    if rc is not None:
        lines += [
            "",
            f"**Regulatory Authority:** {rc.authority}",
            f"**Regulatory Standard:** {rc.standard}",
            f"**Compliance Verified:** {_iso(rc.last_verified)}",
        ]

    lines += ["", "## Table of Contents", ""]
    for idx, section in enumerate(sop.sections, start=1):
        lines.append(f"{idx}. [{section.title}](#{slugify(section.title)})")

    for section in sop.sections:
        lines += ["", f"## {section.title}", "", section.content]
        if section.regulatory_reference:
            lines += ["", f"*Regulatory Reference: {section.regulatory_reference}*"]

    return "\n".join(lines) + "\n"


def to_html(sop: GeneratedSOP) -> str:
    # Line breaks only; the markdown itself is not rendered.
    body = to_markdown(sop).replace("\n", "<br>")
    return f"<html><body>{body}</body></html>"


# -------------------------------------------------
# PDF
# -------------------------------------------------
def _inline(text: str) -> str:
    return _BOLD.sub(r"<b>\1</b>", escape(text))


def to_pdf(sop: GeneratedSOP) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        rightMargin=40,
        leftMargin=40,
        topMargin=40,
        bottomMargin=40,
        title=sop.title,
    )

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(
        name="SOPTitle",
        fontSize=18,
        alignment=TA_CENTER,
        spaceAfter=14,
        fontName="Helvetica-Bold",
        textColor=HexColor("#1f2937"),
    ))
    styles.add(ParagraphStyle(
        name="SOPSection",
        fontSize=13,
        spaceBefore=14,
        spaceAfter=6,
        fontName="Helvetica-Bold",
    ))
    styles.add(ParagraphStyle(name="SOPBody", fontSize=10, leading=14, spaceAfter=3))
    styles.add(ParagraphStyle(
        name="SOPMeta",
        fontSize=9,
        leading=12,
        textColor=HexColor("#6b7280"),
    ))

    story: List[Any] = [Paragraph(escape(sop.title), styles["SOPTitle"])]

    meta = [
        f"Type: {sop.type.value}",
        f"Created: {_iso(sop.created_at)}",
        f"Status: {sop.status.value}",
        f"Next Review: {_iso(sop.next_review_date)}",
    ]
    rc = sop.regulatory_compliance
    if rc is not None:
        meta += [f"Regulatory Authority: {rc.authority}", f"Regulatory Standard: {rc.standard}"]
    story.append(Paragraph("<br/>".join(escape(m) for m in meta), styles["SOPMeta"]))

    for section in sop.sections:
        story.append(Paragraph(escape(section.title), styles["SOPSection"]))
        for line in section.content.split("\n"):
            if not line.strip():
                story.append(Spacer(1, 4))
                continue
            story.append(Paragraph(_inline(line), styles["SOPBody"]))
        if section.regulatory_reference:
            story.append(Paragraph(
                f"<i>Regulatory Reference: {escape(section.regulatory_reference)}</i>",
                styles["SOPMeta"],
            ))

    doc.build(story)
    return buffer.getvalue()


# -------------------------------------------------
# PUBLIC API
# -------------------------------------------------
class SOPExporter:
    def export(self, sop: GeneratedSOP, fmt: str = "markdown") -> Union[str, bytes]:
        fmt = (fmt or "").lower()
        if fmt in ("markdown", "md"):
            return to_markdown(sop)
        if fmt == "html":
            return to_html(sop)
        if fmt == "pdf":
            return to_pdf(sop)
        raise ValueError(f"Unsupported export format: {fmt!r} (expected one of {', '.join(FORMATS)})")

    def write(self, sop: GeneratedSOP, fmt: str, path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        content = self.export(sop, fmt)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path
