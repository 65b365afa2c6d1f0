from pathlib import Path
from datetime import datetime
from typing import Dict, Any, List, Optional, Sequence
from xml.sax.saxutils import escape
import logging

from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.colors import HexColor
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Image, Table, TableStyle, PageBreak
)
from reportlab.lib.units import inch
from reportlab.lib import utils

from practicehealth.core.enums import Category
from practicehealth.utils.serialization import to_jsonable

logger = logging.getLogger(__name__)


# =====================================================
# PAYLOAD
# =====================================================

def build_pdf_payload(
    health_score,
    analysis=None,
    recommendations=None,
    dashboard=None,
    action_plan: Optional[Sequence] = None,
    visuals: Optional[List[Dict[str, Any]]] = None,
    meta: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Flatten assessment results into the plain dict the renderer reads."""
    return {
        "meta": meta or {},
        "health_score": to_jsonable(health_score),
        "insights": list(analysis.key_insights) if analysis is not None else [],
        "recommendations": (
            to_jsonable(recommendations.top_recommendations) if recommendations is not None else []
        ),
        "compliance": to_jsonable(dashboard) if dashboard is not None else {},
        "action_plan": to_jsonable(list(action_plan or [])),
        "visuals": visuals or [],
    }


def _label(category: str) -> str:
    try:
        return Category.parse(category).label
    except ValueError:
        return str(category)


# =====================================================
# EXECUTIVE PDF RENDERER
# =====================================================

class ExecutivePDFRenderer:
    PRIMARY = HexColor("#1f2937")
    BORDER = HexColor("#e5e7eb")
    HEADER_BG = HexColor("#f3f4f6")

    def render(self, payload: Dict[str, Any], output_path: Path) -> Path:
        payload = payload if isinstance(payload, dict) else {}

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        doc = SimpleDocTemplate(
            str(output_path),
            pagesize=A4,
            rightMargin=40,
            leftMargin=40,
            topMargin=40,
            bottomMargin=40,
        )

        styles = getSampleStyleSheet()
        story: List[Any] = []

        # -------------------------------------------------
        # STYLES
        # -------------------------------------------------
        def add_style(name, **kwargs):
            if name not in styles:
                styles.add(ParagraphStyle(name=name, **kwargs))

        add_style(
            "ExecTitle",
            fontSize=22,
            alignment=TA_CENTER,
            spaceAfter=18,
            fontName="Helvetica-Bold",
            textColor=self.PRIMARY,
        )
        add_style(
            "ExecSection",
            fontSize=15,
            spaceBefore=18,
            spaceAfter=10,
            fontName="Helvetica-Bold",
        )
        add_style(
            "ExecBody",
            fontSize=11,
            leading=15,
            spaceAfter=6,
        )
        add_style(
            "ExecCaption",
            fontSize=9,
            alignment=TA_CENTER,
            textColor=HexColor("#6b7280"),
            spaceAfter=12,
        )

        meta = payload.get("meta", {}) or {}
        hs = payload.get("health_score", {}) or {}

        # =================================================
        # COVER PAGE
        # =================================================
        story.append(Paragraph("PRACTICE HEALTH ASSESSMENT", styles["ExecTitle"]))
        story.append(Paragraph(escape(str(meta.get("practice") or "Allied Health Practice")), styles["ExecSection"]))

        cover = [
            f"Discipline: {meta.get('discipline', '-')}",
            f"Practice Size: {meta.get('size', '-')}",
            f"Generated: {datetime.utcnow():%Y-%m-%d}",
        ]
        if meta.get("run_id"):
            cover.append(f"Run ID: {meta['run_id']}")
        story.append(Paragraph("<br/>".join(escape(c) for c in cover), styles["ExecBody"]))

        if hs:
            story.append(Spacer(1, 12))
            story.append(Paragraph(
                f"<b>Overall Score:</b> {hs.get('overall', '-')} / 100 ({hs.get('position', '-')})",
                styles["ExecBody"],
            ))
        story.append(PageBreak())

        # =================================================
        # CATEGORY SCORES
        # =================================================
        categories = hs.get("categories", [])
        if categories:
            story.append(Paragraph("Category Scores", styles["ExecSection"]))
            rows = [["Category", "Score", "Position"]]
            for c in categories:
                rows.append([_label(c.get("category", "")), str(c.get("score", "-")), c.get("position", "-")])

            table = Table(rows, colWidths=[3.2 * inch, 1.2 * inch, 1.6 * inch])
            table.setStyle(TableStyle([
                ("GRID", (0, 0), (-1, -1), 0.5, self.BORDER),
                ("BACKGROUND", (0, 0), (-1, 0), self.HEADER_BG),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("PADDING", (0, 0), (-1, -1), 8),
            ]))
            story.append(table)

            benchmarks = hs.get("benchmarks") or {}
            if benchmarks:
                story.append(Spacer(1, 10))
                story.append(Paragraph(
                    f"Industry average {benchmarks.get('industry')}, "
                    f"similar-size practices {benchmarks.get('similar_size')}, "
                    f"top performers {benchmarks.get('top_performers')}",
                    styles["ExecCaption"],
                ))
            story.append(PageBreak())

        # =================================================
        # VISUALS
        # =================================================
        visuals = payload.get("visuals", [])
        if visuals:
            story.append(Paragraph("Visual Evidence", styles["ExecSection"]))
            for vis in visuals[:4]:
                path = Path(vis.get("path", ""))
                if not path.exists():
                    continue
                try:
                    img = utils.ImageReader(str(path))
                    iw, ih = img.getSize()
                    w = 6 * inch
                    h = min((ih / iw) * w, 5 * inch)
                    story.append(Image(str(path), width=w, height=h))
                    story.append(Paragraph(escape(vis.get("caption", "")), styles["ExecCaption"]))
                except (OSError, ValueError) as exc:
                    logger.warning("Skipping visual %s: %s", path, exc)
            story.append(PageBreak())

        # =================================================
        # INSIGHTS
        # =================================================
        insights = payload.get("insights", [])
        if insights:
            story.append(Paragraph("Key Insights", styles["ExecSection"]))
            for line in insights[:8]:
                story.append(Paragraph(escape(line.lstrip("- ")), styles["ExecBody"]))
            story.append(Spacer(1, 8))

        # =================================================
        # RECOMMENDATIONS
        # =================================================
        recs = payload.get("recommendations", [])
        if recs:
            story.append(Paragraph("Recommendations", styles["ExecSection"]))
            for idx, r in enumerate(recs[:5], start=1):
                story.append(Paragraph(f"{idx}. {escape(r.get('title', 'Action required'))}", styles["ExecBody"]))
                detail = " | ".join(filter(None, [
                    f"Priority: {r.get('priority')}" if r.get("priority") else None,
                    f"Effort: {r.get('effort')}" if r.get("effort") else None,
                    f"Timeframe: {r.get('timeframe')}" if r.get("timeframe") else None,
                ]))
                if detail:
                    story.append(Paragraph(detail, styles["ExecCaption"]))
                story.append(Spacer(1, 6))

        # =================================================
        # COMPLIANCE
        # =================================================
        compliance = payload.get("compliance", {}) or {}
        if compliance:
            story.append(PageBreak())
            story.append(Paragraph("Compliance", styles["ExecSection"]))
            story.append(Paragraph(
                f"<b>Overall compliance:</b> {compliance.get('overall_compliance', 0):.2f}%",
                styles["ExecBody"],
            ))

            by_framework = compliance.get("by_framework", {})
            if by_framework:
                rows = [["Framework", "Compliance"]]
                rows += [[k, f"{v:.2f}%"] for k, v in by_framework.items()]
                table = Table(rows, colWidths=[4 * inch, 2 * inch])
                table.setStyle(TableStyle([
                    ("GRID", (0, 0), (-1, -1), 0.5, self.BORDER),
                    ("BACKGROUND", (0, 0), (-1, 0), self.HEADER_BG),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("PADDING", (0, 0), (-1, -1), 8),
                ]))
                story.append(table)

            for item in payload.get("action_plan", [])[:5]:
                story.append(Paragraph(
                    f"{item.get('priority')}. <b>{escape(item.get('title', ''))}</b> "
                    f"({item.get('risk_level')} risk, {item.get('status')})",
                    styles["ExecBody"],
                ))

        doc.build(story)
        return output_path
