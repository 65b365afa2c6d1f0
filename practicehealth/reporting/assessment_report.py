from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
from datetime import datetime
import logging
import uuid

from practicehealth.__version__ import __version__
from practicehealth.core.financial import summarize_gaps
from practicehealth.core.models import (
    ActionPlanItem,
    BusinessHealthScore,
    ComplianceDashboard,
    FinancialAssessmentResult,
    InterconnectednessAnalysis,
    Recommendation,
    RecommendationSet,
)

logger = logging.getLogger(__name__)

REPORT_FILENAME = "Practice_Health_Report.md"
MAX_ACTIONS = 5


# =====================================================
# ASSESSMENT REPORT (MARKDOWN SOURCE OF TRUTH)
# =====================================================

class AssessmentReport:
    """
    Practice health report.

    Markdown is the single source of truth; HTML and PDF are rendered
    from it or from the same results.
    """

    name = "assessment"

    def __init__(self, title: str = "Practice Health Assessment", top_n: int = 5):
        self.title = title
        self.top_n = top_n
        self.run_id: Optional[str] = None
        self.visuals: List[Dict[str, Any]] = []

    # -------------------------------------------------
    # ENGINE ENTRY POINT
    # -------------------------------------------------

    def build(
        self,
        health_score: BusinessHealthScore,
        output_dir: Path,
        analysis: Optional[InterconnectednessAnalysis] = None,
        recommendations: Optional[RecommendationSet] = None,
        compliance: Optional[ComplianceDashboard] = None,
        action_plan: Optional[Sequence[ActionPlanItem]] = None,
        financial: Optional[FinancialAssessmentResult] = None,
        metadata: Optional[Dict[str, Any]] = None,
        charts: bool = True,
    ) -> Path:

        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        report_path = output_dir / REPORT_FILENAME
        self.run_id = f"PH-{datetime.utcnow():%Y%m%d}-{uuid.uuid4().hex[:6]}"
        self.visuals = []

        if charts:
            self._render_charts(health_score, analysis, output_dir / "visuals")

        with open(report_path, "w", encoding="utf-8") as f:
            self._write_header(f, metadata)
            self._write_score(f, health_score)
            self._write_categories(f, health_score)
            if financial is not None:
                self._write_financial(f, financial)
            if analysis is not None:
                self._write_interconnectedness(f, analysis)
            if recommendations is not None:
                self._write_recommendations(f, recommendations)
            if compliance is not None:
                self._write_compliance(f, compliance, action_plan or ())
            self._write_visuals(f)
            self._write_footer(f)

        logger.info("Report written to %s", report_path)
        return report_path

    # -------------------------------------------------
    # CHARTS
    # -------------------------------------------------

    def _render_charts(self, health_score, analysis, visuals_dir: Path):
        from practicehealth.reporting.visuals import (
            plot_category_scores,
            plot_influence_heatmap,
        )

        scores_png = plot_category_scores(health_score, visuals_dir / "category_scores.png")
        if scores_png:
            self.visuals.append({"path": str(scores_png), "caption": "Category scores against industry benchmark"})

        if analysis is not None:
            heatmap_png = plot_influence_heatmap(analysis.connections, visuals_dir / "influence_heatmap.png")
            if heatmap_png:
                self.visuals.append({"path": str(heatmap_png), "caption": "How categories influence one another"})

    # -------------------------------------------------
    # SECTIONS
    # -------------------------------------------------

    def _write_header(self, f, metadata: Optional[Dict[str, Any]]):
        f.write(f"# {self.title}\n\n")
        f.write("## Summary\n\n")
        f.write(f"- **Run ID:** {self.run_id}\n")
        f.write(f"- **Generated:** {datetime.utcnow():%Y-%m-%d %H:%M UTC}\n")
        f.write(f"- **Version:** practicehealth {__version__}\n")

        if metadata:
            for k, v in metadata.items():
                if v in (None, ""):
                    continue
                f.write(f"- **{k.replace('_', ' ').title()}:** {v}\n")
        f.write("\n")

    def _write_score(self, f, hs: BusinessHealthScore):
        f.write("## Overall Business Health\n\n")
        f.write(f"**{hs.overall} / 100** ({hs.position.value})\n\n")

        f.write("| Benchmark | Score |\n")
        f.write("| :--- | ---: |\n")
        f.write(f"| Industry average | {hs.benchmarks.industry:g} |\n")
        f.write(f"| Similar-size practices | {hs.benchmarks.similar_size:g} |\n")
        f.write(f"| Top performers | {hs.benchmarks.top_performers:g} |\n")

        if hs.geographic_adjustment is not None:
            f.write(
                f"\n_Geographic adjustment for {hs.geographic_adjustment.region}: "
                f"x{hs.geographic_adjustment.adjustment_factor:g}_\n"
            )
        f.write("\n")

    def _write_categories(self, f, hs: BusinessHealthScore):
        f.write("## Category Scores\n\n")
        if not hs.categories:
            f.write("_No categories have been assessed yet._\n\n")
            return

        f.write("| Category | Score | Position |\n")
        f.write("| :--- | ---: | :--- |\n")
        for c in hs.categories:
            f.write(f"| {c.category.label} | {c.score} | {c.position.value} |\n")
        f.write("\n")

        strengths = [(c.category.label, s) for c in hs.categories for s in c.strengths]
        weaknesses = [(c.category.label, w) for c in hs.categories for w in c.weaknesses]

        if strengths:
            f.write("### Strengths\n")
            for label, s in strengths:
                f.write(f"- **{label}:** {s}\n")
            f.write("\n")

        if weaknesses:
            f.write("### Areas for Improvement\n")
            for label, w in weaknesses:
                f.write(f"- **{label}:** {w}\n")
            f.write("\n")

    def _write_financial(self, f, result: FinancialAssessmentResult):
        f.write("## Financial Health\n\n")
        f.write(f"**Financial score:** {result.overall_score:g} / 100\n\n")

        f.write("| Area | Score | Benchmark | Gap |\n")
        f.write("| :--- | ---: | ---: | ---: |\n")
        gaps = dict(summarize_gaps(result))
        for c in result.category_scores:
            f.write(f"| {c.category} | {c.score:.1f} | {c.benchmark:.1f} | {gaps[c.category]:.1f} |\n")
        f.write("\n")

        p = result.projections
        f.write(
            f"Profit could move from **${p.current:,.0f}** to **${p.potential:,.0f}** "
            f"(+${p.improvement:,.0f}) over {p.timeframe}.\n\n"
        )

        if result.recommendations:
            f.write("### Financial Actions\n")
            for line in result.recommendations[:MAX_ACTIONS]:
                f.write(f"- {line}\n")
            f.write("\n")

    def _write_interconnectedness(self, f, analysis: InterconnectednessAnalysis):
        f.write("## How Your Categories Connect\n\n")
        f.write(f"- **Most influential:** {analysis.most_influential.label}\n")
        f.write(f"- **Most dependent:** {analysis.most_dependent.label}\n\n")

        if analysis.key_insights:
            for line in analysis.key_insights:
                f.write(f"{line}\n")
            f.write("\n")

    def _write_recommendations(self, f, recs: RecommendationSet):
        f.write("## Recommendations\n\n")
        if not recs.top_recommendations:
            f.write("_No recommendations: every category is above its action threshold._\n\n")
            return

        for idx, r in enumerate(recs.top_recommendations[: self.top_n], start=1):
            f.write(f"### {idx}. {r.title}\n")
            f.write(f"{r.description}\n\n")
            f.write(f"- **Category:** {r.category.label}\n")
            f.write(f"- **Priority:** {r.priority.value}\n")
            f.write(f"- **Effort:** {r.effort.value}\n")
            f.write(f"- **Timeframe:** {r.timeframe.value}\n")
            f.write(f"- **Estimated ROI:** {self._roi(r)}\n\n")

        if recs.quick_wins:
            f.write("### Quick Wins\n")
            for r in recs.quick_wins:
                f.write(f"- {r.title}\n")
            f.write("\n")

        if recs.compliance_priorities:
            f.write("### Compliance Priorities\n")
            for r in recs.compliance_priorities:
                f.write(f"- {r.title}\n")
            f.write("\n")

    def _write_compliance(self, f, dashboard: ComplianceDashboard, plan: Sequence[ActionPlanItem]):
        f.write("## Compliance\n\n")
        f.write(f"**Overall compliance:** {dashboard.overall_compliance:.2f}%\n\n")

        if dashboard.by_framework:
            f.write("| Framework | Compliance |\n")
            f.write("| :--- | ---: |\n")
            for framework, pct in dashboard.by_framework.items():
                f.write(f"| {framework.value} | {pct:.2f}% |\n")
            f.write("\n")

        if plan:
            f.write("### Action Plan\n")
            for item in list(plan)[:MAX_ACTIONS]:
                f.write(
                    f"{item.priority}. **{item.title}** "
                    f"({item.risk_level.value} risk, {item.status.value})\n"
                )
            f.write("\n")

        if dashboard.upcoming_reviews:
            f.write("### Upcoming Reviews\n")
            for review in dashboard.upcoming_reviews:
                f.write(f"- {review.due_date:%Y-%m-%d}: {review.title}\n")
            f.write("\n")

    def _write_visuals(self, f):
        if not self.visuals:
            return
        f.write("## Visual Evidence\n\n")
        for vis in self.visuals:
            rel = Path(vis["path"]).name
            f.write(f"![{vis['caption']}](visuals/{rel})\n\n")
            f.write(f"_{vis['caption']}_\n\n")

    def _write_footer(self, f):
        f.write("---\n\n")
        f.write(
            "_Scores are derived from self-reported responses and indicate "
            "relative standing, not a clinical or legal audit._\n"
        )

    # -------------------------------------------------
    # HELPERS
    # -------------------------------------------------

    @staticmethod
    def _roi(r: Recommendation) -> str:
        roi = r.estimated_roi
        return f"{roi.min:g}-{roi.max:g}% over {roi.timeframe_months} months"
