"""
End-to-end assessment of one practice submission.

Shared by the CLI and the batch runner: load the submission, run every
engine, write the markdown report and optionally HTML, PDF and the store.
"""

from pathlib import Path
from datetime import datetime
from typing import Any, Dict, Optional
import json
import uuid

from practicehealth.compliance import ComplianceVerificationSystem
from practicehealth.config.loader import load_submission
from practicehealth.core.financial import FinancialAssessmentCalculator
from practicehealth.core.interconnectedness import InterconnectednessAnalyzer
from practicehealth.core.models import AssessmentProgress
from practicehealth.core.recommendations import RecommendationEngine
from practicehealth.core.scoring import BusinessHealthScoreCalculator, parse_discipline, parse_size
from practicehealth.utils.logger import get_logger
from practicehealth.utils.serialization import to_jsonable

log = get_logger("pipeline")


# -------------------------------------------------
# ENGINES
# -------------------------------------------------
def assess(submission: Dict[str, Any], config: Dict[str, Any]) -> Dict[str, Any]:
    """Run every engine over a loaded submission and return the results."""
    practice = submission.get("practice") or {}
    discipline = parse_discipline(practice.get("discipline"))
    size = parse_size(practice.get("size"))
    region = practice.get("region")
    user_id = str(submission.get("user_id") or "anonymous")

    progress = AssessmentProgress.from_responses(submission.get("responses") or {}, user_id=user_id)

    health_score = BusinessHealthScoreCalculator().calculate_score(progress, discipline, size, region)
    analysis = InterconnectednessAnalyzer().analyze(progress, discipline, size)
    recommendations = RecommendationEngine().generate(health_score, discipline, size, region)

    results: Dict[str, Any] = {
        "user_id": user_id,
        "practice": practice,
        "health_score": health_score,
        "analysis": analysis,
        "recommendations": recommendations,
        "financial": None,
        "compliance": None,
        "action_plan": None,
    }

    if submission.get("financial"):
        results["financial"] = FinancialAssessmentCalculator().calculate_financial_health(
            submission["financial"], discipline, size, practice.get("country")
        )

    if config.get("report", {}).get("include_compliance", True):
        system = ComplianceVerificationSystem()
        statuses = system.evaluate(submission.get("compliance") or {})
        results["compliance_statuses"] = statuses
        results["compliance"] = system.generate_dashboard_data(statuses)
        results["action_plan"] = system.generate_action_plan(statuses)

    return results


# -------------------------------------------------
# RUN (MARKDOWN + PAYLOAD)
# -------------------------------------------------
def run(
    input_path: str,
    config: Dict[str, Any],
    run_dir: Optional[Path] = None,
    export_html: Optional[bool] = None,
    export_pdf: Optional[bool] = None,
    store: bool = False,
) -> Dict[str, Any]:
    """
    Returns:
        {
            "markdown": <path>,
            "html": <path or None>,
            "pdf": <path or None>,
            "results": <path to results.json>,
            "run_dir": <path>,
            "payload": <dict for the PDF renderer>,
        }
    """
    from practicehealth.reporting import (
        AssessmentReport,
        ExecutivePDFRenderer,
        build_pdf_payload,
        render_html,
    )

    submission = load_submission(input_path, config)
    results = assess(submission, config)

    if run_dir is None:
        run_dir = Path(config.get("output_dir", "runs")) / (
            f"{datetime.utcnow():%Y-%m-%d_%H-%M-%S}_{uuid.uuid4().hex[:6]}"
        )
    run_dir = Path(run_dir)
    run_dir.mkdir(parents=True, exist_ok=True)
    log.info("Run directory: %s", run_dir)

    practice = results["practice"]
    report_cfg = config.get("report", {})
    report = AssessmentReport(
        title=report_cfg.get("title", "Practice Health Assessment"),
        top_n=int(report_cfg.get("top_n", 5)),
    )
    metadata = {
        "practice": practice.get("name"),
        "discipline": practice.get("discipline"),
        "size": practice.get("size"),
        "region": practice.get("region"),
    }

    md_path = report.build(
        results["health_score"],
        run_dir,
        analysis=results["analysis"],
        recommendations=results["recommendations"],
        compliance=results["compliance"],
        action_plan=results["action_plan"],
        financial=results["financial"],
        metadata=metadata,
        charts=bool(config.get("charts", True)),
    )

    payload = build_pdf_payload(
        results["health_score"],
        analysis=results["analysis"],
        recommendations=results["recommendations"],
        dashboard=results["compliance"],
        action_plan=results["action_plan"],
        visuals=report.visuals,
        meta=dict(metadata, run_id=report.run_id),
    )

    results_path = run_dir / "results.json"
    results_path.write_text(
        json.dumps(
            {k: to_jsonable(v) for k, v in results.items() if k != "compliance_statuses"},
            indent=2,
        ),
        encoding="utf-8",
    )

    html_path = None
    if export_html if export_html is not None else config.get("export_html"):
        html_path = render_html(md_path, title=report.title)
        log.info("HTML generated: %s", html_path)

    pdf_path = None
    if export_pdf if export_pdf is not None else config.get("export_pdf"):
        pdf_path = ExecutivePDFRenderer().render(payload, run_dir / "Practice_Health_Report.pdf")
        log.info("PDF generated: %s", pdf_path)

    if store:
        from practicehealth.database import AssessmentStore

        db = AssessmentStore(config.get("database", "runs/assessments.db"))
        user_id = results["user_id"]
        db.save_practice(user_id, practice)
        db.save_responses(user_id, flatten_responses(submission.get("responses") or {}))
        db.save_result(user_id, "health_score", results["health_score"])
        if results["compliance"] is not None:
            db.save_result(user_id, "compliance", results["compliance"])
        if results["financial"] is not None:
            db.save_result(user_id, "financial", results["financial"])

    return {
        "markdown": str(md_path),
        "html": str(html_path) if html_path else None,
        "pdf": str(pdf_path) if pdf_path else None,
        "results": str(results_path),
        "run_dir": str(run_dir),
        "payload": payload,
    }


def flatten_responses(responses_by_category: Dict[str, Any]) -> Dict[str, Any]:
    """Category-grouped responses as a flat ``question_id -> value`` map."""
    flat: Dict[str, Any] = {}
    for items in responses_by_category.values():
        for item in items or []:
            if isinstance(item, dict) and "question_id" in item:
                flat[str(item["question_id"])] = item.get("value")
    return flat
