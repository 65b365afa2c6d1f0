import json

import pytest

from practicehealth import pipeline
from practicehealth.config.loader import load_submission
from practicehealth.reporting import (
    AssessmentReport,
    ExecutivePDFRenderer,
    build_pdf_payload,
    render_html,
)


@pytest.fixture
def results(submission_file, test_config):
    return pipeline.assess(load_submission(str(submission_file), test_config), test_config)


def _build(results, out, charts=False):
    report = AssessmentReport(title="Practice Health Assessment", top_n=3)
    path = report.build(
        results["health_score"],
        out,
        analysis=results["analysis"],
        recommendations=results["recommendations"],
        compliance=results["compliance"],
        action_plan=results["action_plan"],
        financial=results["financial"],
        metadata={"practice": "Harbour Physio", "region": None},
        charts=charts,
    )
    return report, path


# -------------------------------------------------
# MARKDOWN
# -------------------------------------------------
def test_markdown_report_sections(results, tmp_path):
    report, path = _build(results, tmp_path / "run")
    text = path.read_text(encoding="utf-8")

    assert path.name == "Practice_Health_Report.md"
    assert text.startswith("# Practice Health Assessment\n")
    assert f"- **Run ID:** {report.run_id}" in text
    assert "- **Practice:** Harbour Physio" in text
    assert "- **Region:**" not in text
    assert "## Category Scores" in text
    assert "| Financial Management |" in text
    assert "## Financial Health" in text
    assert "## How Your Categories Connect" in text
    assert "## Compliance" in text
    assert "## Visual Evidence" not in text
    assert report.visuals == []


def test_report_respects_top_n(results, tmp_path):
    _, path = _build(results, tmp_path / "run")
    text = path.read_text(encoding="utf-8")
    assert "### 3. " in text or len(results["recommendations"].top_recommendations) < 3
    assert "### 4. " not in text


def test_charts_are_written_and_linked(results, tmp_path):
    report, path = _build(results, tmp_path / "run", charts=True)
    text = path.read_text(encoding="utf-8")

    assert (tmp_path / "run" / "visuals" / "category_scores.png").exists()
    assert (tmp_path / "run" / "visuals" / "influence_heatmap.png").exists()
    assert len(report.visuals) == 2
    assert "](visuals/category_scores.png)" in text


# -------------------------------------------------
# HTML / PDF
# -------------------------------------------------
def test_render_html(results, tmp_path):
    _, md_path = _build(results, tmp_path / "run")
    html_path = render_html(md_path, title="Harbour Physio")
    html = html_path.read_text(encoding="utf-8")

    assert html_path.suffix == ".html"
    assert "<title>Harbour Physio</title>" in html
    assert "<table>" in html
    assert "<h2>Category Scores</h2>" in html


def test_render_html_missing_markdown(tmp_path):
    with pytest.raises(FileNotFoundError):
        render_html(tmp_path / "nope.md")


def test_pdf_renderer(results, tmp_path):
    payload = build_pdf_payload(
        results["health_score"],
        analysis=results["analysis"],
        recommendations=results["recommendations"],
        dashboard=results["compliance"],
        action_plan=results["action_plan"],
        meta={"practice": "Harbour Physio", "run_id": "PH-test"},
    )
    out = ExecutivePDFRenderer().render(payload, tmp_path / "report.pdf")

    assert out.read_bytes().startswith(b"%PDF")


# -------------------------------------------------
# PIPELINE
# -------------------------------------------------
def test_assess_runs_every_engine(results):
    assert results["user_id"] == "clinic-001"
    assert results["health_score"].overall > 0
    assert results["financial"] is not None
    assert results["compliance"] is not None
    assert results["action_plan"]


def test_assess_skips_financial_without_answers(tmp_path, test_config):
    path = tmp_path / "bare.yaml"
    path.write_text("practice:\n  name: Bare\n", encoding="utf-8")

    results = pipeline.assess(load_submission(str(path), test_config), test_config)

    assert results["financial"] is None
    assert results["health_score"].overall == 0


def test_pipeline_run_writes_outputs(submission_file, test_config, tmp_path):
    out = pipeline.run(str(submission_file), test_config, run_dir=tmp_path / "run", export_html=True)

    assert out["run_dir"] == str(tmp_path / "run")
    assert out["html"].endswith("Practice_Health_Report.html")
    assert out["pdf"] is None

    data = json.loads((tmp_path / "run" / "results.json").read_text(encoding="utf-8"))
    assert data["user_id"] == "clinic-001"
    assert set(data) >= {"health_score", "analysis", "recommendations", "financial", "compliance"}
    assert out["payload"]["meta"]["practice"] == "Harbour Physio"


def test_pipeline_run_can_store_results(submission_file, test_config, tmp_path):
    from practicehealth.database import AssessmentStore

    pipeline.run(str(submission_file), test_config, run_dir=tmp_path / "run", store=True)
    store = AssessmentStore(test_config["database"])

    assert store.load_practice("clinic-001")["name"] == "Harbour Physio"
    assert store.load_responses("clinic-001")["fin_pricing_review"] == 5
    assert store.latest_result("clinic-001", "health_score") is not None
    assert store.latest_result("clinic-001", "financial") is not None


def test_flatten_responses(sample_responses):
    flat = pipeline.flatten_responses(sample_responses)
    assert flat["ops_workflow_documented"] is True
    assert len(flat) == 9


def test_assess_tolerates_unknown_country(tmp_path, test_config):
    path = tmp_path / "abroad.yaml"
    path.write_text(
        "practice:\n  country: Canada\nfinancial:\n  revenuePerHour: 120\n",
        encoding="utf-8",
    )

    results = pipeline.assess(load_submission(str(path), test_config), test_config)

    assert results["financial"].benchmark_comparisons == ()
    assert results["recommendations"] is not None
