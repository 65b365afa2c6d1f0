import pytest

from practicehealth.documents import SOPExporter, SOPGenerator, slugify


@pytest.fixture
def billing_sop(clock):
    return SOPGenerator(clock=clock).generate("sop-fin-001", {"practiceName": "Harbour Physio"})


@pytest.fixture
def exporter():
    return SOPExporter()


def test_slugify():
    assert slugify("Roles and Responsibilities") == "roles-and-responsibilities"
    assert slugify("Key  Metrics") == "key-metrics"


def test_markdown_layout(exporter, billing_sop):
    md = exporter.export(billing_sop, "markdown")
    lines = md.splitlines()

    assert lines[0] == "# Patient Billing and Collection Procedure"
    assert "**Type:** Financial" in lines
    assert "**Created:** 2025-01-31" in lines
    assert "**Status:** draft" in lines
    assert "**Next Review:** 2025-04-30" in lines
    assert "**Regulatory Authority:** OAIC" in lines
    assert "**Compliance Verified:** 2025-01-31" in lines
    assert "## Table of Contents" in lines
    assert "1. [Purpose](#purpose)" in lines
    assert "## Purpose" in lines


def test_markdown_lists_every_section_in_order(exporter, billing_sop):
    md = exporter.export(billing_sop, "markdown")
    positions = [md.index(f"\n## {s.title}\n") for s in billing_sop.sections]
    assert positions == sorted(positions)


def test_markdown_without_regulatory_basis(exporter, clock):
    sop = SOPGenerator(clock=clock).generate("sop-ops-001")
    assert "Regulatory Authority" not in exporter.export(sop, "markdown")


def test_html_wraps_markdown_with_line_breaks(exporter, billing_sop):
    html = exporter.export(billing_sop, "html")
    assert html.startswith("<html><body># Patient Billing and Collection Procedure<br>")
    assert html.endswith("</body></html>")
    assert "\n" not in html


def test_pdf_is_real_pdf(exporter, billing_sop):
    pdf = exporter.export(billing_sop, "pdf")
    assert isinstance(pdf, bytes)
    assert pdf.startswith(b"%PDF")


def test_unknown_format_raises(exporter, billing_sop):
    with pytest.raises(ValueError):
        exporter.export(billing_sop, "docx")


def test_write_creates_parent_dirs(exporter, billing_sop, tmp_path):
    md_path = exporter.write(billing_sop, "markdown", tmp_path / "out" / "billing.md")
    pdf_path = exporter.write(billing_sop, "pdf", tmp_path / "out" / "billing.pdf")

    assert md_path.read_text(encoding="utf-8").startswith("# Patient Billing")
    assert pdf_path.read_bytes().startswith(b"%PDF")
