"""
practicehealth CLI

    practicehealth assess submission.yaml [--html] [--pdf] [--store]
    practicehealth sop <template_id> [--data vars.yaml] [--format markdown|html|pdf] [--out path]
    practicehealth templates
    practicehealth compliance submission.yaml
    practicehealth batch <folder>
"""

import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional

import yaml

from practicehealth.__version__ import __version__
from practicehealth.config.loader import _read_mapping, load_config, load_submission
from practicehealth.core.errors import PracticeHealthError
from practicehealth.utils.logger import get_logger

logger = logging.getLogger(__name__)


# -------------------------------------------------
# COMMANDS
# -------------------------------------------------
def cmd_assess(args, config) -> int:
    from practicehealth import pipeline

    input_path = Path(args.submission)
    if not input_path.exists():
        raise FileNotFoundError(f"Submission file not found: {input_path}")

    result = pipeline.run(
        str(input_path),
        config,
        export_html=args.html or None,
        export_pdf=args.pdf or None,
        store=args.store,
    )

    print("\nReport generated")
    print(f"Markdown: {result['markdown']}")
    if result["html"]:
        print(f"HTML: {result['html']}")
    if result["pdf"]:
        print(f"PDF: {result['pdf']}")
    print(f"Run folder: {result['run_dir']}")
    return 0


def cmd_sop(args, config) -> int:
    from practicehealth.documents import SOPExporter, SOPGenerator

    practice_data = {}
    if args.data:
        raw = _read_mapping(Path(args.data), "SOP data file")
        practice_data = {k: "" if v is None else str(v) for k, v in raw.items()}

    fmt = args.format or config.get("sop", {}).get("format", "markdown")
    sop = SOPGenerator().generate(args.template_id, practice_data)
    exporter = SOPExporter()

    if args.out:
        path = exporter.write(sop, fmt, args.out)
        print(f"SOP written: {path}")
        return 0

    content = exporter.export(sop, fmt)
    if isinstance(content, bytes):
        sys.stdout.buffer.write(content)
    else:
        print(content)
    return 0


def cmd_templates(args, config) -> int:
    from practicehealth.documents import SOPGenerator

    for template in SOPGenerator().list_templates():
        regulatory = " [regulatory]" if template.regulatory_basis else ""
        print(f"{template.id:<28} {template.type.value:<14} {template.title}{regulatory}")
    return 0


def cmd_compliance(args, config) -> int:
    from practicehealth.compliance import ComplianceVerificationSystem

    submission = load_submission(args.submission, config)
    system = ComplianceVerificationSystem()
    statuses = system.evaluate(submission["compliance"])
    dashboard = system.generate_dashboard_data(statuses)
    plan = system.generate_action_plan(statuses)

    print(f"Overall compliance: {dashboard.overall_compliance:.2f}%")
    for framework, pct in dashboard.by_framework.items():
        print(f"  {framework.value:<14} {pct:6.2f}%")

    if plan:
        print("\nAction plan:")
        for item in plan:
            print(f"  {item.priority}. {item.title} ({item.risk_level.value} risk, {item.status.value})")
    return 0


def cmd_batch(args, config) -> int:
    from practicehealth.automation.batch_runner import run_batch

    summary = run_batch(args.folder, args.output, config)
    print(f"Processed: {len(summary['processed'])}  Failed: {len(summary['failed'])}")
    print(f"Run folder: {summary['run_dir']}")
    return 0 if not summary["failed"] else 1


# -------------------------------------------------
# CLI ENTRY
# -------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="practicehealth",
        description=f"Practice health assessment v{__version__}",
    )
    parser.add_argument("--config", required=False, help="Path to config YAML")
    parser.add_argument("--version", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")

    sub = parser.add_subparsers(dest="command")

    p = sub.add_parser("assess", help="Score a practice submission and write a report")
    p.add_argument("submission", help="Submission YAML or JSON")
    p.add_argument("--html", action="store_true", help="Also render HTML")
    p.add_argument("--pdf", action="store_true", help="Also render PDF")
    p.add_argument("--store", action="store_true", help="Save results to the database")
    p.set_defaults(func=cmd_assess)

    p = sub.add_parser("sop", help="Generate an SOP from a template")
    p.add_argument("template_id")
    p.add_argument("--data", help="YAML/JSON file with template variables")
    p.add_argument("--format", choices=["markdown", "html", "pdf"])
    p.add_argument("--out", help="Write to this path instead of stdout")
    p.set_defaults(func=cmd_sop)

    p = sub.add_parser("templates", help="List SOP templates")
    p.set_defaults(func=cmd_templates)

    p = sub.add_parser("compliance", help="Compliance summary for a submission")
    p.add_argument("submission")
    p.set_defaults(func=cmd_compliance)

    p = sub.add_parser("batch", help="Assess every submission in a folder")
    p.add_argument("folder")
    p.add_argument("--output", help="Output root (defaults to output_dir)")
    p.set_defaults(func=cmd_batch)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # ---- VERSION ----
    if args.version:
        print(f"practicehealth v{__version__}")
        return 0

    # ---- LOGGING ----
    log = get_logger("practicehealth", verbose=args.verbose)

    if not args.command:
        parser.print_help()
        return 2

    try:
        config = load_config(args.config)
        return args.func(args, config)
    except (PracticeHealthError, FileNotFoundError, ValueError, yaml.YAMLError) as exc:
        log.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
