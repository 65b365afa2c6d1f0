from pathlib import Path
from datetime import datetime
from typing import Any, Dict, Optional

from practicehealth import pipeline
from practicehealth.automation.retry import retry
from practicehealth.config.loader import load_config
from practicehealth.utils.logger import get_logger

log = get_logger("batch-runner")


# =====================================================
# PROCESS SINGLE SUBMISSION
# =====================================================

def process_submission(
    file_path: Path,
    config: Dict[str, Any],
    run_dir: Path,
) -> Dict[str, Any]:
    """
    One submission into its own folder under ``run_dir``.

    PDF rendering failures are logged and do not fail the submission.
    """
    src = Path(file_path)
    file_run_dir = run_dir / src.stem
    input_dir = file_run_dir / "input"
    input_dir.mkdir(parents=True, exist_ok=True)

    dst = input_dir / src.name
    dst.write_bytes(src.read_bytes())

    log.info("Processing submission: %s", src.name)

    result = pipeline.run(str(dst), config, run_dir=file_run_dir, export_pdf=False)

    pdf_path = None
    if config.get("export_pdf"):
        try:
            from practicehealth.reporting import ExecutivePDFRenderer

            pdf_path = ExecutivePDFRenderer().render(
                result["payload"],
                file_run_dir / "Practice_Health_Report.pdf",
            )
            log.info("PDF generated: %s", pdf_path)
        except Exception as e:
            log.warning("PDF generation failed (non-blocking): %s", e)

    log.info("Completed submission: %s", src.name)

    return {
        "file": src.name,
        "markdown": result["markdown"],
        "html": result["html"],
        "pdf": str(pdf_path) if pdf_path else None,
        "run_dir": str(file_run_dir),
    }


# =====================================================
# BATCH ENTRY POINT
# =====================================================

def run_batch(
    input_folder: str,
    output_root: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None,
    config_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Assess every submission file in ``input_folder``.

    - One timestamped run directory
    - One subfolder per submission
    - Retries per the ``batch`` config section
    - Files that still fail are copied to ``failed/``
    """
    config = config if config is not None else load_config(config_path)
    batch_cfg = config.get("batch", {})
    patterns = tuple(p.lower() for p in batch_cfg.get("patterns", [".yaml", ".yml", ".json"]))

    output_root = output_root or config.get("output_dir", "runs")
    timestamp = datetime.utcnow().strftime("%Y-%m-%d_%H-%M-%S")
    run_dir = Path(output_root) / timestamp
    run_dir.mkdir(parents=True, exist_ok=True)

    input_folder = Path(input_folder)
    if not input_folder.is_dir():
        raise FileNotFoundError(f"Input folder not found: {input_folder}")

    files = sorted(f for f in input_folder.iterdir() if f.is_file() and f.suffix.lower() in patterns)

    log.info("Found %d submission files", len(files))
    log.info("Batch run directory: %s", run_dir)

    attempt = retry(
        times=int(batch_cfg.get("retries", 3)),
        delay=float(batch_cfg.get("delay", 2)),
    )(process_submission)

    summary: Dict[str, Any] = {"run_dir": str(run_dir), "processed": [], "failed": []}

    for src in files:
        try:
            summary["processed"].append(attempt(src, config, run_dir))

        except Exception as e:
            failed_path = (
                run_dir
                / "failed"
                / f"{src.stem}_{int(datetime.utcnow().timestamp())}{src.suffix}"
            )
            failed_path.parent.mkdir(exist_ok=True)
            failed_path.write_bytes(src.read_bytes())

            summary["failed"].append({"file": src.name, "reason": str(e)})
            log.error(
                "Submission failed after retries: %s | Reason: %s",
                src.name,
                str(e),
            )

    log.info(
        "Batch run completed: %d processed, %d failed (%s)",
        len(summary["processed"]),
        len(summary["failed"]),
        run_dir,
    )
    return summary
