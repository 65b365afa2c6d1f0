import subprocess
import sys

import yaml

from practicehealth.cli import main


def run_cli(args):
    return subprocess.run(
        [sys.executable, "-m", "practicehealth.cli"] + args,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )


def test_cli_help():
    result = run_cli(["--help"])
    assert result.returncode == 0
    assert "assess" in result.stdout


def test_cli_version():
    result = run_cli(["--version"])
    assert result.returncode == 0
    assert result.stdout.startswith("practicehealth v")


def test_no_command_prints_help(capsys):
    assert main([]) == 2
    assert "usage" in capsys.readouterr().out


def test_templates(capsys):
    assert main(["templates"]) == 0
    assert "sop-fin-001" in capsys.readouterr().out


def test_sop_to_stdout(capsys):
    assert main(["sop", "sop-ops-001"]) == 0
    assert capsys.readouterr().out.startswith("# ")


def test_unknown_sop_template_fails(capsys):
    assert main(["sop", "sop-nope"]) == 1


def test_sop_to_file(tmp_path):
    out = tmp_path / "billing.html"
    assert main(["sop", "sop-fin-001", "--format", "html", "--out", str(out)]) == 0
    assert out.read_text(encoding="utf-8").startswith("<html><body>")


def test_compliance_summary(capsys, submission_file):
    assert main(["compliance", str(submission_file)]) == 0
    assert "Overall compliance:" in capsys.readouterr().out


def test_assess_with_config(tmp_path, submission_file):
    config = tmp_path / "config.yaml"
    config.write_text(
        yaml.safe_dump({"output_dir": str(tmp_path / "runs"), "charts": False}),
        encoding="utf-8",
    )

    assert main(["--config", str(config), "assess", str(submission_file)]) == 0
    assert list((tmp_path / "runs").glob("*/Practice_Health_Report.md"))


def test_assess_missing_submission(tmp_path):
    assert main(["assess", str(tmp_path / "missing.yaml")]) == 1
