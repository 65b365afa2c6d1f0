from pathlib import Path

import pytest

from practicehealth.automation import retry, run_batch


def test_batch_processes_folder_and_quarantines_failures(tmp_path, submission_file, test_config):
    inbox = tmp_path / "inbox"
    inbox.mkdir()
    (inbox / "clinic-001.yaml").write_bytes(submission_file.read_bytes())
    (inbox / "broken.yaml").write_text("- not\n- a mapping\n", encoding="utf-8")
    (inbox / "notes.txt").write_text("ignored", encoding="utf-8")

    summary = run_batch(str(inbox), output_root=str(tmp_path / "out"), config=test_config)

    assert [p["file"] for p in summary["processed"]] == ["clinic-001.yaml"]
    assert [f["file"] for f in summary["failed"]] == ["broken.yaml"]

    run_dir = Path(summary["run_dir"])
    assert (run_dir / "clinic-001" / "Practice_Health_Report.md").exists()
    assert (run_dir / "clinic-001" / "input" / "clinic-001.yaml").exists()
    assert len(list((run_dir / "failed").iterdir())) == 1


def test_batch_missing_folder(tmp_path, test_config):
    with pytest.raises(FileNotFoundError):
        run_batch(str(tmp_path / "nope"), output_root=str(tmp_path / "out"), config=test_config)


def test_retry_until_success():
    calls = []

    @retry(times=3, delay=0)
    def flaky():
        calls.append(1)
        if len(calls) < 3:
            raise RuntimeError("temporary")
        return "ok"

    assert flaky() == "ok"
    assert len(calls) == 3


def test_retry_gives_up_and_reraises():
    @retry(times=2, delay=0)
    def broken():
        raise RuntimeError("still broken")

    with pytest.raises(RuntimeError, match="still broken"):
        broken()


def test_lookup_errors_are_not_retried():
    calls = []

    @retry(times=3, delay=0)
    def missing():
        calls.append(1)
        raise KeyError("nope")

    with pytest.raises(KeyError):
        missing()
    assert len(calls) == 1
