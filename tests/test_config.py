import json

import pytest
import yaml

from practicehealth.config import load_config, load_submission
from practicehealth.config.defaults import DEFAULT_CONFIG


def test_defaults_without_file():
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_sections_merge_key_by_key(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"report": {"top_n": 3}, "charts": False}))

    config = load_config(str(path))

    assert config["report"]["top_n"] == 3
    assert config["report"]["title"] == DEFAULT_CONFIG["report"]["title"]
    assert config["charts"] is False
    assert DEFAULT_CONFIG["report"]["top_n"] == 5


def test_json_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"output_dir": "elsewhere"}))
    assert load_config(str(path))["output_dir"] == "elsewhere"


def test_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))


def test_non_mapping_config_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_submission_fills_practice_defaults(tmp_path):
    path = tmp_path / "clinic-7.yaml"
    path.write_text(yaml.safe_dump({"practice": {"name": "Bayside", "size": "SOLO"}}))

    submission = load_submission(str(path))

    assert submission["user_id"] == "clinic-7"
    assert submission["practice"]["size"] == "SOLO"
    assert submission["practice"]["discipline"] == "PHYSIOTHERAPY"
    assert submission["responses"] == {}
    assert submission["financial"] == {}
    assert submission["compliance"] == {}
