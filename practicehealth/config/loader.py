import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import DEFAULT_CONFIG


def _read_mapping(path: Path, label: str) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"{label} not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    data = data or {}
    if not isinstance(data, dict):
        raise ValueError(f"{label} must contain a dictionary: {path}")
    return data


# -------------------------------------------------
# MAIN CONFIG LOADER
# -------------------------------------------------
def load_config(path: Optional[str]) -> dict:
    """
    Load and merge user config with package defaults.

    Rules:
    - Defaults win for every field the user omits
    - Sections (dict values) are merged key by key, not replaced
    - output_dir and metadata always exist
    """

    user_config = {}
    if path:
        user_config = _read_mapping(Path(path), "Config file")

    config = copy.deepcopy(DEFAULT_CONFIG)

    for key, value in user_config.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update(value)
        else:
            config[key] = value

    config.setdefault("output_dir", "runs")
    config.setdefault("metadata", {})

    return config


# -------------------------------------------------
# SUBMISSION LOADER
# -------------------------------------------------
def load_submission(path: str, config: Optional[dict] = None) -> dict:
    """
    Load one practice submission (YAML or JSON).

    Missing practice fields are filled from ``config["practice"]``;
    missing sections become empty dicts.
    """

    submission = _read_mapping(Path(path), "Submission file")
    defaults = (config or DEFAULT_CONFIG).get("practice", {})

    practice = dict(defaults)
    practice.update(submission.get("practice") or {})
    submission["practice"] = practice

    for section in ("responses", "financial", "compliance"):
        submission[section] = submission.get(section) or {}

    submission.setdefault("user_id", Path(path).stem)
    return submission
