import json
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from practicehealth.utils.logger import get_logger
from practicehealth.utils.serialization import to_jsonable

logger = get_logger("assessment-store")

RESULT_KINDS = ("health_score", "sop", "compliance", "financial")


def _dumps(payload: Any) -> str:
    if hasattr(payload, "to_dict"):
        payload = payload.to_dict()
    return json.dumps(to_jsonable(payload))


class AssessmentStore:
    """
    Per-user persistence for practice metadata, responses and results.

    A user with nothing saved yet is "not started": loads return None.
    """

    def __init__(self, db_path="runs/assessments.db"):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    def _init_db(self):
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS practices (
                    user_id TEXT PRIMARY KEY,
                    updated_at TEXT,
                    data TEXT
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS responses (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id TEXT,
                    timestamp TEXT,
                    data TEXT
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS results (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id TEXT,
                    kind TEXT,
                    timestamp TEXT,
                    payload TEXT
                )
            """)

    # -------------------------------------------------
    # PRACTICE
    # -------------------------------------------------
    def save_practice(self, user_id: str, practice: Dict[str, Any]):
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                "INSERT OR REPLACE INTO practices VALUES (?, ?, ?)",
                (user_id, datetime.utcnow().isoformat(), _dumps(practice)),
            )
        logger.debug("Saved practice for %s", user_id)

    def load_practice(self, user_id: str) -> Optional[Dict[str, Any]]:
        with sqlite3.connect(self.db_path) as conn:
            row = conn.execute(
                "SELECT data FROM practices WHERE user_id = ?", (user_id,)
            ).fetchone()
        return json.loads(row[0]) if row else None

    # -------------------------------------------------
    # RESPONSES
    # -------------------------------------------------
    def save_responses(self, user_id: str, responses: Dict[str, Any]):
        """Store a flat ``question_id -> value`` map; the newest write wins."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                "INSERT INTO responses VALUES (NULL, ?, ?, ?)",
                (user_id, datetime.utcnow().isoformat(), _dumps(responses)),
            )

    def load_responses(self, user_id: str) -> Optional[Dict[str, Any]]:
        with sqlite3.connect(self.db_path) as conn:
            row = conn.execute(
                "SELECT data FROM responses WHERE user_id = ? ORDER BY id DESC LIMIT 1",
                (user_id,),
            ).fetchone()
        return json.loads(row[0]) if row else None

    # -------------------------------------------------
    # RESULTS
    # -------------------------------------------------
    def save_result(self, user_id: str, kind: str, payload: Any):
        if kind not in RESULT_KINDS:
            raise ValueError(f"Unknown result kind: {kind!r}")

        with sqlite3.connect(self.db_path) as conn:
            conn.execute(
                "INSERT INTO results VALUES (NULL, ?, ?, ?, ?)",
                (user_id, kind, datetime.utcnow().isoformat(), _dumps(payload)),
            )
        logger.info("Stored %s result for %s", kind, user_id)

    def latest_result(self, user_id: str, kind: str) -> Optional[Dict[str, Any]]:
        with sqlite3.connect(self.db_path) as conn:
            row = conn.execute(
                "SELECT payload FROM results WHERE user_id = ? AND kind = ? "
                "ORDER BY id DESC LIMIT 1",
                (user_id, kind),
            ).fetchone()
        return json.loads(row[0]) if row else None
