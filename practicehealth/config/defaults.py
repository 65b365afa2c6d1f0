DEFAULT_CONFIG = {
    # -----------------------------
    # PRACTICE DEFAULTS
    # -----------------------------
    # Used when a submission omits practice metadata.
    "practice": {
        "name": None,
        "discipline": "PHYSIOTHERAPY",
        "size": "SMALL",
        "country": "AUSTRALIA",
        "region": None,
    },

    # -----------------------------
    # REPORTING
    # -----------------------------
    "report": {
        "title": "Practice Business Health Report",
        "top_n": 5,
        "include_compliance": True,
    },

    # -----------------------------
    # SOP EXPORT
    # -----------------------------
    "sop": {
        "format": "markdown",   # markdown | html | pdf
    },

    # -----------------------------
    # BATCH
    # -----------------------------
    "batch": {
        "retries": 3,
        "delay": 2,
        "patterns": [".yaml", ".yml", ".json"],
    },

    # -----------------------------
    # OUTPUT CONTROL (CRITICAL)
    # -----------------------------
    "output_dir": "runs",
    "database": "runs/assessments.db",

    # -----------------------------
    # DELIVERY (OPTIONAL)
    # -----------------------------
    "export_html": False,
    "export_pdf": False,
    "charts": True,

    # -----------------------------
    # METADATA (OPTIONAL)
    # -----------------------------
    "metadata": {
        "engine": "practicehealth",
    },
}
