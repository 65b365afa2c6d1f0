from .loader import load_config, load_submission
from .defaults import DEFAULT_CONFIG

__all__ = [
    "load_config",
    "load_submission",
    "DEFAULT_CONFIG",
]
