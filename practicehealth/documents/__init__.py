from .exporters import SOPExporter, slugify, to_markdown
from .sop_generator import SOPGenerator, substitute

__all__ = [
    "SOPExporter",
    "SOPGenerator",
    "slugify",
    "substitute",
    "to_markdown",
]
