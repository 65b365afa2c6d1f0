from .batch_runner import process_submission, run_batch
from .retry import retry

__all__ = ["process_submission", "retry", "run_batch"]
