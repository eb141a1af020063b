from .session import Session, Status
from .core import run_case, run_batch
from .io import write_csv, write_manifest, summarize

__all__ = ["Session", "Status", "run_case", "run_batch", "write_csv", "write_manifest",
           "summarize"]
