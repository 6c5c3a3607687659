from .core import run_case, run_batch
from .histogram import histogram, HistogramResult
from .io import write_csv, write_manifest
from .interactive import read_feedback, read_guess

__all__ = ["run_case", "run_batch", "histogram", "HistogramResult", "write_csv",
           "write_manifest", "read_feedback", "read_guess"]
