"""Domain objects for gluecrawl - explicit re-exports to satisfy linters."""
from .run_config import RunConfig as RunConfig
from .run_metrics import RunMetrics as RunMetrics
from .run_result import RunResult as RunResult
from . import crawler_state as crawler_state

__all__ = ["RunConfig", "RunMetrics", "RunResult", "crawler_state"]
