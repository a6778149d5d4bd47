"""Run result data model."""
from typing import Dict, NamedTuple, Optional

from gluecrawl.domain.crawler_state import READY, RUNNING
from gluecrawl.domain.run_metrics import RunMetrics


class RunResult(NamedTuple):
    """Outcome of one invocation.

    On failure only `success` and `error` are set; state and metrics stay None
    so no state/metrics outputs are written. A started-but-not-awaited run keeps
    zero metrics on the result but only reports `state`.
    """
    success: bool
    final_state: Optional[str] = None
    metrics: Optional[RunMetrics] = None
    error: Optional[str] = None

    @classmethod
    def completed(cls, metrics: RunMetrics) -> "RunResult":
        return cls(success=True, final_state=READY, metrics=metrics)

    @classmethod
    def started(cls) -> "RunResult":
        return cls(success=True, final_state=RUNNING, metrics=RunMetrics.zero())

    @classmethod
    def failed(cls, error: str) -> "RunResult":
        return cls(success=False, error=error)

    def to_outputs(self) -> Dict[str, str]:
        outputs = {"success": "true" if self.success else "false"}
        if not self.success:
            return outputs
        if self.final_state is not None:
            outputs["state"] = self.final_state
        # Table counts only describe a finished run
        if self.metrics is not None and self.final_state == READY:
            outputs["tables-created"] = str(self.metrics.tables_created)
            outputs["tables-updated"] = str(self.metrics.tables_updated)
            outputs["tables-deleted"] = str(self.metrics.tables_deleted)
        return outputs
