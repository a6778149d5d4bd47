import logging

from gluecrawl.domain.run_config import RunConfig
from gluecrawl.domain.run_result import RunResult
from gluecrawl.services.action_io import ActionIO
from gluecrawl.services.crawler_run_orchestrator import CrawlerRunOrchestrator

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


class ActionRunner:
    """Runs one action invocation: inputs -> orchestrator -> outputs.

    This is the only place that catches every failure; it turns it into
    `success=false` plus a failure annotation and a non-zero exit code.
    """

    def __init__(self, *, action_io: ActionIO, orchestrator: CrawlerRunOrchestrator):
        self.action_io = action_io
        self.orchestrator = orchestrator

    def read_config(self) -> RunConfig:
        return RunConfig.from_inputs(
            crawler_name=self.action_io.get_input("crawler-name", required=True),
            wait_for_completion=self.action_io.get_input("wait-for-completion"),
            timeout_minutes=self.action_io.get_input("timeout-minutes"),
            catalog_id=self.action_io.get_input("catalog-id"),
        )

    def execute(self) -> RunResult:
        try:
            config = self.read_config()
            return self.orchestrator.execute(config)
        except Exception as e:
            logger.debug("Crawler run failed", exc_info=True)
            return RunResult.failed(str(e) or UNKNOWN_ERROR_MESSAGE)

    def run(self) -> int:
        result = self.execute()
        if not result.success:
            self.action_io.set_failed(result.error)
        for name, value in result.to_outputs().items():
            self.action_io.set_output(name, value)
        return 0 if result.success else 1
