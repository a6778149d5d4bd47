import logging
import time
from typing import Callable

from gluecrawl.domain import crawler_state
from gluecrawl.domain.run_config import RunConfig
from gluecrawl.domain.run_metrics import RunMetrics
from gluecrawl.domain.run_result import RunResult
from gluecrawl.exceptions import ConfigurationError, CrawlerTimeoutError
from gluecrawl.services.glue_service import GlueCrawlerService

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_SECONDS = 10.0


class CrawlerRunOrchestrator:
    """Starts a crawler and optionally waits for it to become READY again.

    Owns the run control-flow only: one start call, the poll loop, and the
    best-effort metrics lookup. Start and status failures propagate to the
    caller unchanged; metrics failures are downgraded to a warning.
    """

    def __init__(
        self,
        *,
        glue_service: GlueCrawlerService,
        poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.glue_service = glue_service
        self.poll_interval_seconds = float(poll_interval_seconds)
        self.sleep = sleep
        self.clock = clock

    def execute(self, config: RunConfig) -> RunResult:
        if config is None or not config.crawler_name:
            raise ConfigurationError("crawler-name")
        if config.catalog_id:
            logger.debug("catalog-id %s is accepted but not used", config.catalog_id)

        logger.info("Starting crawler: %s", config.crawler_name)
        self.glue_service.start_crawler(config.crawler_name)

        if not config.wait_for_completion:
            logger.info("Not waiting for crawler completion (wait-for-completion is false)")
            return RunResult.started()

        logger.info("Waiting for crawler to complete...")
        self.wait_until_ready(config)

        metrics = self._fetch_metrics(config.crawler_name)
        logger.info("Crawler completed successfully")
        return RunResult.completed(metrics)

    def wait_until_ready(self, config: RunConfig) -> str:
        """Poll until the crawler reports READY or the timeout elapses.

        The timeout is checked once per iteration, so a run can overshoot it by
        up to one poll interval.
        """
        started_at = self.clock()
        timeout_seconds = config.timeout_seconds

        while True:
            state = self.glue_service.get_crawler_state(config.crawler_name)
            logger.info("Crawler state: %s", state)

            if crawler_state.is_terminal(state):
                return state

            if self.clock() - started_at > timeout_seconds:
                raise CrawlerTimeoutError(config.crawler_name, config.timeout_minutes)

            self.sleep(self.poll_interval_seconds)

    def _fetch_metrics(self, crawler_name: str) -> RunMetrics:
        try:
            return self.glue_service.get_crawler_metrics(crawler_name)
        except Exception as e:
            logger.warning("Could not retrieve crawler metrics: %s", e)
            return RunMetrics.zero()
