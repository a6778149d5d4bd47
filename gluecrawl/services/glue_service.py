import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from gluecrawl.domain.run_metrics import RunMetrics
from gluecrawl.exceptions import GlueServiceError

logger = logging.getLogger(__name__)


class GlueCrawlerService:
    """
    Wrapper around a boto3 Glue client for the three crawler calls we need.

    The client is injected (see `gluecrawl.container`) so tests can pass a Mock
    or a stubbed client instead of patching boto3.
    """

    def __init__(self, glue_client: Any):
        self.glue_client = glue_client

    def start_crawler(self, crawler_name: str) -> None:
        try:
            self.glue_client.start_crawler(Name=crawler_name)
        except (ClientError, BotoCoreError) as e:
            raise GlueServiceError("StartCrawler", e) from e

    def get_crawler_state(self, crawler_name: str) -> str:
        """Return the crawler's current State (READY, RUNNING, STOPPING)."""
        try:
            response = self.glue_client.get_crawler(Name=crawler_name)
        except (ClientError, BotoCoreError) as e:
            raise GlueServiceError("GetCrawler", e) from e
        return (response.get("Crawler") or {}).get("State")

    def get_crawler_metrics(self, crawler_name: str) -> RunMetrics:
        """Return table counts for the crawler's last run.

        A response without a metrics entry yields zero metrics.
        """
        try:
            response = self.glue_client.get_crawler_metrics(CrawlerNameList=[crawler_name])
        except (ClientError, BotoCoreError) as e:
            raise GlueServiceError("GetCrawlerMetrics", e) from e
        entries = response.get("CrawlerMetricsList") or []
        if not entries:
            logger.debug("No metrics reported for crawler %s", crawler_name)
            return RunMetrics.zero()
        return RunMetrics.from_glue(entries[0])
