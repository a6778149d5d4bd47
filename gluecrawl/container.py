"""Dependency injection container for the application."""
import boto3
from dependency_injector import containers, providers

from gluecrawl import config as env
from gluecrawl.services.action_io import ActionIO
from gluecrawl.services.action_runner import ActionRunner
from gluecrawl.services.crawler_run_orchestrator import CrawlerRunOrchestrator
from gluecrawl.services.glue_service import GlueCrawlerService


# Environment variables used by the container (read via `gluecrawl.config` helpers).
#
# AWS_REGION (str | optional)
#   Region for the Glue client. When unset boto3 resolves it from its usual
#   chain (AWS_DEFAULT_REGION, shared config, instance metadata).
#
# GLUECRAWL_POLL_INTERVAL_SECONDS (float seconds, default: 10.0)
#   Delay between crawler status checks while waiting for completion.
#
# Credentials are never read here; boto3's default credential chain applies.
def build_env() -> dict:
    return {
        "AWS_REGION": env.get_optional_str_env("AWS_REGION"),
        "GLUECRAWL_POLL_INTERVAL_SECONDS": env.get_float_env("GLUECRAWL_POLL_INTERVAL_SECONDS", 10.0),
    }


ENV = build_env()


class Container(containers.DeclarativeContainer):
    """Dependency injection container for gluecrawl."""

    config = providers.Configuration(default=ENV)

    # One boto3 client per process
    glue_client = providers.Singleton(
        boto3.client,
        "glue",
        region_name=config.AWS_REGION,
    )

    glue_service = providers.Singleton(
        GlueCrawlerService,
        glue_client=glue_client,
    )

    action_io = providers.Singleton(
        ActionIO,
    )

    orchestrator = providers.Factory(
        CrawlerRunOrchestrator,
        glue_service=glue_service,
        poll_interval_seconds=config.GLUECRAWL_POLL_INTERVAL_SECONDS.as_(float),
    )

    action_runner = providers.Factory(
        ActionRunner,
        action_io=action_io,
        orchestrator=orchestrator,
    )
