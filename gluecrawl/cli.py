"""Command-line entry point used by the action (`gluecrawl` console script)."""
import logging
import sys
from typing import Optional

from gluecrawl import config as env
from gluecrawl.container import Container
from gluecrawl.services.action_io import ActionIO, WorkflowCommandHandler
from gluecrawl.services.action_runner import UNKNOWN_ERROR_MESSAGE

logger = logging.getLogger(__name__)


def configure_logging(action_io: ActionIO) -> None:
    # Replaces any handler installed earlier (e.g. by a warning logged at import time)
    logging.basicConfig(
        level=env.log_level(),
        format="%(message)s",
        handlers=[WorkflowCommandHandler(action_io)],
        force=True,
    )


def main(container: Optional[Container] = None) -> int:
    if container is None:
        container = Container()

    action_io = container.action_io()
    configure_logging(action_io)

    try:
        runner = container.action_runner()
    except Exception as e:
        # boto3 client construction (e.g. no region configured)
        logger.debug("Could not build action runner", exc_info=True)
        action_io.set_failed(str(e) or UNKNOWN_ERROR_MESSAGE)
        action_io.set_output("success", "false")
        return 1

    return runner.run()


if __name__ == '__main__':
    sys.exit(main())
