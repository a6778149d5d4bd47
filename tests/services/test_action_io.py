import io
import logging

import pytest

from gluecrawl.exceptions import ConfigurationError
from gluecrawl.services.action_io import ActionIO, WorkflowCommandHandler, escape_data


def test_get_input_reads_uppercased_env_and_strips():
    action_io = ActionIO(environ={"INPUT_CRAWLER-NAME": "  raw-data \n"})
    assert action_io.get_input("crawler-name") == "raw-data"


def test_get_input_missing_optional_is_empty():
    assert ActionIO(environ={}).get_input("catalog-id") == ""


def test_get_input_required_missing_raises():
    with pytest.raises(ConfigurationError) as exc:
        ActionIO(environ={"INPUT_CRAWLER-NAME": ""}).get_input("crawler-name", required=True)
    assert "crawler-name" in str(exc.value)


def test_set_output_appends_to_github_output(tmp_path, read_outputs):
    out_file = tmp_path / "output"
    action_io = ActionIO(environ={"GITHUB_OUTPUT": str(out_file)})
    action_io.set_output("success", "true")
    action_io.set_output("state", "READY")
    assert read_outputs(out_file) == {"success": "true", "state": "READY"}


def test_set_output_without_file_uses_workflow_command():
    stream = io.StringIO()
    ActionIO(environ={}, stream=stream).set_output("tables-created", "4")
    assert stream.getvalue() == "::set-output name=tables-created::4\n"


def test_error_message_is_escaped():
    stream = io.StringIO()
    ActionIO(environ={}, stream=stream).set_failed("line one\nline 100%")
    assert stream.getvalue() == "::error::line one%0Aline 100%25\n"


def test_escape_data_handles_carriage_return():
    assert escape_data("a\r\nb") == "a%0D%0Ab"


def test_handler_maps_levels_to_commands():
    stream = io.StringIO()
    action_io = ActionIO(environ={}, stream=stream)
    log = logging.getLogger("gluecrawl.test.handler")
    log.propagate = False
    log.setLevel(logging.DEBUG)
    handler = WorkflowCommandHandler(action_io)
    log.addHandler(handler)
    try:
        log.debug("detail")
        log.info("Crawler state: %s", "RUNNING")
        log.warning("Could not retrieve crawler metrics")
        log.error("failed")
    finally:
        log.removeHandler(handler)

    assert stream.getvalue().splitlines() == [
        "::debug::detail",
        "Crawler state: RUNNING",
        "::warning::Could not retrieve crawler metrics",
        "::error::failed",
    ]
