"""GitHub Actions runner plumbing: inputs, outputs and workflow commands."""
import logging
import os
import sys
import uuid
from typing import Mapping, Optional, TextIO

from gluecrawl.exceptions import ConfigurationError


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def escape_property(value: str) -> str:
    return escape_data(value).replace(":", "%3A").replace(",", "%2C")


class ActionIO:
    """
    Reads `INPUT_*` variables and writes outputs the way the Actions runner expects.

    Environment and stream are injectable so tests can use a plain dict and an
    in-memory buffer.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, stream: Optional[TextIO] = None):
        self.environ = os.environ if environ is None else environ
        self.stream = stream

    def _out(self) -> TextIO:
        return self.stream if self.stream is not None else sys.stdout

    def get_input(self, name: str, required: bool = False) -> str:
        key = "INPUT_" + name.replace(" ", "_").upper()
        value = (self.environ.get(key) or "").strip()
        if required and not value:
            raise ConfigurationError(name, "is required and not supplied")
        return value

    def set_output(self, name: str, value: str) -> None:
        output_path = self.environ.get("GITHUB_OUTPUT")
        if output_path:
            delimiter = f"ghadelimiter_{uuid.uuid4()}"
            with open(output_path, "a", encoding="utf-8") as f:
                f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
            return
        # Runner without GITHUB_OUTPUT (older runners, local use)
        self.issue_command("set-output", value, name=name)

    def issue_command(self, command: str, message: str = "", **properties: str) -> None:
        props = ",".join(f"{k}={escape_property(str(v))}" for k, v in properties.items())
        head = f"::{command} {props}" if props else f"::{command}"
        out = self._out()
        out.write(f"{head}::{escape_data(message)}\n")
        out.flush()

    def info(self, message: str) -> None:
        out = self._out()
        out.write(message + "\n")
        out.flush()

    def warning(self, message: str) -> None:
        self.issue_command("warning", message)

    def error(self, message: str) -> None:
        self.issue_command("error", message)

    def set_failed(self, message: str) -> None:
        self.error(message)


class WorkflowCommandHandler(logging.Handler):
    """Logging handler that turns WARNING/ERROR records into workflow annotations."""

    def __init__(self, action_io: ActionIO, level=logging.NOTSET):
        super().__init__(level)
        self.action_io = action_io

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            if record.levelno >= logging.ERROR:
                self.action_io.error(msg)
            elif record.levelno >= logging.WARNING:
                self.action_io.warning(msg)
            elif record.levelno <= logging.DEBUG:
                self.action_io.issue_command("debug", msg)
            else:
                self.action_io.info(msg)
        except Exception:
            self.handleError(record)
