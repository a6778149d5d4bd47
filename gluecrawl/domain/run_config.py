from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from gluecrawl.exceptions import ConfigurationError

DEFAULT_WAIT_FOR_COMPLETION = "true"
DEFAULT_TIMEOUT_MINUTES = "60"


@dataclass(frozen=True)
class RunConfig:
    """Settings for a single crawler run.

    `catalog_id` is accepted for compatibility with the action inputs but is not
    used when talking to Glue; the crawler's own account catalog is always used.
    """

    crawler_name: str
    wait_for_completion: bool = True
    timeout_minutes: int = 60
    catalog_id: Optional[str] = None

    def __post_init__(self):
        if self.crawler_name is None or self.crawler_name.strip() == "":
            raise ConfigurationError("crawler-name")
        if isinstance(self.timeout_minutes, bool) or not isinstance(self.timeout_minutes, int):
            raise ConfigurationError("timeout-minutes", "must be an integer")
        if self.timeout_minutes <= 0:
            raise ConfigurationError("timeout-minutes", "must be a positive integer")

    @property
    def timeout_seconds(self) -> int:
        return self.timeout_minutes * 60

    @classmethod
    def from_inputs(
        cls,
        crawler_name: Optional[str],
        wait_for_completion: Optional[str] = None,
        timeout_minutes: Optional[str] = None,
        catalog_id: Optional[str] = None,
    ) -> RunConfig:
        """Parse raw string inputs as the action receives them.

        Empty strings fall back to the input defaults; only the literal "true"
        enables waiting.
        """
        wait_raw = wait_for_completion or DEFAULT_WAIT_FOR_COMPLETION
        timeout_raw = (timeout_minutes or DEFAULT_TIMEOUT_MINUTES).strip()
        try:
            timeout = int(timeout_raw, 10)
        except ValueError as e:
            raise ConfigurationError("timeout-minutes", f"is not an integer: {timeout_raw!r}") from e

        return cls(
            crawler_name=(crawler_name or "").strip(),
            wait_for_completion=wait_raw == "true",
            timeout_minutes=timeout,
            catalog_id=catalog_id or None,
        )
