"""Crawl run metrics data model."""
from typing import Any, Mapping, NamedTuple, Optional


class RunMetrics(NamedTuple):
    """Catalog changes made by the last crawler run."""
    tables_created: int = 0
    tables_updated: int = 0
    tables_deleted: int = 0

    @classmethod
    def zero(cls) -> "RunMetrics":
        return cls(0, 0, 0)

    @classmethod
    def from_glue(cls, entry: Optional[Mapping[str, Any]]) -> "RunMetrics":
        """Build from one `CrawlerMetricsList` entry; missing fields count as 0."""
        if not entry:
            return cls.zero()
        return cls(
            tables_created=int(entry.get("TablesCreated") or 0),
            tables_updated=int(entry.get("TablesUpdated") or 0),
            tables_deleted=int(entry.get("TablesDeleted") or 0),
        )
