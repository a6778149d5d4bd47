from gluecrawl.domain import RunMetrics, RunResult


def test_metrics_from_glue_entry():
    m = RunMetrics.from_glue({"CrawlerName": "c", "TablesCreated": 3, "TablesUpdated": 2, "TablesDeleted": 1})
    assert m == RunMetrics(3, 2, 1)


def test_metrics_missing_fields_default_to_zero():
    assert RunMetrics.from_glue({"CrawlerName": "c", "TablesCreated": 4}) == RunMetrics(4, 0, 0)
    assert RunMetrics.from_glue(None) == RunMetrics.zero()
    assert RunMetrics.from_glue({}) == RunMetrics.zero()


def test_completed_result_outputs():
    result = RunResult.completed(RunMetrics(5, 1, 0))
    assert result.to_outputs() == {
        "success": "true",
        "state": "READY",
        "tables-created": "5",
        "tables-updated": "1",
        "tables-deleted": "0",
    }


def test_started_result_reports_only_running_state():
    result = RunResult.started()
    assert result.metrics == RunMetrics.zero()
    assert result.to_outputs() == {"success": "true", "state": "RUNNING"}


def test_failed_result_only_sets_success():
    result = RunResult.failed("boom")
    assert result.success is False
    assert result.error == "boom"
    assert result.to_outputs() == {"success": "false"}
