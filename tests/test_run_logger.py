"""Tests for RunLogger and serialization helpers."""

import json
from pathlib import Path

from devto_digest.data import Article, CommandArgs, Query
from devto_digest.errors import FetchError
from devto_digest.run_logger import RunLogger, _serialize

# -- _serialize tests --


def test_serialize_none() -> None:
    assert _serialize(None) is None


def test_serialize_primitive() -> None:
    assert _serialize(42) == 42
    assert _serialize("hello") == "hello"
    assert _serialize(True) is True


def test_serialize_dataclass() -> None:
    result = _serialize(Query(tag="go", freshness="10", limit=3))
    assert result == {"tag": "go", "freshness": "10", "limit": 3}


def test_serialize_list_of_articles() -> None:
    result = _serialize([Article(title="A", url="https://dev.to/a", score=1)])
    assert result == [{"title": "A", "url": "https://dev.to/a", "score": 1}]


def test_serialize_named_tuple() -> None:
    result = _serialize(CommandArgs("go", "10", ""))
    assert result == {"tag": "go", "freshness": "10", "limit": ""}


def test_serialize_path() -> None:
    assert _serialize(Path("/tmp/x")) == "/tmp/x"


# -- RunLogger tests --


def test_disabled_logger_is_noop(tmp_path: Path) -> None:
    run_logger = RunLogger(log_dir=tmp_path / "logs", enabled=False)
    run_logger.start_run("/article")
    run_logger.log_stage("parse", "parse_command", "/article", None, 0.1)
    assert run_logger.finish_run(0) is None
    assert run_logger.last_log_path is None
    assert not (tmp_path / "logs").exists()


def test_finish_without_start_is_noop(tmp_path: Path) -> None:
    run_logger = RunLogger(log_dir=tmp_path)
    assert run_logger.finish_run(3) is None


def test_writes_json_record(tmp_path: Path) -> None:
    log_dir = tmp_path / "nested" / "logs"
    run_logger = RunLogger(log_dir=log_dir)
    run_logger.start_run("/article go 10 2")
    run_logger.log_stage(
        stage="parse",
        component="parse_command",
        input_data="/article go 10 2",
        output_data=Query(tag="go", freshness="10", limit=2),
        duration_seconds=0.123456,
    )
    path = run_logger.finish_run(2)

    assert path is not None
    assert path.parent == log_dir
    assert path.name.startswith("run_")
    assert path.suffix == ".json"
    assert run_logger.last_log_path == path

    data = json.loads(path.read_text())
    assert data["command"] == "/article go 10 2"
    assert data["rendered_count"] == 2
    assert data["completed_at"] is not None
    assert data["error"] is None
    stage = data["stages"][0]
    assert stage["output"] == {"tag": "go", "freshness": "10", "limit": 2}
    assert stage["duration_seconds"] == 0.1235


def test_records_error(tmp_path: Path) -> None:
    run_logger = RunLogger(log_dir=tmp_path)
    run_logger.start_run("/article")
    path = run_logger.finish_run(0, error=FetchError("https://dev.to/api/articles", "timeout"))

    assert path is not None
    data = json.loads(path.read_text())
    assert data["error"] == "FetchError: error fetching https://dev.to/api/articles: timeout"


def test_consecutive_runs_write_separate_files(tmp_path: Path) -> None:
    run_logger = RunLogger(log_dir=tmp_path)
    run_logger.start_run("/article")
    first = run_logger.finish_run(0)
    run_logger.start_run("/article go")
    second = run_logger.finish_run(0)
    assert first != second
    assert len(list(tmp_path.glob("run_*.json"))) == 2
