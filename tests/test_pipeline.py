"""Tests for DigestPipeline."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from devto_digest.command.grammar import CommandGrammar, TagAlphabet
from devto_digest.data import Article, Query, QueryDefaults
from devto_digest.errors import FetchError, GrammarError
from devto_digest.output.formatter import format_articles
from devto_digest.pipeline.digest import DigestPipeline
from devto_digest.run_logger import RunLogger


class TestDigestPipeline:
    """Tests for DigestPipeline."""

    @pytest.fixture
    def articles(self) -> list[Article]:
        return [
            Article(title=f"Article {i}", url=f"https://dev.to/a/{i}", score=i)
            for i in range(1, 13)
        ]

    @pytest.fixture
    def mock_fetcher(self, articles: list[Article]) -> MagicMock:
        """Create a mock fetcher."""
        fetcher = MagicMock()
        fetcher.fetch = AsyncMock(return_value=articles)
        return fetcher

    @pytest.fixture
    def pipeline(self, mock_fetcher: MagicMock) -> DigestPipeline:
        return DigestPipeline(mock_fetcher)

    async def test_run_renders_limit(
        self, pipeline: DigestPipeline, articles: list[Article]
    ) -> None:
        text = await pipeline.run("/article python 7 3")
        assert text == format_articles(articles, 3)
        assert "Article 3" in text
        assert "Article 4" not in text

    async def test_run_uses_default_limit(self, pipeline: DigestPipeline) -> None:
        text = await pipeline.run("/article")
        assert text.count("⚉") == 10

    async def test_run_passes_query_to_fetcher(
        self, pipeline: DigestPipeline, mock_fetcher: MagicMock
    ) -> None:
        await pipeline.run("/article rust 5 3")
        mock_fetcher.fetch.assert_awaited_once_with(Query(tag="rust", freshness="5", limit=3))

    async def test_run_invalid_command_skips_fetch(
        self, pipeline: DigestPipeline, mock_fetcher: MagicMock
    ) -> None:
        with pytest.raises(GrammarError):
            await pipeline.run("/article 123")
        mock_fetcher.fetch.assert_not_called()

    async def test_run_propagates_fetch_error(self, mock_fetcher: MagicMock) -> None:
        mock_fetcher.fetch = AsyncMock(side_effect=FetchError("https://dev.to", "boom"))
        pipeline = DigestPipeline(mock_fetcher)
        with pytest.raises(FetchError):
            await pipeline.run("/article")

    async def test_run_empty_result(self, mock_fetcher: MagicMock) -> None:
        mock_fetcher.fetch = AsyncMock(return_value=[])
        pipeline = DigestPipeline(mock_fetcher)
        assert await pipeline.run("/article go") == ""

    def test_parse_uses_grammar_and_defaults(self, mock_fetcher: MagicMock) -> None:
        pipeline = DigestPipeline(
            mock_fetcher,
            grammar=CommandGrammar(command="/news", tag_alphabet=TagAlphabet.LEGACY),
            defaults=QueryDefaults(freshness="30", limit=2),
        )
        assert pipeline.parse("/news web_dev") == Query(tag="web_dev", freshness="30", limit=2)
        assert pipeline.grammar.command == "/news"


class TestDigestPipelineRunLogging:
    """Run records written by the pipeline."""

    @pytest.fixture
    def mock_fetcher(self) -> MagicMock:
        fetcher = MagicMock()
        fetcher.fetch = AsyncMock(
            return_value=[
                Article(title="A", url="https://dev.to/a", score=1),
                Article(title="B", url="https://dev.to/b", score=2),
            ]
        )
        return fetcher

    async def test_writes_stages(self, mock_fetcher: MagicMock, tmp_path: Path) -> None:
        run_logger = RunLogger(log_dir=tmp_path)
        pipeline = DigestPipeline(mock_fetcher, run_logger=run_logger)

        await pipeline.run("/article go 10 1")

        assert run_logger.last_log_path is not None
        data = json.loads(run_logger.last_log_path.read_text())
        assert data["command"] == "/article go 10 1"
        assert [s["stage"] for s in data["stages"]] == ["parse", "fetch", "format"]
        assert data["stages"][0]["output"] == {"tag": "go", "freshness": "10", "limit": 1}
        assert data["stages"][1]["component"] == "MagicMock"
        assert len(data["stages"][1]["output"]) == 2
        assert data["rendered_count"] == 1
        assert data["error"] is None

    async def test_records_error(self, mock_fetcher: MagicMock, tmp_path: Path) -> None:
        run_logger = RunLogger(log_dir=tmp_path)
        pipeline = DigestPipeline(mock_fetcher, run_logger=run_logger)

        with pytest.raises(GrammarError):
            await pipeline.run("/article 0")

        assert run_logger.last_log_path is not None
        data = json.loads(run_logger.last_log_path.read_text())
        assert data["stages"] == []
        assert data["error"].startswith("GrammarError: invalid command")

    async def test_records_unexpected_fetcher_error(
        self, mock_fetcher: MagicMock, tmp_path: Path
    ) -> None:
        mock_fetcher.fetch = AsyncMock(side_effect=RuntimeError("fetcher crashed"))
        run_logger = RunLogger(log_dir=tmp_path)
        pipeline = DigestPipeline(mock_fetcher, run_logger=run_logger)

        with pytest.raises(RuntimeError, match="fetcher crashed"):
            await pipeline.run("/article go")

        assert run_logger.last_log_path is not None
        data = json.loads(run_logger.last_log_path.read_text())
        assert [s["stage"] for s in data["stages"]] == ["parse"]
        assert data["error"] == "RuntimeError: fetcher crashed"
