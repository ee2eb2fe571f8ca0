"""Digest pipeline: command in, formatted articles out."""

import logging
import time

from devto_digest.command.grammar import CommandGrammar
from devto_digest.command.parser import parse_command
from devto_digest.data import DEFAULT_QUERY_DEFAULTS, Query, QueryDefaults
from devto_digest.output.formatter import format_articles
from devto_digest.run_logger import RunLogger
from devto_digest.search.base import ArticleFetcher

logger = logging.getLogger(__name__)


class DigestPipeline:
    """Turns one chat command into a formatted digest.

    Flow:
    1. Validate and parse the command into a Query
    2. Fetch articles for the query's tag and freshness
    3. Render at most ``query.limit`` of them

    Args:
        fetcher: Source of articles.
        grammar: Grammar commands must satisfy.
        defaults: Values used for parameters a command omits.
        run_logger: Optional RunLogger for per-run JSON records.
    """

    def __init__(
        self,
        fetcher: ArticleFetcher,
        *,
        grammar: CommandGrammar | None = None,
        defaults: QueryDefaults = DEFAULT_QUERY_DEFAULTS,
        run_logger: RunLogger | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._grammar = grammar or CommandGrammar()
        self._defaults = defaults
        self._run_logger = run_logger

    @property
    def grammar(self) -> CommandGrammar:
        return self._grammar

    def parse(self, raw: str) -> Query:
        """Parse ``raw`` with this pipeline's grammar and defaults."""
        return parse_command(raw, grammar=self._grammar, defaults=self._defaults)

    async def run(self, raw: str) -> str:
        """Execute the pipeline for a single command.

        Args:
            raw: Command string as typed by the user.

        Returns:
            The formatted digest (empty if nothing was rendered).

        Raises:
            GrammarError: If the command is malformed. Nothing is fetched.
            ParseError: If the limit cannot be parsed. Nothing is fetched.
            FetchError: If the articles cannot be retrieved.
        """
        if self._run_logger:
            self._run_logger.start_run(raw)

        try:
            t0 = time.monotonic()
            query = self.parse(raw)
            self._log_stage("parse", "parse_command", raw, query, t0)

            t0 = time.monotonic()
            articles = await self._fetcher.fetch(query)
            self._log_stage("fetch", type(self._fetcher).__name__, query, articles, t0)

            t0 = time.monotonic()
            text = format_articles(articles, query.limit)
            rendered = min(len(articles), max(query.limit, 0))
            self._log_stage("format", "format_articles", {"limit": query.limit}, text, t0)
        except Exception as e:
            if self._run_logger:
                self._run_logger.finish_run(0, error=e)
            raise

        logger.info(
            "Rendered %d of %d articles for tag=%r top=%s",
            rendered,
            len(articles),
            query.tag,
            query.freshness,
        )
        if self._run_logger:
            self._run_logger.finish_run(rendered)
        return text

    def _log_stage(self, stage: str, component: str, input_data, output_data, t0: float) -> None:
        if self._run_logger:
            self._run_logger.log_stage(
                stage=stage,
                component=component,
                input_data=input_data,
                output_data=output_data,
                duration_seconds=time.monotonic() - t0,
            )
