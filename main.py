#!/usr/bin/env python
"""CLI for devto-digest."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, field_validator

from devto_digest.config import create_from_config, get_default_config_path, load_config
from devto_digest.errors import DigestError, GrammarError

logger = logging.getLogger(__name__)

USAGE = "usage: /article [tag] [freshness] [limit], e.g. /article python 7 5"


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    command: str
    config: Path
    log: bool = False
    log_dir: str = "logs"

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v


async def run(args: CLIArgs) -> str:
    """Build the pipeline from config and run it for one command.

    Args:
        args: Validated CLI arguments.

    Returns:
        The formatted digest.
    """
    config = load_config(args.config)
    pipeline, run_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    logger.info(f"Running digest for: {args.command}")
    logger.info(f"Config: {args.config}")

    try:
        return await pipeline.run(args.command)
    finally:
        if run_logger and run_logger.last_log_path:
            logger.info(f"Run log written to: {run_logger.last_log_path}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Fetch a digest of dev.to articles.")
    parser.add_argument(
        "command",
        help='Chat command, e.g. "/article python 7 5"',
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON record of the run",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            command=ns.command,
            config=config_path,
            log=ns.log,
            log_dir=ns.log_dir,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        text = asyncio.run(run(args))
    except GrammarError as e:
        logger.error(str(e))
        print(USAGE, file=sys.stderr)
        sys.exit(2)
    except DigestError as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)

    if not text:
        logger.info("No articles found.")
        return
    print(text, end="")


if __name__ == "__main__":
    main()
