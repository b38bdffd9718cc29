"""
Entrypoint: load .env and config, init logging, fetch the quotes for the URLs
given on the command line and print them as JSON.

With no URLs, runs against the built-in mock interface.
"""

import asyncio
import json
import logging
import sys
from typing import List, Optional

import structlog
from dotenv import load_dotenv

from quotes.config import Config
from quotes.fetcher import create_fetcher
from quotes.mock import DEFAULT_RESPONSES, MockRequester
from quotes.transform import get_arnie_quotes


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Route stdlib logging through structlog; logs go to stderr, results to stdout."""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, str(level).upper(), logging.INFO),
        force=True,
    )

    renderer = structlog.processors.JSONRenderer() if fmt == "json" else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


async def run(urls: List[str], config: Config) -> List[dict]:
    """Fetch and transform the URLs with the configured requester."""
    if not urls:
        return await get_arnie_quotes(list(DEFAULT_RESPONSES), MockRequester())

    fetcher = await create_fetcher(config.fetcher)
    async with fetcher:
        return await get_arnie_quotes(urls, fetcher)


async def main(argv: Optional[List[str]] = None) -> int:
    """Initialize dependencies, run one batch and print the records."""
    load_dotenv()
    try:
        config = Config()
    except (FileNotFoundError, ValueError) as e:
        setup_logging()
        structlog.get_logger(__name__).error("quotes_run_failed", error=str(e), exc_info=True)
        return 1

    setup_logging(config.logging.get('level', 'INFO'), config.logging.get('format', 'json'))
    logger = structlog.get_logger(__name__)

    urls = sys.argv[1:] if argv is None else argv
    logger.info("quotes_run_started", url_count=len(urls), mock=not urls)

    try:
        records = await run(urls, config)
    except Exception as e:
        logger.error("quotes_run_failed", error=str(e), exc_info=True)
        return 1

    print(json.dumps(records, ensure_ascii=False))
    logger.info("quotes_run_completed", result_count=len(records))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
