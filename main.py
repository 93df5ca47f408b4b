#!/usr/bin/env python
"""CLI for Notilytics readability and word statistics."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import BaseModel, TypeAdapter, field_validator

from notilytics.config import create_from_config, get_default_config_path, load_config
from notilytics.data import Article
from notilytics.readability import score_article

logger = logging.getLogger(__name__)


class ArticleRecord(BaseModel):
    """One article as written by the fetch layer."""

    url: str
    title: str | None = None
    source_name: str = ""
    source_url: str = ""
    published_at: str | None = None
    description: str | None = None

    def to_article(self) -> Article:
        return Article(
            url=self.url,
            title=self.title or "",
            source_name=self.source_name,
            source_url=self.source_url,
            published_at=self.published_at,
            description=self.description,
        )


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    query: str
    articles: Path
    config: Path
    stats: bool = False

    @field_validator("query")
    @classmethod
    def query_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Please enter a search term.")
        return v.strip()

    @field_validator("articles", "config")
    @classmethod
    def file_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"File not found: {v}")
        return v


def load_articles(path: Path) -> list[Article]:
    """Read a JSON array of articles and score each one."""
    records = TypeAdapter(list[ArticleRecord]).validate_json(path.read_text())
    return [score_article(r.to_article()) for r in records]


def run(args: CLIArgs) -> None:
    """Record the search and report readability (and word statistics).

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config)
    logging.getLogger().setLevel(config.logging.level)
    service = create_from_config(config)
    articles = load_articles(args.articles)

    logger.info(f"Config: {args.config}")
    result = service.record_search(args.query, articles)

    print(f"\nSearch Results for: {result.query}\n")
    for i, article in enumerate(result.articles, 1):
        logger.info(f"{i}. {article.title}")
        logger.info(f"   Source: {article.source_name}")
        logger.info(f"   URL: {article.url}")
        if article.published_at:
            logger.info(f"   Published: {article.published_at}")
        logger.info(
            f"   Grade: {article.kincaid_grade}  Reading score: {article.reading_score}"
        )

    logger.info("\n--- Readability ---")
    logger.info(f"Average grade: {result.avg_grade:.2f}")
    logger.info(f"Average reading score: {result.avg_score:.2f}")

    if args.stats:
        logger.info("")
        logger.info(service.word_frequency(result.query))


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Score the readability of news search results."
    )
    parser.add_argument(
        "query",
        help="Search query the articles were fetched for",
    )
    parser.add_argument(
        "--articles",
        "-a",
        type=Path,
        required=True,
        help="Path to a JSON array of fetched articles",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        default=False,
        help="Also print word-frequency statistics for the results",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            query=ns.query,
            articles=ns.articles,
            config=config_path,
            stats=ns.stats,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        run(args)
    except (OSError, ValueError) as e:
        logger.error(f"Error reading input: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
