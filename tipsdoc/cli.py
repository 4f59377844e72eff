#!/usr/bin/env python3
"""
Lint a tips corpus from the command line.

Checks every article's front matter and the corpus-wide uniqueness of
permalink and order, printing one ``path:line: code: message`` line per
problem (or a JSON report with --json).

Exit codes:
    0  corpus is clean
    1  at least one issue was found
    2  content directory missing or unreadable, or invalid arguments
"""

import argparse
import asyncio
import sys
from pathlib import Path

from tipsdoc.config import get_settings
from tipsdoc.application.schemas import CorpusReportResponse
from tipsdoc.application.services import ArticleService
from tipsdoc.domain.exceptions import EntityNotFoundError, FrontMatterError
from tipsdoc.infrastructure.logging.log_config import setup_logging
from tipsdoc.infrastructure.storage.filesystem_article_repository import FileSystemArticleRepository

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_UNREADABLE = 2


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="tipsdoc-lint",
        description="Validate front matter across a directory of tips",
    )
    parser.add_argument("content_dir", nargs="?", default=settings.content_dir,
                        help=f"Directory holding the articles (default: {settings.content_dir})")
    parser.add_argument("--pattern", type=str, default=settings.content_glob,
                        help=f"Glob selecting article files (default: {settings.content_glob})")
    parser.add_argument("--strict", action="store_true", default=settings.strict_keys,
                        help="Treat unknown front-matter keys as errors")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.pattern.strip() or Path(args.pattern).is_absolute():
        parser.error(f"--pattern must be a non-empty glob relative to the content directory, got {args.pattern!r}")

    settings = get_settings()
    if args.quiet:
        settings = settings.model_copy(update={"log_level": "WARNING", "log_level_pipeline": "WARNING"})
    setup_logging(settings)

    repository = FileSystemArticleRepository(args.content_dir, args.pattern)
    service = ArticleService(repository, strict=args.strict)

    try:
        report = asyncio.run(service.validate_corpus())
    except (EntityNotFoundError, FrontMatterError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_UNREADABLE

    if args.json:
        print(CorpusReportResponse.from_report(report).model_dump_json(indent=2))
    else:
        for issue in report.issues:
            print(issue.render())
        print(f"{report.documents} documents, {len(report.issues)} issues")

    return EXIT_OK if report.ok else EXIT_ISSUES


if __name__ == "__main__":
    sys.exit(main())
