"""Corpus-wide checks — per-document parsing plus uniqueness of permalink and order."""

from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal

from tipsdoc.application.services.front_matter import parse_article
from tipsdoc.domain.entities import Article, CorpusReport, SourceDocument, ValidationIssue
from tipsdoc.domain.exceptions import DuplicateKey, FrontMatterError
from tipsdoc.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

log = PipelineLogger("CorpusValidator")


def normalize_permalink(permalink: str) -> str:
    """``/tips/142/`` and ``tips/142`` resolve to the same public path."""
    return permalink.strip().strip("/")


def find_duplicates(articles: Iterable[Article]) -> list[DuplicateKey]:
    """Return one DuplicateKey per shared permalink, then per shared order."""
    articles = list(articles)
    by_permalink: dict[str, list[Article]] = defaultdict(list)
    by_order: dict[Decimal, list[Article]] = defaultdict(list)
    for article in articles:
        by_permalink[normalize_permalink(article.permalink)].append(article)
        by_order[article.order_key].append(article)

    duplicates: list[DuplicateKey] = []
    for group in by_permalink.values():
        if len(group) > 1:
            duplicates.append(DuplicateKey("permalink", group[0].permalink, _sources(group)))
    for group in by_order.values():
        if len(group) > 1:
            duplicates.append(DuplicateKey("order", group[0].order, _sources(group)))
    return duplicates


def ensure_unique(articles: Iterable[Article]) -> None:
    """Raise the first DuplicateKey found, permalinks before orders."""
    duplicates = find_duplicates(articles)
    if duplicates:
        raise duplicates[0]


def _sources(group: list[Article]) -> list[str]:
    return [a.source or f"<{a.permalink}>" for a in group]


class CorpusValidator:
    """Lints a whole corpus and reports every problem instead of stopping at the first."""

    def __init__(self, strict: bool = False):
        self._strict = strict

    def validate(self, documents: Iterable[SourceDocument]) -> CorpusReport:
        documents = list(documents)
        report = CorpusReport(documents=len(documents))

        with log.timed_step(PipelineStage.PARSE, f"Parsing {len(documents)} documents"):
            for document in documents:
                if document.error is not None:
                    report.issues.append(_issue(document.error, document.name))
                    continue
                try:
                    article = parse_article(document.text, document.name, strict=self._strict)
                except FrontMatterError as exc:
                    report.issues.append(_issue(exc, document.name))
                    continue
                report.articles.append(article)

        with log.timed_step(PipelineStage.VALIDATE, "Checking permalink and order uniqueness"):
            for duplicate in find_duplicates(report.articles):
                report.issues.append(_issue(duplicate, None))

        log.stats(documents=report.documents, parsed=len(report.articles), issues=len(report.issues))
        return report


def _issue(error: FrontMatterError, source: str | None) -> ValidationIssue:
    return ValidationIssue(
        code=error.code,
        message=error.message,
        source=error.source or source,
        field=error.field,
        line=error.line,
    )
