"""Application service (use case) for Article operations."""

from tipsdoc.application.interfaces import ArticleRepository
from tipsdoc.application.services.corpus_validator import (
    CorpusValidator,
    ensure_unique,
    normalize_permalink,
)
from tipsdoc.application.services.front_matter import parse_article
from tipsdoc.domain.entities import Article, CorpusReport, SourceDocument
from tipsdoc.domain.exceptions import EntityNotFoundError
from tipsdoc.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

log = PipelineLogger("ArticleService")


class ArticleService:
    """Orchestrates article reading and validation. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository, strict: bool = False):
        self._repository = repository
        self._strict = strict

    def parse_text(self, text: str, source: str | None = None) -> Article:
        return parse_article(text, source, strict=self._strict)

    async def load_corpus(self) -> list[Article]:
        """Parse every document; the first contract violation propagates."""
        with log.timed_step(PipelineStage.DISCOVER, "Reading article sources"):
            documents = await self._repository.list_documents()
        log.detail(f"{len(documents)} documents found")

        with log.timed_step(PipelineStage.PARSE, f"Parsing {len(documents)} documents"):
            articles = [self._parse_document(d) for d in documents]

        with log.timed_step(PipelineStage.VALIDATE, "Checking corpus uniqueness"):
            ensure_unique(articles)

        return articles

    async def list_published(self, include_unpublished: bool = False) -> list[Article]:
        """Articles sorted by their numeric order; drafts only when asked for."""
        articles = await self.load_corpus()
        if not include_unpublished:
            articles = [a for a in articles if a.published]
        return sorted(articles, key=lambda a: a.order_key)

    async def get_by_permalink(self, permalink: str) -> Article:
        wanted = normalize_permalink(permalink)
        for article in await self.load_corpus():
            if normalize_permalink(article.permalink) == wanted:
                return article
        raise EntityNotFoundError("Article", permalink)

    async def validate_corpus(self) -> CorpusReport:
        with log.timed_step(PipelineStage.DISCOVER, "Reading article sources"):
            documents = await self._repository.list_documents()
        report = CorpusValidator(strict=self._strict).validate(documents)
        if report.ok:
            log.step_complete(PipelineStage.COMPLETE, f"{report.documents} documents valid")
        else:
            log.step_error(PipelineStage.ERROR, f"{len(report.issues)} issues in {report.documents} documents")
        return report

    def _parse_document(self, document: SourceDocument) -> Article:
        if document.error is not None:
            raise document.error
        return self.parse_text(document.text, document.name)
