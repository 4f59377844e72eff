"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from tipsdoc.config import get_settings
from tipsdoc.application.services import ArticleService
from tipsdoc.infrastructure.storage.filesystem_article_repository import FileSystemArticleRepository


async def get_article_service() -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService reading the configured content directory."""
    settings = get_settings()
    repository = FileSystemArticleRepository(settings.content_dir, settings.content_glob)
    yield ArticleService(repository, strict=settings.strict_keys)
