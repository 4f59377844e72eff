"""Local filesystem adapter for the article corpus.

Layout:
    <content_dir>/<any/sub/dirs>/<name>.md   — one article per file

Documents are named by their POSIX path relative to ``content_dir`` so
diagnostics read the same on every platform. Files are decoded without
newline translation; bodies keep their original line endings.
"""

import logging
from pathlib import Path

from tipsdoc.application.interfaces import ArticleRepository
from tipsdoc.domain.entities import SourceDocument
from tipsdoc.domain.exceptions import EntityNotFoundError, MalformedFrontMatter

logger = logging.getLogger(__name__)


class FileSystemArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port over a directory of markdown files."""

    def __init__(self, content_dir: str | Path, pattern: str = "**/*.md"):
        self._content_dir = Path(content_dir)
        self._pattern = pattern

    async def list_documents(self) -> list[SourceDocument]:
        self._ensure_content_dir()
        paths = sorted(
            (p for p in self._content_dir.glob(self._pattern) if p.is_file()),
            key=self._name_of,
        )
        logger.debug("Found %d article files under %s", len(paths), self._content_dir)
        return [self._read(path) for path in paths]

    # ── Utilities ───────────────────────────────────────────────────

    def _ensure_content_dir(self) -> None:
        if not self._content_dir.is_dir():
            raise EntityNotFoundError("Content directory", str(self._content_dir))

    def _name_of(self, path: Path) -> str:
        return path.relative_to(self._content_dir).as_posix()

    def _read(self, path: Path) -> SourceDocument:
        name = self._name_of(path)
        try:
            text = path.read_bytes().decode("utf-8")
        except UnicodeDecodeError as exc:
            logger.warning("Cannot decode %s: %s", name, exc)
            error = MalformedFrontMatter(f"file is not valid UTF-8: {exc.reason}", source=name)
            return SourceDocument(name=name, text="", error=error)
        return SourceDocument(name=name, text=text)
