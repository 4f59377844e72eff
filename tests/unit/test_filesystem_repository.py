"""Unit tests for the filesystem article repository."""

from pathlib import Path

import pytest

from tipsdoc.domain.exceptions import EntityNotFoundError, MalformedFrontMatter
from tipsdoc.infrastructure.storage.filesystem_article_repository import FileSystemArticleRepository

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures" / "tips"


@pytest.mark.asyncio
async def test_lists_markdown_files_recursively_by_relative_name():
    documents = await FileSystemArticleRepository(FIXTURES).list_documents()
    assert [d.name for d in documents] == ["drafts/tip-143.md", "tip-001.md", "tip-142.md"]
    assert documents[1].text.startswith("---\n")


@pytest.mark.asyncio
async def test_pattern_limits_the_selection():
    documents = await FileSystemArticleRepository(FIXTURES, pattern="*.md").list_documents()
    assert [d.name for d in documents] == ["tip-001.md", "tip-142.md"]


@pytest.mark.asyncio
async def test_missing_content_directory(tmp_path: Path):
    with pytest.raises(EntityNotFoundError):
        await FileSystemArticleRepository(tmp_path / "missing").list_documents()


@pytest.mark.asyncio
async def test_line_endings_are_not_translated(tmp_path: Path):
    (tmp_path / "tip.md").write_bytes(b"---\r\ntitle: x\r\n---\r\nbody\r\n")
    documents = await FileSystemArticleRepository(tmp_path).list_documents()
    assert documents[0].text == "---\r\ntitle: x\r\n---\r\nbody\r\n"


@pytest.mark.asyncio
async def test_invalid_utf8_is_carried_as_an_error(tmp_path: Path):
    (tmp_path / "a.md").write_text("---\ntitle: ok\n---\n", encoding="utf-8")
    (tmp_path / "b.md").write_bytes(b"---\ntitle: \xff\n---\n")

    good, bad = await FileSystemArticleRepository(tmp_path).list_documents()

    assert good.error is None
    assert bad.name == "b.md"
    assert bad.text == ""
    assert isinstance(bad.error, MalformedFrontMatter)
    assert bad.error.source == "b.md"
    assert "UTF-8" in bad.error.message
