from .article import Article
from .source_document import SourceDocument
from .validation import CorpusReport, ValidationIssue

__all__ = [
    "Article",
    "SourceDocument",
    "CorpusReport",
    "ValidationIssue",
]
