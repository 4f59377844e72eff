from .article_service import ArticleService
from .corpus_validator import CorpusValidator, ensure_unique, find_duplicates
from .front_matter import parse_article, serialize_article

__all__ = [
    "ArticleService",
    "CorpusValidator",
    "ensure_unique",
    "find_duplicates",
    "parse_article",
    "serialize_article",
]
