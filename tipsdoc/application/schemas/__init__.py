from .article import ArticleParseRequest, ArticleResponse
from .validation import CorpusReportResponse, FrontMatterErrorResponse, ValidationIssueResponse

__all__ = [
    "ArticleParseRequest",
    "ArticleResponse",
    "CorpusReportResponse",
    "FrontMatterErrorResponse",
    "ValidationIssueResponse",
]
