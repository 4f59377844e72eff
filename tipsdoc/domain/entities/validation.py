"""Validation result entities for corpus lint runs."""

from dataclasses import dataclass, field

from .article import Article


@dataclass(frozen=True)
class ValidationIssue:
    """One contract violation found in the corpus."""

    code: str
    message: str
    source: str | None = None
    field: str | None = None
    line: int | None = None

    def render(self) -> str:
        """Format as a ``path:line: code: message`` diagnostic."""
        location = self.source or "<corpus>"
        if self.line is not None:
            location += f":{self.line}"
        return f"{location}: {self.code}: {self.message}"


@dataclass
class CorpusReport:
    """Outcome of validating every document in a corpus."""

    documents: int = 0
    articles: list[Article] = field(default_factory=list)
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues
