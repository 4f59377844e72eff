"""Pydantic DTOs for corpus validation and contract errors."""

from pydantic import BaseModel

from tipsdoc.domain.entities import CorpusReport


class FrontMatterErrorResponse(BaseModel):
    """Body of a 4xx response caused by a front-matter contract violation."""

    code: str
    message: str
    field: str | None = None
    line: int | None = None
    source: str | None = None

    model_config = {"from_attributes": True}


class ValidationIssueResponse(BaseModel):
    code: str
    message: str
    source: str | None = None
    field: str | None = None
    line: int | None = None

    model_config = {"from_attributes": True}


class CorpusReportResponse(BaseModel):
    """Schema for a whole-corpus lint run."""

    ok: bool
    documents: int
    parsed: int
    issues: list[ValidationIssueResponse]

    @classmethod
    def from_report(cls, report: CorpusReport) -> "CorpusReportResponse":
        return cls(
            ok=report.ok,
            documents=report.documents,
            parsed=len(report.articles),
            issues=[ValidationIssueResponse.model_validate(i) for i in report.issues],
        )
