"""Corpus lint endpoint."""

from fastapi import APIRouter, Depends, HTTPException, status

from tipsdoc.application.schemas import CorpusReportResponse
from tipsdoc.application.services import ArticleService
from tipsdoc.domain.exceptions import EntityNotFoundError, FrontMatterError
from tipsdoc.infrastructure.dependencies import get_article_service
from tipsdoc.presentation.api.v1.endpoints.articles import contract_error

router = APIRouter(prefix="/corpus", tags=["Corpus"])


@router.get("/validation", response_model=CorpusReportResponse)
async def validate_corpus(
    service: ArticleService = Depends(get_article_service),
) -> CorpusReportResponse:
    """Lint every article and report all contract violations at once."""
    try:
        report = await service.validate_corpus()
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except FrontMatterError as e:
        raise contract_error(e)
    return CorpusReportResponse.from_report(report)
