"""Article read and parse endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from tipsdoc.application.schemas import ArticleParseRequest, ArticleResponse, FrontMatterErrorResponse
from tipsdoc.application.services import ArticleService
from tipsdoc.domain.exceptions import DuplicateKey, EntityNotFoundError, FrontMatterError
from tipsdoc.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])


def contract_error(exc: FrontMatterError) -> HTTPException:
    """Map a contract violation to 409 (corpus conflict) or 422 (bad document)."""
    code = status.HTTP_409_CONFLICT if isinstance(exc, DuplicateKey) else status.HTTP_422_UNPROCESSABLE_ENTITY
    detail = FrontMatterErrorResponse.model_validate(exc, from_attributes=True).model_dump()
    return HTTPException(status_code=code, detail=detail)


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    include_unpublished: bool = False,
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve the corpus sorted by order; drafts are hidden unless requested."""
    try:
        articles = await service.list_published(include_unpublished=include_unpublished)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except FrontMatterError as e:
        raise contract_error(e)
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.post("/parse", response_model=ArticleResponse)
async def parse_article(
    data: ArticleParseRequest,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Parse a raw document and return its structured record."""
    try:
        article = service.parse_text(data.text, data.source)
    except FrontMatterError as e:
        raise contract_error(e)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("/{permalink:path}", response_model=ArticleResponse)
async def get_article(
    permalink: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by its permalink."""
    try:
        article = await service.get_by_permalink(permalink)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except FrontMatterError as e:
        raise contract_error(e)
    return ArticleResponse.model_validate(article, from_attributes=True)
