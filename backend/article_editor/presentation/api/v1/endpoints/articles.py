"""Article CRUD and export endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from article_editor.application.schemas import (
    ArticleCreate,
    ArticleResponse,
    ArticleUpdate,
    DeleteArticleResponse,
    ExportRequest,
    ExportResponse,
    MAX_ARTICLE_ID,
)
from article_editor.application.services import ArticleService, ExportService
from article_editor.domain.exceptions import ArticleValidationError, EntityNotFoundError
from article_editor.infrastructure.dependencies import get_article_service, get_export_service

router = APIRouter(prefix="/articles", tags=["Articles"])


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every article with its properties, ordered by ID."""
    articles = await service.list_articles()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/{article_id}", response_model=ArticleResponse | None)
async def get_article(
    article_id: int = Path(..., ge=1, le=MAX_ARTICLE_ID),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse | None:
    """Retrieve a single article by ID. Responds with ``null`` when it does not exist."""
    article = await service.get_article(article_id)
    if article is None:
        return None
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article with its initial properties."""
    try:
        article = await service.create_article(data)
    except ArticleValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    data: ArticleUpdate,
    article_id: int = Path(..., ge=1, le=MAX_ARTICLE_ID),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Update an existing article. A ``properties`` list replaces the current set."""
    try:
        article = await service.update_article(article_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ArticleValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{article_id}", response_model=DeleteArticleResponse)
async def delete_article(
    article_id: int = Path(..., ge=1, le=MAX_ARTICLE_ID),
    service: ArticleService = Depends(get_article_service),
) -> DeleteArticleResponse:
    """Delete an article by ID; ``success`` is false when it did not exist."""
    deleted = await service.delete_article(article_id)
    return DeleteArticleResponse(success=deleted)


@router.post("/export", response_model=ExportResponse)
async def export_articles(
    data: ExportRequest,
    service: ExportService = Depends(get_export_service),
) -> ExportResponse:
    """Export all (or the selected) articles into one HTML document."""
    result = await service.export_articles(data)
    return ExportResponse.model_validate(result, from_attributes=True)
