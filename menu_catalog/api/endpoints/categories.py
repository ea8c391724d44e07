"""
Category endpoints (read-only):
  GET    /categories           – List all categories
"""
from fastapi import APIRouter, Depends
import logging

from menu_catalog.core.dependencies import document_dependency
from menu_catalog.models.document import MenuDocument
from menu_catalog.schemas.category import CategoryResponse
from menu_catalog.services.category_service import CategoryService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get(
    "",
    response_model=list[CategoryResponse],
    summary="List all categories",
)
def list_categories(
    document: MenuDocument = Depends(document_dependency),
):
    """Return all categories in their stored order."""
    logger.info("Listing categories")
    service = CategoryService(document)
    return service.list_categories()
