"""
Category read service.
"""
import logging

from menu_catalog.models.category import Category
from menu_catalog.models.document import MenuDocument
from menu_catalog.repositories.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, document: MenuDocument) -> None:
        logger.trace("Initializing CategoryService")
        self._repo = CategoryRepository(document)

    def list_categories(self) -> list[Category]:
        logger.info("Listing categories")
        return self._repo.list_all()
