"""
Repository layer for Category access.
Categories are read-only after seeding.
"""
from typing import Optional
import logging

from menu_catalog.models.category import Category
from menu_catalog.models.document import MenuDocument

logger = logging.getLogger(__name__)


class CategoryRepository:
    def __init__(self, document: MenuDocument) -> None:
        logger.trace("Initializing CategoryRepository")
        self._document = document

    def get_by_id(self, category_id: int) -> Optional[Category]:
        logger.trace("Fetching category id=%s", category_id)
        return next((c for c in self._document.categories if c.id == category_id), None)

    def list_all(self) -> list[Category]:
        logger.trace("Listing categories")
        return list(self._document.categories)
