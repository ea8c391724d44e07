"""
Repository layer for MenuItem access.
All reads and in-place mutations of the document's `items` list live here.
"""
from typing import Optional
import logging

from menu_catalog.models.document import MenuDocument
from menu_catalog.models.menu_item import MenuItem

logger = logging.getLogger(__name__)


class MenuItemRepository:
    def __init__(self, document: MenuDocument) -> None:
        logger.trace("Initializing MenuItemRepository")
        self._document = document

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, item_id: int) -> Optional[MenuItem]:
        logger.trace("Fetching menu item id=%s", item_id)
        return next((i for i in self._document.items if i.id == item_id), None)

    def list_all(
        self,
        category_id: Optional[int] = None,
        search: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
    ) -> list[MenuItem]:
        logger.trace(
            "Listing menu items category_id=%s search=%s min_price=%s max_price=%s",
            category_id,
            search,
            min_price,
            max_price,
        )
        items = self._document.items
        if category_id is not None:
            items = [i for i in items if i.category_id == category_id]
        if search is not None:
            items = [i for i in items if i.matches_search(search)]
        if min_price is not None:
            items = [i for i in items if i.price >= min_price]
        if max_price is not None:
            items = [i for i in items if i.price <= max_price]
        return list(items)

    def next_id(self) -> int:
        """Return max(existing id) + 1, or 1 for an empty menu."""
        return max((i.id for i in self._document.items), default=0) + 1

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def create(
        self,
        name: str,
        price: float,
        description: str,
        category_id: int,
    ) -> MenuItem:
        item = MenuItem(
            id=self.next_id(),
            name=name,
            price=price,
            description=description,
            category_id=category_id,
        )
        logger.info("Creating menu item record id=%s name=%s", item.id, name)
        self._document.items.append(item)
        return item

    def update(self, item_id: int, **fields) -> Optional[MenuItem]:
        item = self.get_by_id(item_id)
        if item is None:
            return None
        if not fields:
            logger.trace("No menu item fields to update id=%s", item_id)
            return item

        logger.info("Updating menu item record id=%s fields=%s", item_id, ", ".join(fields))
        for key, value in fields.items():
            setattr(item, key, value)
        return item

    def delete(self, item_id: int) -> bool:
        logger.info("Deleting menu item record id=%s", item_id)
        for index, item in enumerate(self._document.items):
            if item.id == item_id:
                del self._document.items[index]
                return True
        return False
