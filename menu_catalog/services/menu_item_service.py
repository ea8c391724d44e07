"""
Menu item service.

Business rules:
- New items need a name, a non-zero price and a category id.
- Item ids are assigned as max(existing) + 1.
- Items may reference a category that does not exist; this is logged, not rejected.
- Updates apply only the fields the client sent.
"""
from typing import Optional
import logging

from menu_catalog.core.exceptions import NotFoundError, ValidationError
from menu_catalog.models.document import MenuDocument
from menu_catalog.models.menu_item import MenuItem
from menu_catalog.repositories.category_repository import CategoryRepository
from menu_catalog.repositories.menu_item_repository import MenuItemRepository
from menu_catalog.schemas.menu_item import MenuItemCreate, MenuItemFilters, MenuItemUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Name, price, and category_id are required"


class MenuItemService:
    """Business logic for menu item operations."""

    def __init__(self, document: MenuDocument) -> None:
        """Initialize repositories used by the menu item service."""
        logger.trace("Initializing MenuItemService")
        self._repo = MenuItemRepository(document)
        self._category_repo = CategoryRepository(document)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_item(self, item_id: int) -> MenuItem:
        """Fetch an item by id or raise NotFoundError."""
        logger.info("Fetching menu item id=%s", item_id)
        item = self._repo.get_by_id(item_id)
        if not item:
            logger.warning("Menu item id=%s not found", item_id)
            raise NotFoundError()
        return item

    def list_items(self, filters: Optional[MenuItemFilters] = None) -> list[MenuItem]:
        """Return items matching every given filter, in stored order."""
        filters = filters or MenuItemFilters()
        logger.info("Listing menu items filters=%s", filters.model_dump(exclude_none=True))
        return self._repo.list_all(
            category_id=filters.category_id,
            search=filters.search,
            min_price=filters.min_price,
            max_price=filters.max_price,
        )

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def add_item(self, data: MenuItemCreate) -> MenuItem:
        """Append a new item after checking the required fields."""
        logger.info("Adding menu item %s", data.name)
        name = data.name.strip() if data.name else ""
        if not name or not data.price or not data.category_id:
            logger.warning("Menu item rejected, missing required fields")
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        self._warn_unknown_category(data.category_id)
        item = self._repo.create(
            name=name,
            price=float(data.price),
            description=data.description or "",
            category_id=int(data.category_id),
        )
        logger.info("Menu item created id=%s", item.id)
        return item

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def update_item(self, item_id: int, data: MenuItemUpdate) -> MenuItem:
        """Apply the provided fields to an existing item."""
        logger.info("Updating menu item id=%s", item_id)
        self.get_item(item_id)

        update_fields = data.provided_fields()
        if "price" in update_fields:
            update_fields["price"] = float(update_fields["price"])
        if "category_id" in update_fields:
            update_fields["category_id"] = int(update_fields["category_id"])
            self._warn_unknown_category(update_fields["category_id"])

        updated_item = self._repo.update(item_id, **update_fields)  # type: ignore[return-value]
        logger.info("Menu item updated id=%s", item_id)
        return updated_item

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def delete_item(self, item_id: int) -> None:
        """Remove an item and raise NotFoundError if it does not exist."""
        logger.info("Deleting menu item id=%s", item_id)
        if not self._repo.delete(item_id):
            logger.warning("Menu item id=%s not found for deletion", item_id)
            raise NotFoundError()
        logger.info("Menu item deleted id=%s", item_id)

    def _warn_unknown_category(self, category_id: int) -> None:
        if self._category_repo.get_by_id(category_id) is None:
            logger.warning("Menu item references unknown category id=%s", category_id)
