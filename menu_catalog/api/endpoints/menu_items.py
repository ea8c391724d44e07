"""
Menu item endpoints:
  GET    /menu-items           – List items (filter by category, search text, price range)
  GET    /menu-items/{id}      – Get a specific item
  POST   /menu-items           – Create a new item
  PUT    /menu-items/{id}      – Partially update an item
  DELETE /menu-items/{id}      – Delete an item

Mutating endpoints run load, change and save inside one store transaction.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
import logging

from menu_catalog.core.dependencies import document_dependency, store_dependency
from menu_catalog.db.store import MenuStore
from menu_catalog.models.document import MenuDocument
from menu_catalog.schemas.menu_item import (
    MenuItemCreate,
    MenuItemFilters,
    MenuItemResponse,
    MenuItemUpdate,
)
from menu_catalog.services.menu_item_service import MenuItemService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/menu-items", tags=["Menu Items"])


@router.get(
    "",
    response_model=list[MenuItemResponse],
    summary="List menu items",
)
def list_menu_items(
    filters: Annotated[MenuItemFilters, Query()],
    document: MenuDocument = Depends(document_dependency),
):
    """
    Return menu items in stored order.
    category_id, search, min_price and max_price are optional and combined with AND.
    """
    logger.info("Listing menu items")
    service = MenuItemService(document)
    return service.list_items(filters)


@router.get(
    "/{item_id}",
    response_model=MenuItemResponse,
    summary="Get a specific menu item",
)
def get_menu_item(
    item_id: int,
    document: MenuDocument = Depends(document_dependency),
):
    """Retrieve a menu item by its ID."""
    logger.info("Fetching menu item id=%s", item_id)
    service = MenuItemService(document)
    return service.get_item(item_id)


@router.post(
    "",
    response_model=MenuItemResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new menu item",
)
def create_menu_item(
    data: MenuItemCreate,
    store: MenuStore = Depends(store_dependency),
):
    """Create a menu item. name, price and category_id are required."""
    logger.info("Creating menu item %s", data.name)
    with store.transaction() as document:
        return MenuItemService(document).add_item(data)


@router.put(
    "/{item_id}",
    response_model=MenuItemResponse,
    summary="Update a menu item",
)
def update_menu_item(
    item_id: int,
    data: MenuItemUpdate,
    store: MenuStore = Depends(store_dependency),
):
    """Update only the fields present in the request body."""
    logger.info("Updating menu item id=%s", item_id)
    with store.transaction() as document:
        return MenuItemService(document).update_item(item_id, data)


@router.delete(
    "/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a menu item",
)
def delete_menu_item(
    item_id: int,
    store: MenuStore = Depends(store_dependency),
):
    """Delete a menu item."""
    logger.info("Deleting menu item id=%s", item_id)
    with store.transaction() as document:
        MenuItemService(document).delete_item(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
