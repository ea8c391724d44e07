"""
FastAPI dependency injection helpers for store access.
"""
import logging

from fastapi import Depends, Request

from menu_catalog.db.store import MenuStore
from menu_catalog.models.document import MenuDocument

logger = logging.getLogger(__name__)


def store_dependency(request: Request) -> MenuStore:
    """Return the store attached to the running application."""
    return request.app.state.store


def document_dependency(store: MenuStore = Depends(store_dependency)) -> MenuDocument:
    """Load a read-only snapshot of the menu document for the request."""
    logger.trace("Loading menu document for read request")
    return store.load()
