"""
Central API router – registers all endpoint sub-routers under /api.
"""
from fastapi import APIRouter
import logging

from menu_catalog.api.endpoints import categories, menu_items

logger = logging.getLogger(__name__)

api_router = APIRouter(prefix="/api")

logger.info("Registering API routers")
api_router.include_router(categories.router)
api_router.include_router(menu_items.router)
