"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from alchemist.api.health import router as health_router
from alchemist.api.validation import router as validation_router
from alchemist.api.search import router as search_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Validation and ingestion
api_router.include_router(validation_router, tags=["Validation"])

# Keyword search
api_router.include_router(search_router, tags=["Search"])
