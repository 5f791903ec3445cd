from fastapi import APIRouter

# Import endpoint modules
from inventory_api.api.endpoints import categories
from inventory_api.api.endpoints import items
from inventory_api.api.endpoints import dashboard

api_router = APIRouter()

api_router.include_router(categories.router, prefix="/categories", tags=["Categories"])
api_router.include_router(items.router, prefix="/items", tags=["Items"])
api_router.include_router(items.joined_router, tags=["Items"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
