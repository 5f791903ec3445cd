from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from inventory_api import crud, schemas
from inventory_api.api import deps

router = APIRouter()

@router.get("/stats", response_model=schemas.InventoryStats)
async def get_inventory_dashboard_stats(
    *,
    db: AsyncSession = Depends(deps.get_db),
):
    """
    Retrieve the inventory totals used by the dashboard charts.
    """
    stats_data = await crud.dashboard.get_inventory_stats(db)
    return stats_data # Pydantic will validate this dict against InventoryStats
