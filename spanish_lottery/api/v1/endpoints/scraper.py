"""Historical data cache control endpoints."""

from fastapi import APIRouter, Depends

from spanish_lottery.api.deps import get_provider
from spanish_lottery.scraper.scheduler import get_scheduler_status
from spanish_lottery.services.data_provider import HistoricalDataProvider

router = APIRouter()


@router.post("/refresh")
async def refresh(provider: HistoricalDataProvider = Depends(get_provider)):
    """Descarta la caché y vuelve a descargar los resultados."""
    await provider.refresh()
    return {"cache": provider.cache_info()}


@router.get("/status")
async def scraper_status(provider: HistoricalDataProvider = Depends(get_provider)):
    """Estado de la caché y del programador de actualizaciones."""
    return {
        "cache": provider.cache_info(),
        "scheduler": get_scheduler_status(),
    }
