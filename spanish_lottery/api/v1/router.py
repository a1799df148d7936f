"""Aggregate API v1 router."""

from fastapi import APIRouter

from spanish_lottery.api.v1.endpoints import (
    games,
    generator,
    scraper,
    statistics,
)

api_router = APIRouter()

api_router.include_router(games.router, prefix="/games", tags=["Loterías"])
api_router.include_router(generator.router, prefix="/generator", tags=["Generador"])
api_router.include_router(statistics.router, prefix="/stats", tags=["Estadísticas"])
api_router.include_router(scraper.router, prefix="/scraper", tags=["Resultados"])
