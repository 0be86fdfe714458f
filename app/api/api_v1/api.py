# app/api/api_v1/api.py
from fastapi import APIRouter

from app.api.api_v1.routers import (
    chicken_flocks,
    egg_productions,
    egg_sales,
    exports,
    feed_compositions,
    feed_consumptions,
    finished_feeds,
    other_expenses,
    profit_reports,
    raw_materials,
)

api_router = APIRouter()

api_router.include_router(raw_materials.router)
api_router.include_router(finished_feeds.router)
api_router.include_router(feed_compositions.router)
api_router.include_router(chicken_flocks.router)
api_router.include_router(feed_consumptions.router)
api_router.include_router(egg_productions.router)
api_router.include_router(egg_sales.router)
api_router.include_router(other_expenses.router)
api_router.include_router(profit_reports.router)
api_router.include_router(exports.router)
