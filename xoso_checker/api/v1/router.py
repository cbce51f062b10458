"""Aggregate API v1 router."""

from fastapi import APIRouter

from xoso_checker.api.v1.endpoints import check, maintenance, stations

api_router = APIRouter()

api_router.include_router(check.router, prefix="/check", tags=["Dò vé số"])
api_router.include_router(stations.router, prefix="/stations", tags=["Đài xổ số"])
api_router.include_router(maintenance.router, prefix="/maintenance", tags=["Bảo trì"])
