"""API v1 라우터"""

from typing import Any

from fastapi import APIRouter

from app.core.schemas import APIResponse
from app.domains.clients.router import router as clients_router
from app.domains.leads.router import router as leads_router
from app.domains.properties.router import frontend_router
from app.domains.properties.router import router as properties_router
from app.domains.viewings.router import router as viewings_router

api_router = APIRouter()

# 도메인 라우터 등록
api_router.include_router(
    properties_router, prefix="/properties", tags=["Properties"]
)
api_router.include_router(
    frontend_router,
    prefix="/frontend/properties",
    tags=["Frontend Properties"],
)
api_router.include_router(leads_router, prefix="/leads", tags=["Leads"])
api_router.include_router(clients_router, prefix="/clients", tags=["Clients"])
api_router.include_router(
    viewings_router, prefix="/viewings", tags=["Viewings"]
)


@api_router.get("/", response_model=APIResponse[dict[str, Any]])
async def api_v1_root():
    """API v1 루트 엔드포인트"""
    return APIResponse(
        success=True,
        message="Estate Listings API v1",
        data={
            "version": "1.0.0",
            "docs": "/docs",
        },
    )
