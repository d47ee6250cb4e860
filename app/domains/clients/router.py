"""Clients 도메인 라우터"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.core.database import get_db, get_session_maker
from app.core.schemas import (
    APIResponse,
    ListAPIResponse,
    create_list_response,
    create_response,
)
from app.core.utils.pagination import PageParams
from app.domains.clients.schemas import ClientDetailResponse, ClientListParams
from app.domains.clients.service import ClientService

router = APIRouter()


def get_client_service(
    session: AsyncSession = Depends(get_db),
    session_maker: async_sessionmaker[AsyncSession] = Depends(
        get_session_maker
    ),
) -> ClientService:
    """ClientService 의존성"""
    return ClientService(session, session_maker)


@router.get("", response_model=ListAPIResponse[ClientDetailResponse])
async def list_clients(
    page_params: PageParams = Depends(),
    filters: ClientListParams = Depends(),
    service: ClientService = Depends(get_client_service),
):
    """고객 목록 조회"""
    page = await service.list_clients(filters, page_params.params)
    return create_list_response(
        data=[ClientDetailResponse.model_validate(c) for c in page.data],
        pagination=page.pagination,
    )


@router.get("/{client_id}", response_model=APIResponse[ClientDetailResponse])
async def get_client(
    client_id: int,
    service: ClientService = Depends(get_client_service),
):
    """고객 상세 조회"""
    client = await service.get_client(client_id)
    return create_response(
        data=ClientDetailResponse.model_validate(client),
        message="고객 정보를 조회했습니다.",
    )
