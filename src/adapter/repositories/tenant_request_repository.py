from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.tenant_request_repository import ITenantRequestRepository
from src.domain.entities import TenantRequest, TenantRequestStatus


class TenantRequestRepository(ITenantRequestRepository):
    """Tenant request repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, request_id: UUID) -> Optional[TenantRequest]:
        stmt = select(TenantRequest).where(TenantRequest.id == request_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_status(
        self, status: Optional[TenantRequestStatus] = None
    ) -> List[TenantRequest]:
        stmt = select(TenantRequest)
        if status is not None:
            stmt = stmt.where(TenantRequest.status == status)
        stmt = stmt.order_by(col(TenantRequest.requested_at).desc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, tenant_request: TenantRequest) -> TenantRequest:
        self.session.add(tenant_request)
        await self.session.flush()
        await self.session.refresh(tenant_request)
        return tenant_request

    async def update(self, tenant_request: TenantRequest) -> TenantRequest:
        self.session.add(tenant_request)
        await self.session.flush()
        await self.session.refresh(tenant_request)
        return tenant_request
