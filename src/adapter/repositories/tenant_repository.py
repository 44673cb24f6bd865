from typing import List, Optional
from uuid import UUID

from sqlalchemy import true
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.soft_delete import active
from src.app.repositories.tenant_repository import ITenantRepository
from src.domain.entities import (
    SharedService,
    SsoUser,
    Tenant,
    TenantSharedService,
    TenantUser,
)


class TenantRepository(ITenantRepository):
    """Tenant repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID"""
        stmt = select(Tenant).where(Tenant.id == tenant_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name_and_ministry(
        self, name: str, ministry_name: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Tenant]:
        stmt = select(Tenant).where(
            Tenant.name == name, Tenant.ministry_name == ministry_name
        )
        if exclude_id is not None:
            stmt = stmt.where(Tenant.id != exclude_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def list_for_sso_user(
        self, sso_user_id: str, client_identifier: Optional[str] = None
    ) -> List[Tenant]:
        stmt = (
            select(Tenant)
            .join(TenantUser, TenantUser.tenant_id == Tenant.id)
            .join(SsoUser, SsoUser.id == TenantUser.sso_user_pk)
            .where(SsoUser.sso_user_id == sso_user_id, active(TenantUser))
        )
        if client_identifier is not None:
            stmt = (
                stmt.join(TenantSharedService, TenantSharedService.tenant_id == Tenant.id)
                .join(
                    SharedService,
                    SharedService.id == TenantSharedService.shared_service_id,
                )
                .where(
                    SharedService.client_identifier == client_identifier,
                    col(SharedService.is_active) == true(),
                    active(TenantSharedService),
                )
            )
        stmt = stmt.order_by(Tenant.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant"""
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant

    async def update(self, tenant: Tenant) -> Tenant:
        """Update existing tenant"""
        self.session.add(tenant)
        await self.session.flush()
        await self.session.refresh(tenant)
        return tenant
