from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import or_, true
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.soft_delete import active
from src.app.repositories.shared_service_repository import ISharedServiceRepository
from src.domain.entities import (
    GroupSharedServiceRole,
    SharedService,
    SharedServiceRole,
    TenantSharedService,
)


class SharedServiceRepository(ISharedServiceRepository):
    """Shared service repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _available_to_tenant(self, tenant_id: UUID):
        return (
            select(SharedService)
            .join(
                TenantSharedService,
                TenantSharedService.shared_service_id == SharedService.id,
            )
            .where(
                TenantSharedService.tenant_id == tenant_id,
                active(TenantSharedService),
                col(SharedService.is_active) == true(),
            )
        )

    async def get_by_id(self, shared_service_id: UUID) -> Optional[SharedService]:
        stmt = select(SharedService).where(SharedService.id == shared_service_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name_or_client_identifier(
        self, name: str, client_identifier: str
    ) -> Optional[SharedService]:
        stmt = select(SharedService).where(
            or_(
                SharedService.name == name,
                SharedService.client_identifier == client_identifier,
            )
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def list_active(self) -> List[SharedService]:
        stmt = (
            select(SharedService)
            .where(col(SharedService.is_active) == true())
            .order_by(SharedService.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_for_tenant(self, tenant_id: UUID) -> List[SharedService]:
        stmt = self._available_to_tenant(tenant_id).order_by(SharedService.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def is_available_to_tenant(self, tenant_id: UUID, client_identifier: str) -> bool:
        stmt = self._available_to_tenant(tenant_id).where(
            SharedService.client_identifier == client_identifier
        )
        result = await self.session.exec(stmt.limit(1))
        return result.first() is not None

    async def list_roles(self, shared_service_ids: List[UUID]) -> List[SharedServiceRole]:
        if not shared_service_ids:
            return []
        stmt = (
            select(SharedServiceRole)
            .where(
                col(SharedServiceRole.shared_service_id).in_(shared_service_ids),
                active(SharedServiceRole),
            )
            .order_by(SharedServiceRole.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_role_by_name(
        self, shared_service_id: UUID, name: str
    ) -> Optional[SharedServiceRole]:
        stmt = select(SharedServiceRole).where(
            SharedServiceRole.shared_service_id == shared_service_id,
            SharedServiceRole.name == name,
            active(SharedServiceRole),
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_tenant_association(
        self, tenant_id: UUID, shared_service_id: UUID
    ) -> Optional[TenantSharedService]:
        stmt = select(TenantSharedService).where(
            TenantSharedService.tenant_id == tenant_id,
            TenantSharedService.shared_service_id == shared_service_id,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_group_grants(self, group_id: UUID) -> List[GroupSharedServiceRole]:
        stmt = select(GroupSharedServiceRole).where(
            GroupSharedServiceRole.group_id == group_id
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_enabled_grants(
        self, tenant_id: UUID, group_ids: List[UUID], client_identifier: Optional[str] = None
    ) -> List[Tuple[UUID, SharedServiceRole]]:
        if not group_ids:
            return []
        stmt = (
            select(GroupSharedServiceRole.group_id, SharedServiceRole)
            .join(
                SharedServiceRole,
                SharedServiceRole.id == GroupSharedServiceRole.shared_service_role_id,
            )
            .join(SharedService, SharedService.id == SharedServiceRole.shared_service_id)
            .join(
                TenantSharedService,
                TenantSharedService.shared_service_id == SharedService.id,
            )
            .where(
                col(GroupSharedServiceRole.group_id).in_(group_ids),
                TenantSharedService.tenant_id == tenant_id,
                active(GroupSharedServiceRole),
                active(SharedServiceRole),
                active(TenantSharedService),
                col(SharedService.is_active) == true(),
            )
            .order_by(SharedServiceRole.name)
        )
        if client_identifier is not None:
            stmt = stmt.where(SharedService.client_identifier == client_identifier)
        result = await self.session.exec(stmt)
        return [(group_id, role) for group_id, role in result.all()]

    async def create(self, shared_service: SharedService) -> SharedService:
        self.session.add(shared_service)
        await self.session.flush()
        await self.session.refresh(shared_service)
        return shared_service

    async def create_role(self, role: SharedServiceRole) -> SharedServiceRole:
        self.session.add(role)
        await self.session.flush()
        await self.session.refresh(role)
        return role

    async def save_tenant_association(
        self, association: TenantSharedService
    ) -> TenantSharedService:
        self.session.add(association)
        await self.session.flush()
        await self.session.refresh(association)
        return association

    async def save_grant(self, grant: GroupSharedServiceRole) -> GroupSharedServiceRole:
        self.session.add(grant)
        await self.session.flush()
        await self.session.refresh(grant)
        return grant
