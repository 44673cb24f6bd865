from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import true
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.soft_delete import active
from src.app.repositories.tenant_user_repository import ITenantUserRepository
from src.domain.entities import (
    GroupSharedServiceRole,
    GroupUser,
    Role,
    SharedService,
    SharedServiceRole,
    SsoUser,
    TenantUser,
    TenantUserRole,
)


class TenantUserRepository(ITenantUserRepository):
    """Tenant membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_active(self, tenant_id: UUID, tenant_user_id: UUID) -> Optional[TenantUser]:
        stmt = select(TenantUser).where(
            TenantUser.id == tenant_user_id,
            TenantUser.tenant_id == tenant_id,
            active(TenantUser),
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_active_by_sso_user_id(
        self, tenant_id: UUID, sso_user_id: str
    ) -> Optional[TenantUser]:
        stmt = (
            select(TenantUser)
            .join(SsoUser, SsoUser.id == TenantUser.sso_user_pk)
            .where(
                TenantUser.tenant_id == tenant_id,
                SsoUser.sso_user_id == sso_user_id,
                active(TenantUser),
            )
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_sso_user(self, tenant_id: UUID, sso_user_pk: UUID) -> Optional[TenantUser]:
        stmt = select(TenantUser).where(
            TenantUser.tenant_id == tenant_id, TenantUser.sso_user_pk == sso_user_pk
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_with_sso_user(
        self, tenant_id: UUID, tenant_user_id: UUID
    ) -> Optional[Tuple[TenantUser, SsoUser]]:
        stmt = (
            select(TenantUser, SsoUser)
            .join(SsoUser, SsoUser.id == TenantUser.sso_user_pk)
            .where(
                TenantUser.id == tenant_user_id,
                TenantUser.tenant_id == tenant_id,
                active(TenantUser),
            )
        )
        result = await self.session.exec(stmt)
        row = result.first()
        return (row[0], row[1]) if row else None

    async def list_with_sso_users(
        self,
        tenant_id: UUID,
        group_ids: Optional[List[UUID]] = None,
        shared_service_role_ids: Optional[List[UUID]] = None,
    ) -> List[Tuple[TenantUser, SsoUser]]:
        stmt = (
            select(TenantUser, SsoUser)
            .join(SsoUser, SsoUser.id == TenantUser.sso_user_pk)
            .where(TenantUser.tenant_id == tenant_id, active(TenantUser))
        )
        if group_ids or shared_service_role_ids:
            stmt = stmt.join(GroupUser, GroupUser.tenant_user_id == TenantUser.id).where(
                active(GroupUser)
            )
        if group_ids:
            stmt = stmt.where(col(GroupUser.group_id).in_(group_ids))
        if shared_service_role_ids:
            stmt = (
                stmt.join(
                    GroupSharedServiceRole,
                    GroupSharedServiceRole.group_id == GroupUser.group_id,
                )
                .join(
                    SharedServiceRole,
                    SharedServiceRole.id == GroupSharedServiceRole.shared_service_role_id,
                )
                .join(
                    SharedService,
                    SharedService.id == SharedServiceRole.shared_service_id,
                )
                .where(
                    col(SharedServiceRole.id).in_(shared_service_role_ids),
                    active(GroupSharedServiceRole),
                    active(SharedServiceRole),
                    col(SharedService.is_active) == true(),
                )
            )
        stmt = stmt.distinct().order_by(SsoUser.display_name)
        result = await self.session.exec(stmt)
        return [(tenant_user, sso_user) for tenant_user, sso_user in result.all()]

    async def has_access(
        self, tenant_id: UUID, sso_user_id: str, role_names: Optional[List[str]] = None
    ) -> bool:
        stmt = (
            select(TenantUser.id)
            .join(SsoUser, SsoUser.id == TenantUser.sso_user_pk)
            .where(
                TenantUser.tenant_id == tenant_id,
                SsoUser.sso_user_id == sso_user_id,
                active(TenantUser),
            )
        )
        if role_names:
            stmt = (
                stmt.join(TenantUserRole, TenantUserRole.tenant_user_id == TenantUser.id)
                .join(Role, Role.id == TenantUserRole.role_id)
                .where(active(TenantUserRole), col(Role.name).in_(role_names))
            )
        result = await self.session.exec(stmt.limit(1))
        return result.first() is not None

    async def create(self, tenant_user: TenantUser) -> TenantUser:
        self.session.add(tenant_user)
        await self.session.flush()
        await self.session.refresh(tenant_user)
        return tenant_user

    async def update(self, tenant_user: TenantUser) -> TenantUser:
        self.session.add(tenant_user)
        await self.session.flush()
        await self.session.refresh(tenant_user)
        return tenant_user
