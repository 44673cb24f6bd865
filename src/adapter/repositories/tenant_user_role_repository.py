from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.soft_delete import active, deleted
from src.app.repositories.tenant_user_role_repository import ITenantUserRoleRepository
from src.domain.entities import Role, TenantUser, TenantUserRole


class TenantUserRoleRepository(ITenantUserRoleRepository):
    """Role assignment repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_active_with_roles(
        self, tenant_user_ids: List[UUID]
    ) -> List[Tuple[TenantUserRole, Role]]:
        if not tenant_user_ids:
            return []
        stmt = (
            select(TenantUserRole, Role)
            .join(Role, Role.id == TenantUserRole.role_id)
            .where(
                col(TenantUserRole.tenant_user_id).in_(tenant_user_ids),
                active(TenantUserRole),
            )
            .order_by(Role.name)
        )
        result = await self.session.exec(stmt)
        return [(assignment, role) for assignment, role in result.all()]

    async def get_active(self, tenant_user_id: UUID, role_id: UUID) -> Optional[TenantUserRole]:
        stmt = select(TenantUserRole).where(
            TenantUserRole.tenant_user_id == tenant_user_id,
            TenantUserRole.role_id == role_id,
            active(TenantUserRole),
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_deleted(self, tenant_user_id: UUID, role_id: UUID) -> Optional[TenantUserRole]:
        stmt = (
            select(TenantUserRole)
            .where(
                TenantUserRole.tenant_user_id == tenant_user_id,
                TenantUserRole.role_id == role_id,
                deleted(TenantUserRole),
            )
            .order_by(col(TenantUserRole.updated_date_time).desc())
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def count_active_holders(
        self, tenant_id: UUID, role_name: str, exclude_tenant_user_id: Optional[UUID] = None
    ) -> int:
        stmt = (
            select(func.count(TenantUserRole.id))
            .join(TenantUser, TenantUser.id == TenantUserRole.tenant_user_id)
            .join(Role, Role.id == TenantUserRole.role_id)
            .where(
                TenantUser.tenant_id == tenant_id,
                Role.name == role_name,
                active(TenantUser),
                active(TenantUserRole),
            )
        )
        if exclude_tenant_user_id is not None:
            stmt = stmt.where(TenantUser.id != exclude_tenant_user_id)
        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, assignment: TenantUserRole) -> TenantUserRole:
        self.session.add(assignment)
        await self.session.flush()
        await self.session.refresh(assignment)
        return assignment

    async def update(self, assignment: TenantUserRole) -> TenantUserRole:
        self.session.add(assignment)
        await self.session.flush()
        await self.session.refresh(assignment)
        return assignment
