from typing import List, Optional
from uuid import UUID

from sqlalchemy import or_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.role_repository import IRoleRepository
from src.domain.entities import Role


class RoleRepository(IRoleRepository):
    """Role repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_by_ids(self, role_ids: List[UUID]) -> List[Role]:
        if not role_ids:
            return []
        stmt = select(Role).where(col(Role.id).in_(role_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def find_by_names(self, names: List[str], tenant_id: Optional[UUID] = None) -> List[Role]:
        stmt = select(Role).where(col(Role.name).in_(names))
        if tenant_id is None:
            stmt = stmt.where(col(Role.tenant_id).is_(None))
        else:
            stmt = stmt.where(Role.tenant_id == tenant_id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_global(self) -> List[Role]:
        stmt = select(Role).where(col(Role.tenant_id).is_(None)).order_by(Role.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_for_tenant(self, tenant_id: UUID) -> List[Role]:
        stmt = (
            select(Role)
            .where(or_(col(Role.tenant_id).is_(None), Role.tenant_id == tenant_id))
            .order_by(Role.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, role: Role) -> Role:
        self.session.add(role)
        await self.session.flush()
        await self.session.refresh(role)
        return role
