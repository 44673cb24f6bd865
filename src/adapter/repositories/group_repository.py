from typing import List, Optional, Tuple
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.soft_delete import active
from src.app.repositories.group_repository import IGroupRepository
from src.domain.entities import Group, GroupUser, SsoUser, TenantUser


class GroupRepository(IGroupRepository):
    """Group repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_in_tenant(self, tenant_id: UUID, group_id: UUID) -> Optional[Group]:
        stmt = select(Group).where(Group.id == group_id, Group.tenant_id == tenant_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name(
        self, tenant_id: UUID, name: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Group]:
        stmt = select(Group).where(Group.tenant_id == tenant_id, Group.name == name)
        if exclude_id is not None:
            stmt = stmt.where(Group.id != exclude_id)
        result = await self.session.exec(stmt)
        return result.first()

    async def list_for_tenant(self, tenant_id: UUID) -> List[Group]:
        stmt = select(Group).where(Group.tenant_id == tenant_id).order_by(Group.name)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_for_tenant_user(self, tenant_user_id: UUID) -> List[Group]:
        stmt = (
            select(Group)
            .join(GroupUser, GroupUser.group_id == Group.id)
            .where(GroupUser.tenant_user_id == tenant_user_id, active(GroupUser))
            .order_by(Group.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_members(self, group_id: UUID) -> List[Tuple[GroupUser, SsoUser]]:
        stmt = (
            select(GroupUser, SsoUser)
            .join(TenantUser, TenantUser.id == GroupUser.tenant_user_id)
            .join(SsoUser, SsoUser.id == TenantUser.sso_user_pk)
            .where(GroupUser.group_id == group_id, active(GroupUser), active(TenantUser))
            .order_by(SsoUser.display_name)
        )
        result = await self.session.exec(stmt)
        return [(group_user, sso_user) for group_user, sso_user in result.all()]

    async def get_group_user(self, group_id: UUID, tenant_user_id: UUID) -> Optional[GroupUser]:
        stmt = select(GroupUser).where(
            GroupUser.group_id == group_id, GroupUser.tenant_user_id == tenant_user_id
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_active_group_user(self, group_id: UUID, group_user_id: UUID) -> Optional[GroupUser]:
        stmt = select(GroupUser).where(
            GroupUser.id == group_user_id,
            GroupUser.group_id == group_id,
            active(GroupUser),
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_active_group_users(self, tenant_user_id: UUID) -> List[GroupUser]:
        stmt = select(GroupUser).where(
            GroupUser.tenant_user_id == tenant_user_id, active(GroupUser)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, group: Group) -> Group:
        self.session.add(group)
        await self.session.flush()
        await self.session.refresh(group)
        return group

    async def update(self, group: Group) -> Group:
        self.session.add(group)
        await self.session.flush()
        await self.session.refresh(group)
        return group

    async def create_group_user(self, group_user: GroupUser) -> GroupUser:
        self.session.add(group_user)
        await self.session.flush()
        await self.session.refresh(group_user)
        return group_user

    async def update_group_user(self, group_user: GroupUser) -> GroupUser:
        self.session.add(group_user)
        await self.session.flush()
        await self.session.refresh(group_user)
        return group_user
