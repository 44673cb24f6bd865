from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Group, GroupUser, SsoUser


class IGroupRepository(ABC):
    """Group repository interface - application layer"""

    @abstractmethod
    async def get_in_tenant(self, tenant_id: UUID, group_id: UUID) -> Optional[Group]:
        """Get a group owned by the tenant"""
        pass

    @abstractmethod
    async def get_by_name(
        self, tenant_id: UUID, name: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Group]:
        """Get a group of the tenant by name"""
        pass

    @abstractmethod
    async def list_for_tenant(self, tenant_id: UUID) -> List[Group]:
        """Get all groups of a tenant"""
        pass

    @abstractmethod
    async def list_for_tenant_user(self, tenant_user_id: UUID) -> List[Group]:
        """Get groups the membership actively belongs to, sorted by name"""
        pass

    @abstractmethod
    async def list_members(self, group_id: UUID) -> List[Tuple[GroupUser, SsoUser]]:
        """Get active group members with their SSO identity"""
        pass

    @abstractmethod
    async def get_group_user(self, group_id: UUID, tenant_user_id: UUID) -> Optional[GroupUser]:
        """Get the group membership row, removed or not"""
        pass

    @abstractmethod
    async def get_active_group_user(self, group_id: UUID, group_user_id: UUID) -> Optional[GroupUser]:
        """Get an active group membership row by ID"""
        pass

    @abstractmethod
    async def list_active_group_users(self, tenant_user_id: UUID) -> List[GroupUser]:
        """Get all active group membership rows of a membership"""
        pass

    @abstractmethod
    async def create(self, group: Group) -> Group:
        """Create a new group"""
        pass

    @abstractmethod
    async def update(self, group: Group) -> Group:
        """Update existing group"""
        pass

    @abstractmethod
    async def create_group_user(self, group_user: GroupUser) -> GroupUser:
        """Create a new group membership row"""
        pass

    @abstractmethod
    async def update_group_user(self, group_user: GroupUser) -> GroupUser:
        """Update existing group membership row"""
        pass
