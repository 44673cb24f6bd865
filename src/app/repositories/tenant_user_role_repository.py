from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import Role, TenantUserRole


class ITenantUserRoleRepository(ABC):
    """Role assignment repository interface - application layer"""

    @abstractmethod
    async def list_active_with_roles(
        self, tenant_user_ids: List[UUID]
    ) -> List[Tuple[TenantUserRole, Role]]:
        """List active assignments of the given memberships with their roles"""
        pass

    @abstractmethod
    async def get_active(self, tenant_user_id: UUID, role_id: UUID) -> Optional[TenantUserRole]:
        """Get the active assignment for a (membership, role) pair"""
        pass

    @abstractmethod
    async def get_deleted(self, tenant_user_id: UUID, role_id: UUID) -> Optional[TenantUserRole]:
        """Get the most recently removed assignment for a (membership, role) pair"""
        pass

    @abstractmethod
    async def count_active_holders(
        self, tenant_id: UUID, role_name: str, exclude_tenant_user_id: Optional[UUID] = None
    ) -> int:
        """Count active members of the tenant holding the named role"""
        pass

    @abstractmethod
    async def create(self, assignment: TenantUserRole) -> TenantUserRole:
        """Create a new assignment"""
        pass

    @abstractmethod
    async def update(self, assignment: TenantUserRole) -> TenantUserRole:
        """Update existing assignment"""
        pass
