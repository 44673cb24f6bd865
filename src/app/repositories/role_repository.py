from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Role


class IRoleRepository(ABC):
    """Role repository interface - application layer"""

    @abstractmethod
    async def list_by_ids(self, role_ids: List[UUID]) -> List[Role]:
        """Get roles by ID"""
        pass

    @abstractmethod
    async def find_by_names(self, names: List[str], tenant_id: Optional[UUID] = None) -> List[Role]:
        """Get roles by name; global roles when tenant_id is None"""
        pass

    @abstractmethod
    async def list_global(self) -> List[Role]:
        """Get all global roles"""
        pass

    @abstractmethod
    async def list_for_tenant(self, tenant_id: UUID) -> List[Role]:
        """Get global roles and the tenant's own roles"""
        pass

    @abstractmethod
    async def create(self, role: Role) -> Role:
        """Create a new role"""
        pass
