from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Tenant


class ITenantRepository(ABC):
    """Tenant repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, tenant_id: UUID) -> Optional[Tenant]:
        """Get tenant by ID"""
        pass

    @abstractmethod
    async def get_by_name_and_ministry(
        self, name: str, ministry_name: str, exclude_id: Optional[UUID] = None
    ) -> Optional[Tenant]:
        """Get tenant by its unique (name, ministry name) pair"""
        pass

    @abstractmethod
    async def list_for_sso_user(
        self, sso_user_id: str, client_identifier: Optional[str] = None
    ) -> List[Tenant]:
        """
        Get tenants where the subject is an active member.

        When client_identifier is given, only tenants actively associated
        with that active shared service are returned.
        """
        pass

    @abstractmethod
    async def create(self, tenant: Tenant) -> Tenant:
        """Create a new tenant"""
        pass

    @abstractmethod
    async def update(self, tenant: Tenant) -> Tenant:
        """Update existing tenant"""
        pass
