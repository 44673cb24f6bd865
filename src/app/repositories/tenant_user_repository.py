from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import SsoUser, TenantUser


class ITenantUserRepository(ABC):
    """Tenant membership repository interface - application layer"""

    @abstractmethod
    async def get_active(self, tenant_id: UUID, tenant_user_id: UUID) -> Optional[TenantUser]:
        """Get an active membership belonging to the tenant"""
        pass

    @abstractmethod
    async def get_active_by_sso_user_id(
        self, tenant_id: UUID, sso_user_id: str
    ) -> Optional[TenantUser]:
        """Get the active membership of an external subject in the tenant"""
        pass

    @abstractmethod
    async def get_by_sso_user(self, tenant_id: UUID, sso_user_pk: UUID) -> Optional[TenantUser]:
        """Get the membership row of an SSO user, removed or not"""
        pass

    @abstractmethod
    async def get_with_sso_user(
        self, tenant_id: UUID, tenant_user_id: UUID
    ) -> Optional[Tuple[TenantUser, SsoUser]]:
        """Get an active membership together with its SSO identity"""
        pass

    @abstractmethod
    async def list_with_sso_users(
        self,
        tenant_id: UUID,
        group_ids: Optional[List[UUID]] = None,
        shared_service_role_ids: Optional[List[UUID]] = None,
    ) -> List[Tuple[TenantUser, SsoUser]]:
        """List active members, optionally filtered by group or granted role"""
        pass

    @abstractmethod
    async def has_access(
        self, tenant_id: UUID, sso_user_id: str, role_names: Optional[List[str]] = None
    ) -> bool:
        """Check active membership and, if given, an active role by name"""
        pass

    @abstractmethod
    async def create(self, tenant_user: TenantUser) -> TenantUser:
        """Create a new membership"""
        pass

    @abstractmethod
    async def update(self, tenant_user: TenantUser) -> TenantUser:
        """Update existing membership"""
        pass
