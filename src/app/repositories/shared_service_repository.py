from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from src.domain.entities import (
    GroupSharedServiceRole,
    SharedService,
    SharedServiceRole,
    TenantSharedService,
)


class ISharedServiceRepository(ABC):
    """Shared service and role grant repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, shared_service_id: UUID) -> Optional[SharedService]:
        """Get shared service by ID"""
        pass

    @abstractmethod
    async def get_by_name_or_client_identifier(
        self, name: str, client_identifier: str
    ) -> Optional[SharedService]:
        """Get a shared service clashing on name or client identifier"""
        pass

    @abstractmethod
    async def list_active(self) -> List[SharedService]:
        """Get all active shared services"""
        pass

    @abstractmethod
    async def list_for_tenant(self, tenant_id: UUID) -> List[SharedService]:
        """Get active shared services actively associated with a tenant"""
        pass

    @abstractmethod
    async def is_available_to_tenant(self, tenant_id: UUID, client_identifier: str) -> bool:
        """Check the service is active and actively associated with the tenant"""
        pass

    @abstractmethod
    async def list_roles(self, shared_service_ids: List[UUID]) -> List[SharedServiceRole]:
        """Get non-deleted roles of the given shared services"""
        pass

    @abstractmethod
    async def get_role_by_name(
        self, shared_service_id: UUID, name: str
    ) -> Optional[SharedServiceRole]:
        """Get a non-deleted role of a shared service by name"""
        pass

    @abstractmethod
    async def get_tenant_association(
        self, tenant_id: UUID, shared_service_id: UUID
    ) -> Optional[TenantSharedService]:
        """Get the tenant association row, removed or not"""
        pass

    @abstractmethod
    async def list_group_grants(self, group_id: UUID) -> List[GroupSharedServiceRole]:
        """Get every grant row of a group, removed or not"""
        pass

    @abstractmethod
    async def list_enabled_grants(
        self, tenant_id: UUID, group_ids: List[UUID], client_identifier: Optional[str] = None
    ) -> List[Tuple[UUID, SharedServiceRole]]:
        """
        Get (group id, role) pairs for currently enabled grants.

        A grant is enabled when the grant and role are not deleted, the
        shared service is active and actively associated with the tenant,
        and, when client_identifier is given, the service matches it.
        """
        pass

    @abstractmethod
    async def create(self, shared_service: SharedService) -> SharedService:
        """Create a new shared service"""
        pass

    @abstractmethod
    async def create_role(self, role: SharedServiceRole) -> SharedServiceRole:
        """Create a new shared service role"""
        pass

    @abstractmethod
    async def save_tenant_association(
        self, association: TenantSharedService
    ) -> TenantSharedService:
        """Create or update a tenant association row"""
        pass

    @abstractmethod
    async def save_grant(self, grant: GroupSharedServiceRole) -> GroupSharedServiceRole:
        """Create or update a group grant row"""
        pass
