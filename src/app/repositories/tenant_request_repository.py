from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import TenantRequest, TenantRequestStatus


class ITenantRequestRepository(ABC):
    """Tenant request repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, request_id: UUID) -> Optional[TenantRequest]:
        """Get tenant request by ID"""
        pass

    @abstractmethod
    async def list_by_status(
        self, status: Optional[TenantRequestStatus] = None
    ) -> List[TenantRequest]:
        """Get tenant requests, newest first"""
        pass

    @abstractmethod
    async def create(self, tenant_request: TenantRequest) -> TenantRequest:
        """Create a new tenant request"""
        pass

    @abstractmethod
    async def update(self, tenant_request: TenantRequest) -> TenantRequest:
        """Update existing tenant request"""
        pass
