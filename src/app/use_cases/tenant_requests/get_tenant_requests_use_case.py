from typing import List, Optional

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TenantRequestStatus

from .dtos import TenantRequestResponse
from .read_model import build_tenant_requests


class GetTenantRequestsUseCase:
    """Tenant requests, newest first, optionally filtered by status."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, status: Optional[TenantRequestStatus] = None
    ) -> List[TenantRequestResponse]:
        async with self.uow:
            requests = await self.uow.tenant_requests.list_by_status(status)
            return await build_tenant_requests(self.uow, requests)
