from uuid import UUID

from src.app.services.read_models import build_tenant
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import TenantResponse, TenantWithMembersResponse
from src.domain.errors import NotFoundError


class GetTenantUseCase:
    """Fetch a tenant, optionally with its members and their active roles."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID) -> TenantResponse:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                raise NotFoundError(f"Tenant not found: {tenant_id}")
            return await build_tenant(self.uow, tenant)

    async def execute_with_members(self, tenant_id: UUID) -> TenantWithMembersResponse:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                raise NotFoundError(f"Tenant not found: {tenant_id}")
            return await build_tenant(self.uow, tenant, with_members=True)
