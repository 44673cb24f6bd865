"""
Get Tenant Groups Use Case
"""

from typing import List
from uuid import UUID

from src.app.services.read_models import resolve_creator_names
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import GroupResponse
from src.domain.errors import NotFoundError
from src.domain.identity import CallerIdentity, SystemIdentity


class GetTenantGroupsUseCase:
    """
    Use case for listing the groups of a tenant.

    Business Rules:
    - Unknown tenant is NotFound
    - System audience: the tenant's groups, visible only to an active member
    - Shared service audience: every group of the tenant, provided the
      service is active and actively associated with the tenant
    - Otherwise the list is empty
    """

    def __init__(self, uow: UnitOfWork, system: SystemIdentity):
        self.uow = uow
        self.system = system

    async def execute(self, tenant_id: UUID, caller: CallerIdentity) -> List[GroupResponse]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                raise NotFoundError(f"Tenant not found: {tenant_id}")

            if caller.is_shared_service(self.system):
                visible = await self.uow.shared_services.is_available_to_tenant(
                    tenant_id, caller.audience
                )
            else:
                visible = bool(caller.subject) and await self.uow.tenant_users.has_access(
                    tenant_id, caller.subject
                )
            if not visible:
                return []

            groups = await self.uow.groups.list_for_tenant(tenant_id)
            return await resolve_creator_names(
                self.uow, [GroupResponse.model_validate(group) for group in groups]
            )
