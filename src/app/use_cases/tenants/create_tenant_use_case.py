"""
Create Tenant Use Case
"""

from typing import Optional

from src.app.services.read_models import build_tenant
from src.app.services.tenant_provisioning import TenantProvisioningService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import TenantWithMembersResponse

from .dtos import CreateTenantCommand


class CreateTenantUseCase:
    """
    Use case for creating a tenant.

    Business Rules:
    - (name, ministry name) must be unique, otherwise Conflict
    - The founding SSO user is resolved by subject id or created
    - The global bootstrap roles exist exactly once and all three are
      assigned to the founding member
    - Everything happens in one transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: CreateTenantCommand, created_by: Optional[str]
    ) -> TenantWithMembersResponse:
        async with self.uow:
            provisioning = TenantProvisioningService(self.uow)
            owner = await provisioning.resolve_sso_user(command.user, created_by)
            tenant, _, _ = await provisioning.provision_tenant(
                command.name,
                command.ministry_name,
                command.description,
                owner,
                created_by,
            )
            response = await build_tenant(self.uow, tenant, with_members=True)

            await self.uow.commit()
            return response
