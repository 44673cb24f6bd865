"""
Update Tenant Use Case
"""

from typing import Optional
from uuid import UUID

from src.app.services.read_models import build_tenant
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import TenantResponse
from src.domain.errors import ConflictError, NotFoundError

from .dtos import UpdateTenantCommand


class UpdateTenantUseCase:
    """
    Use case for partially updating a tenant.

    Business Rules:
    - Unknown tenant is NotFound
    - The resulting (name, ministry name) must not collide with another tenant
    - Only supplied fields change
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, command: UpdateTenantCommand, updated_by: Optional[str]
    ) -> TenantResponse:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                raise NotFoundError(f"Tenant not found: {tenant_id}")

            changes = command.model_dump(exclude_unset=True, exclude_none=True)
            if "name" in changes or "ministry_name" in changes:
                name = changes.get("name", tenant.name)
                ministry_name = changes.get("ministry_name", tenant.ministry_name)
                duplicate = await self.uow.tenants.get_by_name_and_ministry(
                    name, ministry_name, exclude_id=tenant_id
                )
                if duplicate is not None:
                    raise ConflictError(
                        f"A tenant with name '{name}' and ministry name '{ministry_name}' already exists"
                    )

            for field, value in changes.items():
                setattr(tenant, field, value)
            tenant.touch(updated_by)
            tenant = await self.uow.tenants.update(tenant)
            response = await build_tenant(self.uow, tenant)

            await self.uow.commit()
            return response
