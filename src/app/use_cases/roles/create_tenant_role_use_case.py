from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import RoleResponse
from src.domain.entities import Role
from src.domain.errors import ConflictError, NotFoundError


class CreateTenantRoleUseCase:
    """
    Use case for creating a custom role scoped to a tenant.

    Business Rules:
    - Unknown tenant is NotFound
    - Role names are unique within the tenant and may not shadow a global role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tenant_id: UUID,
        name: str,
        description: Optional[str],
        created_by: Optional[str],
    ) -> RoleResponse:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                raise NotFoundError(f"Tenant not found: {tenant_id}")

            clashing = await self.uow.roles.find_by_names([name], tenant_id)
            clashing += await self.uow.roles.find_by_names([name])
            if clashing:
                raise ConflictError(f"Role already exists: {name}")

            role = await self.uow.roles.create(
                Role(
                    name=name,
                    description=description,
                    tenant_id=tenant_id,
                    created_by=created_by,
                    updated_by=created_by,
                )
            )
            response = RoleResponse.model_validate(role)

            await self.uow.commit()
            return response
