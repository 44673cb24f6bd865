"""
Role listing use cases.
"""

from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import RoleResponse
from src.domain.errors import NotFoundError


class GetRolesUseCase:
    """All global roles."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> List[RoleResponse]:
        async with self.uow:
            roles = await self.uow.roles.list_global()
            return [RoleResponse.model_validate(role) for role in roles]


class GetTenantRolesUseCase:
    """Global roles together with the tenant's own roles."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID) -> List[RoleResponse]:
        async with self.uow:
            roles = await self.uow.roles.list_for_tenant(tenant_id)
            return [RoleResponse.model_validate(role) for role in roles]


class GetUserRolesUseCase:
    """Active roles of a tenant member."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, tenant_user_id: UUID) -> List[RoleResponse]:
        async with self.uow:
            tenant_user = await self.uow.tenant_users.get_active(tenant_id, tenant_user_id)
            if tenant_user is None:
                raise NotFoundError(f"Tenant user not found: {tenant_user_id}")
            held = await self.uow.tenant_user_roles.list_active_with_roles([tenant_user.id])
            return [RoleResponse.model_validate(role) for _, role in held]


class GetSsoUserRolesUseCase:
    """Active roles of an SSO user within a tenant; empty when not a member."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, sso_user_id: str) -> List[RoleResponse]:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                raise NotFoundError(f"Tenant not found: {tenant_id}")

            tenant_user = await self.uow.tenant_users.get_active_by_sso_user_id(
                tenant_id, sso_user_id
            )
            if tenant_user is None:
                return []
            held = await self.uow.tenant_user_roles.list_active_with_roles([tenant_user.id])
            return [RoleResponse.model_validate(role) for _, role in held]
