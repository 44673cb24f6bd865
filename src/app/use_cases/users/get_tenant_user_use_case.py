"""
Get Tenant User Use Case
"""

from typing import Dict
from uuid import UUID

from src.app.services.read_models import build_members, is_role_allowed
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import GroupResponse, SharedServiceRoleResponse
from src.domain.errors import NotFoundError

from .dtos import TenantUserDetailResponse


class GetTenantUserUseCase:
    """
    Use case for fetching a single tenant member.

    Roles, groups and the shared service roles granted through those groups
    are only loaded when asked for. Granted roles are limited to the ones the
    member's identity provider is allowed to hold.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tenant_id: UUID,
        tenant_user_id: UUID,
        include_roles: bool = False,
        include_groups: bool = False,
        include_shared_services: bool = False,
    ) -> TenantUserDetailResponse:
        async with self.uow:
            row = await self.uow.tenant_users.get_with_sso_user(tenant_id, tenant_user_id)
            if row is None:
                raise NotFoundError(f"Tenant user not found: {tenant_user_id}")
            tenant_user, sso_user = row

            (member,) = await build_members(self.uow, [row])
            response = TenantUserDetailResponse(
                **member.model_dump(exclude={"roles"}),
                roles=member.roles if include_roles else [],
            )

            groups = []
            if include_groups or include_shared_services:
                groups = await self.uow.groups.list_for_tenant_user(tenant_user.id)
            if include_groups:
                response.groups = [GroupResponse.model_validate(group) for group in groups]

            if include_shared_services:
                grants = await self.uow.shared_services.list_enabled_grants(
                    tenant_id, [group.id for group in groups]
                )
                roles: Dict[UUID, SharedServiceRoleResponse] = {}
                for _, role in grants:
                    if role.id not in roles and is_role_allowed(role, sso_user.idp_type):
                        roles[role.id] = SharedServiceRoleResponse.model_validate(role)
                response.shared_service_roles = list(roles.values())

            return response
