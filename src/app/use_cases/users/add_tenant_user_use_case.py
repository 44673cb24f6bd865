"""
Add Tenant User Use Case
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.membership import MembershipService
from src.app.services.read_models import build_members
from src.app.services.tenant_provisioning import TenantProvisioningService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import TenantUserResponse
from src.domain.entities import SERVICE_USER_ONLY_PROVIDERS, RoleName
from src.domain.errors import NotFoundError

from .dtos import AddTenantUserCommand

logger = logging.getLogger(__name__)


class AddTenantUserUseCase:
    """
    Use case for adding a user to a tenant.

    Business Rules:
    - Unknown tenant is NotFound
    - An active membership for the same subject is a Conflict
    - A previously removed membership is restored, not duplicated
    - Business identity provider users only receive the Service User role
    - Requested groups must belong to the tenant
    - Membership, roles and groups are written in one transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, command: AddTenantUserCommand, created_by: Optional[str]
    ) -> TenantUserResponse:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                raise NotFoundError(f"Tenant not found: {tenant_id}")

            provisioning = TenantProvisioningService(self.uow)
            membership = MembershipService(self.uow)

            sso_user = await provisioning.resolve_sso_user(command.user, created_by)
            tenant_user = await membership.join_tenant(tenant_id, sso_user, created_by)

            role_ids = command.roles
            if sso_user.idp_type in SERVICE_USER_ONLY_PROVIDERS:
                bootstrap = await provisioning.ensure_bootstrap_roles(created_by)
                role_ids = [bootstrap[RoleName.service_user].id]
            await membership.assign_roles(tenant_user, role_ids, created_by)

            for group_id in dict.fromkeys(command.groups):
                group = await self.uow.groups.get_in_tenant(tenant_id, group_id)
                if group is None:
                    raise NotFoundError(f"Group not found: {group_id}")
                await membership.add_to_group(group.id, tenant_user, created_by)

            (response,) = await build_members(self.uow, [(tenant_user, sso_user)])

            await self.uow.commit()
            logger.info(f"Added SSO user {sso_user.sso_user_id} to tenant {tenant_id}")
            return response
