"""
Add Group User Use Case
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.membership import MembershipService
from src.app.services.read_models import build_members
from src.app.services.tenant_provisioning import TenantProvisioningService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import RoleName
from src.domain.errors import NotFoundError

from .dtos import AddGroupUserCommand, GroupUserResponse

logger = logging.getLogger(__name__)


class AddGroupUserUseCase:
    """
    Use case for adding a user to a group.

    Business Rules:
    - Tenant and group must exist and the group must belong to the tenant
    - An existing active membership of the subject is reused
    - Otherwise the subject joins the tenant with only the Service User role
    - Already an active group member is a Conflict
    - A removed group membership is restored instead of duplicated
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tenant_id: UUID,
        group_id: UUID,
        command: AddGroupUserCommand,
        created_by: Optional[str],
    ) -> GroupUserResponse:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                raise NotFoundError(f"Tenant not found: {tenant_id}")
            group = await self.uow.groups.get_in_tenant(tenant_id, group_id)
            if group is None:
                raise NotFoundError(f"Group not found: {group_id}")

            provisioning = TenantProvisioningService(self.uow)
            membership = MembershipService(self.uow)

            sso_user = await provisioning.resolve_sso_user(command.user, created_by)
            tenant_user = await self.uow.tenant_users.get_by_sso_user(tenant_id, sso_user.id)
            if tenant_user is None or tenant_user.is_deleted:
                logger.info(
                    f"Onboarding SSO user {sso_user.sso_user_id} to tenant {tenant_id} through group {group_id}"
                )
                tenant_user = await membership.join_tenant(tenant_id, sso_user, created_by)
                bootstrap = await provisioning.ensure_bootstrap_roles(created_by)
                await membership.assign_roles(
                    tenant_user, [bootstrap[RoleName.service_user].id], created_by
                )

            group_user = await membership.add_to_group(group.id, tenant_user, created_by)
            (member,) = await build_members(self.uow, [(tenant_user, sso_user)])
            response = GroupUserResponse(**group_user.model_dump(), tenant_user=member)

            await self.uow.commit()
            return response
