"""
Remove Tenant User Use Case

Handles removing (soft delete) members from a tenant.
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import RoleName
from src.domain.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class RemoveTenantUserUseCase:
    """
    Use case for removing members from a tenant.

    Business Rules:
    - Unknown or already removed membership is NotFound
    - The last active Tenant Owner cannot be removed
    - Roles, group memberships and the membership itself are soft deleted
      in one transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, tenant_user_id: UUID, removed_by: Optional[str]
    ) -> None:
        async with self.uow:
            tenant_user = await self.uow.tenant_users.get_active(tenant_id, tenant_user_id)
            if tenant_user is None:
                raise NotFoundError(f"Tenant user not found: {tenant_user_id}")

            assignments = await self.uow.tenant_user_roles.list_active_with_roles(
                [tenant_user.id]
            )
            is_owner = any(role.name == RoleName.tenant_owner.value for _, role in assignments)
            if is_owner:
                other_owners = await self.uow.tenant_user_roles.count_active_holders(
                    tenant_id, RoleName.tenant_owner.value, exclude_tenant_user_id=tenant_user.id
                )
                if other_owners == 0:
                    raise ConflictError(
                        "Cannot remove the last tenant owner, at least one tenant owner must remain"
                    )

            for assignment, _ in assignments:
                assignment.is_deleted = True
                assignment.touch(removed_by)
                await self.uow.tenant_user_roles.update(assignment)

            for group_user in await self.uow.groups.list_active_group_users(tenant_user.id):
                group_user.is_deleted = True
                group_user.touch(removed_by)
                await self.uow.groups.update_group_user(group_user)

            tenant_user.is_deleted = True
            tenant_user.touch(removed_by)
            await self.uow.tenant_users.update(tenant_user)

            await self.uow.commit()
            logger.info(f"Removed tenant user {tenant_user_id} from tenant {tenant_id}")
