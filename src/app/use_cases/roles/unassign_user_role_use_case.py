"""
Unassign User Role Use Case
"""

import logging
from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import RoleName
from src.domain.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class UnassignUserRoleUseCase:
    """
    Use case for removing a role from a tenant member.

    Business Rules:
    - No active assignment for (tenant, member, role) is NotFound
    - Removing the last active Tenant Owner of the tenant is a Conflict
    - Removing the member's last active role is a Conflict
    - Unassignment is a soft delete
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tenant_id: UUID,
        tenant_user_id: UUID,
        role_id: UUID,
        unassigned_by: Optional[str],
    ) -> None:
        async with self.uow:
            tenant_user = await self.uow.tenant_users.get_active(tenant_id, tenant_user_id)
            if tenant_user is None:
                raise NotFoundError(f"Tenant user not found: {tenant_user_id}")

            held = await self.uow.tenant_user_roles.list_active_with_roles([tenant_user.id])
            match = next(
                ((assignment, role) for assignment, role in held if role.id == role_id), None
            )
            if match is None:
                raise NotFoundError(
                    f"Role {role_id} is not assigned to tenant user {tenant_user_id}"
                )
            assignment, role = match

            if role.name == RoleName.tenant_owner.value and role.tenant_id is None:
                other_owners = await self.uow.tenant_user_roles.count_active_holders(
                    tenant_id, role.name, exclude_tenant_user_id=tenant_user.id
                )
                if other_owners == 0:
                    raise ConflictError(
                        "Cannot unassign tenant owner role, at least one tenant owner must remain"
                    )

            if len(held) == 1:
                raise ConflictError(
                    "Cannot unassign the last role from a user. "
                    "User must have at least one role in the tenant"
                )

            assignment.is_deleted = True
            assignment.touch(unassigned_by)
            await self.uow.tenant_user_roles.update(assignment)

            await self.uow.commit()
            logger.info(f"Unassigned role {role.name} from tenant user {tenant_user_id}")
