"""
Membership steps shared by user, role and group use cases. Every method
runs inside the caller's unit of work and never commits on its own.
"""

from typing import List, Optional, Tuple
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import GroupUser, Role, SsoUser, TenantUser, TenantUserRole
from src.domain.errors import ConflictError, NotFoundError


class MembershipService:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def join_tenant(
        self, tenant_id: UUID, sso_user: SsoUser, created_by: Optional[str]
    ) -> TenantUser:
        """
        Make the SSO user an active member of the tenant.

        A previously removed membership is restored instead of duplicated.

        Raises:
            ConflictError: the user is already an active member
        """
        tenant_user = await self.uow.tenant_users.get_by_sso_user(tenant_id, sso_user.id)
        if tenant_user is None:
            return await self.uow.tenant_users.create(
                TenantUser(
                    tenant_id=tenant_id,
                    sso_user_pk=sso_user.id,
                    created_by=created_by,
                    updated_by=created_by,
                )
            )

        if not tenant_user.is_deleted:
            raise ConflictError(
                f"User {sso_user.sso_user_id} is already added to this tenant"
            )

        tenant_user.is_deleted = False
        tenant_user.touch(created_by)
        return await self.uow.tenant_users.update(tenant_user)

    async def assign_roles(
        self, tenant_user: TenantUser, role_ids: List[UUID], created_by: Optional[str]
    ) -> List[Tuple[TenantUserRole, Role]]:
        """
        Assign every role in `role_ids` the member does not already hold.

        Raises:
            ConflictError: every requested role is already held
            NotFoundError: a requested role does not exist for this tenant
        """
        held = await self.uow.tenant_user_roles.list_active_with_roles([tenant_user.id])
        held_ids = {assignment.role_id for assignment, _ in held}
        new_ids = [role_id for role_id in dict.fromkeys(role_ids) if role_id not in held_ids]
        if not new_ids:
            raise ConflictError("All roles are already assigned to the user")

        roles = {role.id: role for role in await self.uow.roles.list_by_ids(new_ids)}
        missing = [
            role_id
            for role_id in new_ids
            if role_id not in roles
            or roles[role_id].tenant_id not in (None, tenant_user.tenant_id)
        ]
        if missing:
            raise NotFoundError(f"Role(s) not found: {', '.join(str(m) for m in missing)}")

        assigned = []
        for role_id in new_ids:
            assignment = await self.uow.tenant_user_roles.get_deleted(tenant_user.id, role_id)
            if assignment is not None:
                assignment.is_deleted = False
                assignment.touch(created_by)
                assignment = await self.uow.tenant_user_roles.update(assignment)
            else:
                assignment = await self.uow.tenant_user_roles.create(
                    TenantUserRole(
                        tenant_user_id=tenant_user.id,
                        role_id=role_id,
                        created_by=created_by,
                        updated_by=created_by,
                    )
                )
            assigned.append((assignment, roles[role_id]))
        return assigned

    async def add_to_group(
        self, group_id: UUID, tenant_user: TenantUser, created_by: Optional[str]
    ) -> GroupUser:
        """
        Make the member an active group member, restoring a removed row.

        Raises:
            ConflictError: the member is already in the group
        """
        group_user = await self.uow.groups.get_group_user(group_id, tenant_user.id)
        if group_user is None:
            return await self.uow.groups.create_group_user(
                GroupUser(
                    group_id=group_id,
                    tenant_user_id=tenant_user.id,
                    created_by=created_by,
                    updated_by=created_by,
                )
            )

        if not group_user.is_deleted:
            raise ConflictError("User is already a member of this group")

        group_user.is_deleted = False
        group_user.touch(created_by)
        return await self.uow.groups.update_group_user(group_user)
