"""
Update Group Shared Service Roles Use Case
"""

import logging
from typing import List, Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import GroupSharedServiceRole
from src.domain.errors import NotFoundError

from .dtos import GroupSharedServiceView, SharedServiceRoleToggles
from .group_role_view import load_group_role_view

logger = logging.getLogger(__name__)


class UpdateGroupSharedServiceRolesUseCase:
    """
    Use case for enabling and disabling shared service roles of a group.

    Business Rules:
    - The group must belong to the tenant
    - Each shared service must be active and actively associated with the
      tenant; each role must be a non-deleted role of that service
    - enabled with no grant inserts one, enabled with a removed grant
      reactivates it, disabled with an active grant soft deletes it
    - Anything else is left alone
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tenant_id: UUID,
        group_id: UUID,
        shared_services: List[SharedServiceRoleToggles],
        updated_by: Optional[str],
    ) -> List[GroupSharedServiceView]:
        async with self.uow:
            group = await self.uow.groups.get_in_tenant(tenant_id, group_id)
            if group is None:
                raise NotFoundError(f"Group not found: {group_id}")

            available = {
                service.id: service
                for service in await self.uow.shared_services.list_for_tenant(tenant_id)
            }
            grants = {
                grant.shared_service_role_id: grant
                for grant in await self.uow.shared_services.list_group_grants(group.id)
            }

            for requested in shared_services:
                if requested.id not in available:
                    raise NotFoundError(
                        f"Shared service not found or not associated with tenant: {requested.id}"
                    )
                roles = {
                    role.id: role
                    for role in await self.uow.shared_services.list_roles([requested.id])
                }

                for toggle in requested.shared_service_roles:
                    if toggle.id not in roles:
                        raise NotFoundError(
                            f"Shared service role not found: {toggle.id}"
                        )
                    grant = grants.get(toggle.id)

                    if toggle.enabled and grant is None:
                        grants[toggle.id] = await self.uow.shared_services.save_grant(
                            GroupSharedServiceRole(
                                group_id=group.id,
                                shared_service_role_id=toggle.id,
                                created_by=updated_by,
                                updated_by=updated_by,
                            )
                        )
                    elif toggle.enabled and grant.is_deleted:
                        grant.is_deleted = False
                        grant.touch(updated_by)
                        await self.uow.shared_services.save_grant(grant)
                    elif not toggle.enabled and grant is not None and not grant.is_deleted:
                        grant.is_deleted = True
                        grant.touch(updated_by)
                        await self.uow.shared_services.save_grant(grant)

            response = await load_group_role_view(self.uow, tenant_id, group.id)

            await self.uow.commit()
            logger.info(f"Updated shared service roles of group {group_id}")
            return response
