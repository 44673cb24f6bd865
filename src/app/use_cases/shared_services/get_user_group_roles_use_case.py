"""
Group-mediated shared service role resolution for a tenant member.
"""

from typing import Dict, List, Optional, Tuple
from uuid import UUID

from src.app.services.read_models import is_role_allowed
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import GroupRef
from src.domain.entities import Group, SharedServiceRole
from src.domain.errors import NotFoundError

from .dtos import EffectiveSharedServiceRoleResponse, EnabledRoleRef, UserGroupRolesResponse


async def _load_enabled_roles(
    uow: UnitOfWork, tenant_id: UUID, sso_user_id: str, audience: Optional[str]
) -> Tuple[List[Group], List[Tuple[UUID, SharedServiceRole]]]:
    tenant_user = await uow.tenant_users.get_active_by_sso_user_id(tenant_id, sso_user_id)
    if tenant_user is None:
        raise NotFoundError(f"User {sso_user_id} is not a member of tenant {tenant_id}")
    sso_user = await uow.sso_users.get_by_sso_user_id(sso_user_id)

    groups = await uow.groups.list_for_tenant_user(tenant_user.id)
    if not groups or not audience:
        return groups, []

    grants = await uow.shared_services.list_enabled_grants(
        tenant_id, [group.id for group in groups], client_identifier=audience
    )
    return groups, [
        (group_id, role)
        for group_id, role in grants
        if is_role_allowed(role, sso_user.idp_type)
    ]


class GetUserGroupsWithSharedServiceRolesUseCase:
    """
    Every active group of the member, sorted by name, each with the names of
    its enabled roles for the calling shared service.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, sso_user_id: str, audience: Optional[str]
    ) -> List[UserGroupRolesResponse]:
        async with self.uow:
            groups, grants = await _load_enabled_roles(
                self.uow, tenant_id, sso_user_id, audience
            )

            names_by_group: Dict[UUID, List[str]] = {}
            for group_id, role in grants:
                names = names_by_group.setdefault(group_id, [])
                if role.name not in names:
                    names.append(role.name)

            return [
                UserGroupRolesResponse(
                    id=group.id,
                    name=group.name,
                    shared_service_roles=[
                        EnabledRoleRef(name=name)
                        for name in sorted(names_by_group.get(group.id, []))
                    ],
                )
                for group in sorted(groups, key=lambda g: g.name)
            ]


class GetEffectiveSharedServiceRolesUseCase:
    """
    Use case for the union of a member's enabled shared service roles.

    Business Rules:
    - The subject must be an active member of the tenant
    - Only roles of the shared service whose client identifier is the
      caller's audience are considered
    - Roles are deduplicated; each lists every group that grants it
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, sso_user_id: str, audience: Optional[str]
    ) -> List[EffectiveSharedServiceRoleResponse]:
        async with self.uow:
            groups, grants = await _load_enabled_roles(
                self.uow, tenant_id, sso_user_id, audience
            )

            group_names = {group.id: group.name for group in groups}
            roles: Dict[UUID, EffectiveSharedServiceRoleResponse] = {}
            for group_id, role in grants:
                effective = roles.get(role.id)
                if effective is None:
                    effective = roles[role.id] = EffectiveSharedServiceRoleResponse(
                        id=role.id,
                        name=role.name,
                        description=role.description,
                        allowed_identity_providers=role.allowed_identity_providers,
                    )
                if all(ref.id != group_id for ref in effective.groups):
                    effective.groups.append(GroupRef(id=group_id, name=group_names[group_id]))

            return sorted(roles.values(), key=lambda r: r.name)
