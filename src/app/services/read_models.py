"""
Assembly of response read models from repository rows.
"""

from typing import Dict, Iterable, List, Optional, Tuple, TypeVar
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import (
    AuditedResponse,
    RoleResponse,
    SsoUserResponse,
    TenantResponse,
    TenantUserResponse,
    TenantWithMembersResponse,
)
from src.domain.base import SYSTEM_USER
from src.domain.entities import SharedServiceRole, SsoUser, Tenant, TenantUser

T = TypeVar("T", bound=AuditedResponse)


async def resolve_creator_names(uow: UnitOfWork, items: List[T]) -> List[T]:
    """Replace `created_by` subject ids with display names when resolvable."""
    subject_ids = {
        item.created_by for item in items if item.created_by and item.created_by != SYSTEM_USER
    }
    if not subject_ids:
        return items

    creators = await uow.sso_users.list_by_sso_user_ids(sorted(subject_ids))
    names = {creator.sso_user_id: creator.display_name for creator in creators}
    return [
        item.model_copy(update={"created_by": names[item.created_by]})
        if item.created_by in names
        else item
        for item in items
    ]


async def build_members(
    uow: UnitOfWork, members: Iterable[Tuple[TenantUser, SsoUser]]
) -> List[TenantUserResponse]:
    """Attach active roles to each (membership, SSO user) pair."""
    members = list(members)
    assignments = await uow.tenant_user_roles.list_active_with_roles(
        [tenant_user.id for tenant_user, _ in members]
    )
    roles_by_member: Dict[UUID, List[RoleResponse]] = {}
    for assignment, role in assignments:
        roles_by_member.setdefault(assignment.tenant_user_id, []).append(
            RoleResponse.model_validate(role)
        )

    return [
        build_member(tenant_user, sso_user, roles_by_member.get(tenant_user.id))
        for tenant_user, sso_user in members
    ]


async def build_tenant(
    uow: UnitOfWork, tenant: Tenant, with_members: bool = False
) -> TenantResponse:
    if not with_members:
        (response,) = await resolve_creator_names(uow, [TenantResponse.model_validate(tenant)])
        return response

    members = await uow.tenant_users.list_with_sso_users(tenant.id)
    response = TenantWithMembersResponse(
        **tenant.model_dump(), users=await build_members(uow, members)
    )
    (response,) = await resolve_creator_names(uow, [response])
    return response


async def build_tenants(
    uow: UnitOfWork, tenants: List[Tenant], with_members: bool = False
) -> List[TenantResponse]:
    return [await build_tenant(uow, tenant, with_members) for tenant in tenants]


def build_member(
    tenant_user: TenantUser, sso_user: SsoUser, roles: Optional[List[RoleResponse]] = None
) -> TenantUserResponse:
    return TenantUserResponse(
        **tenant_user.model_dump(),
        sso_user=SsoUserResponse.model_validate(sso_user),
        roles=roles or [],
    )


def is_role_allowed(role: SharedServiceRole, idp_type: Optional[str]) -> bool:
    """A role without provider restrictions is open to every member."""
    if not role.allowed_identity_providers:
        return True
    return idp_type in role.allowed_identity_providers
