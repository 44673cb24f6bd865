from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from src.api.schemas import AddTenantUserRequest
from src.api.utils.auth import TenantAccess
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    AddTenantUserCommand,
    AddTenantUserUseCase,
    GetTenantUsersUseCase,
    GetTenantUserUseCase,
    RemoveTenantUserUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import RoleName
from src.domain.identity import CallerIdentity

router = APIRouter(prefix="/tenants/{tenant_id}/users")

USER_MANAGERS = (RoleName.tenant_owner, RoleName.user_admin)
EXPAND_PATTERN = r"^((roles|groups|sharedServices)(,(roles|groups|sharedServices))*)?$"


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_tenant_user(
    tenant_id: UUID,
    request: AddTenantUserRequest,
    caller: CallerIdentity = Depends(TenantAccess(*USER_MANAGERS)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add User to Tenant

    Raises:
        - 400 Bad Request: Invalid payload
        - 403 Forbidden: Caller is neither Tenant Owner nor User Admin
        - 404 Not Found: Tenant, role or group not found
        - 409 Conflict: User already added or roles already assigned
    """
    command = AddTenantUserCommand(
        user=request.user.to_profile(), roles=request.roles, groups=request.groups
    )
    user = await AddTenantUserUseCase(uow).execute(
        tenant_id, command, created_by=caller.subject
    )
    return {"data": {"user": user}}


@router.get("", status_code=status.HTTP_200_OK)
async def get_tenant_users(
    tenant_id: UUID,
    group_ids: Optional[List[UUID]] = Query(None, alias="groupIds"),
    shared_service_role_ids: Optional[List[UUID]] = Query(
        None, alias="sharedServiceRoleIds"
    ),
    caller: CallerIdentity = Depends(TenantAccess()),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Active members of the tenant, optionally filtered by group or granted role"""
    users = await GetTenantUsersUseCase(uow).execute(
        tenant_id, group_ids, shared_service_role_ids
    )
    return {"data": {"users": users}}


@router.get("/{tenant_user_id}", status_code=status.HTTP_200_OK)
async def get_tenant_user(
    tenant_id: UUID,
    tenant_user_id: UUID,
    expand: Optional[str] = Query(None, pattern=EXPAND_PATTERN),
    caller: CallerIdentity = Depends(TenantAccess()),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Tenant User

    `expand` is a comma separated subset of roles, groups and sharedServices.

    Raises:
        - 404 Not Found: Tenant user not found in the tenant
    """
    expanded = set(expand.split(",")) if expand else set()
    tenant_user = await GetTenantUserUseCase(uow).execute(
        tenant_id,
        tenant_user_id,
        include_roles="roles" in expanded,
        include_groups="groups" in expanded,
        include_shared_services="sharedServices" in expanded,
    )
    return {"data": {"tenantUser": tenant_user}}


@router.delete("/{tenant_user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_tenant_user(
    tenant_id: UUID,
    tenant_user_id: UUID,
    caller: CallerIdentity = Depends(TenantAccess(*USER_MANAGERS)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove User from Tenant

    Raises:
        - 404 Not Found: Tenant user not found in the tenant
        - 409 Conflict: The user is the last Tenant Owner
    """
    await RemoveTenantUserUseCase(uow).execute(
        tenant_id, tenant_user_id, removed_by=caller.subject
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
