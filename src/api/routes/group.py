from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from src.api.schemas import AddGroupUserRequest, CreateGroupRequest, UpdateGroupRequest
from src.api.utils.auth import TenantAccess
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.groups import (
    AddGroupUserCommand,
    AddGroupUserUseCase,
    CreateGroupCommand,
    CreateGroupUseCase,
    GetGroupUseCase,
    GetTenantGroupsUseCase,
    RemoveGroupUserUseCase,
    UpdateGroupCommand,
    UpdateGroupUseCase,
)
from src.depends import get_system_identity, get_unit_of_work
from src.domain.entities import RoleName
from src.domain.identity import CallerIdentity, SystemIdentity

router = APIRouter(prefix="/tenants/{tenant_id}/groups")

USER_MANAGERS = (RoleName.tenant_owner, RoleName.user_admin)
EXPAND_MEMBERS = "groupUsers"


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_group(
    tenant_id: UUID,
    request: CreateGroupRequest,
    caller: CallerIdentity = Depends(TenantAccess(*USER_MANAGERS)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Group

    Raises:
        - 404 Not Found: Tenant or initial tenant user not found
        - 409 Conflict: Group name already used in the tenant
    """
    command = CreateGroupCommand(
        name=request.name,
        description=request.description,
        tenant_user_id=request.tenant_user_id,
    )
    group = await CreateGroupUseCase(uow).execute(
        tenant_id, command, created_by=caller.subject
    )
    return {"data": {"group": group}}


@router.get("", status_code=status.HTTP_200_OK)
async def get_tenant_groups(
    tenant_id: UUID,
    caller: CallerIdentity = Depends(TenantAccess(shared_service=True)),
    system: SystemIdentity = Depends(get_system_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Groups of the tenant visible to the caller"""
    groups = await GetTenantGroupsUseCase(uow, system).execute(tenant_id, caller)
    return {"data": {"groups": groups}}


@router.get("/{group_id}", status_code=status.HTTP_200_OK)
async def get_group(
    tenant_id: UUID,
    group_id: UUID,
    expand: Optional[str] = Query(None, pattern=f"^({EXPAND_MEMBERS})?$"),
    caller: CallerIdentity = Depends(TenantAccess()),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Group

    `expand=groupUsers` includes the active group members.

    Raises:
        - 404 Not Found: Group not found in the tenant
    """
    use_case = GetGroupUseCase(uow)
    if expand == EXPAND_MEMBERS:
        group = await use_case.execute_with_members(tenant_id, group_id)
    else:
        group = await use_case.execute(tenant_id, group_id)
    return {"data": {"group": group}}


@router.put("/{group_id}", status_code=status.HTTP_200_OK)
async def update_group(
    tenant_id: UUID,
    group_id: UUID,
    request: UpdateGroupRequest,
    caller: CallerIdentity = Depends(TenantAccess(*USER_MANAGERS)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Group

    Raises:
        - 404 Not Found: Group not found in the tenant
        - 409 Conflict: Group name already used in the tenant
    """
    command = UpdateGroupCommand(**request.model_dump(exclude_unset=True))
    group = await UpdateGroupUseCase(uow).execute(
        tenant_id, group_id, command, updated_by=caller.subject
    )
    return {"data": {"group": group}}


@router.post("/{group_id}/users", status_code=status.HTTP_201_CREATED)
async def add_group_user(
    tenant_id: UUID,
    group_id: UUID,
    request: AddGroupUserRequest,
    caller: CallerIdentity = Depends(TenantAccess(*USER_MANAGERS)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add User to Group

    A user who is not yet a member joins the tenant as a Service User.

    Raises:
        - 404 Not Found: Tenant or group not found
        - 409 Conflict: User is already a member of the group
    """
    command = AddGroupUserCommand(user=request.user.to_profile())
    group_user = await AddGroupUserUseCase(uow).execute(
        tenant_id, group_id, command, created_by=caller.subject
    )
    return {"data": {"groupUser": group_user}}


@router.delete(
    "/{group_id}/users/{group_user_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def remove_group_user(
    tenant_id: UUID,
    group_id: UUID,
    group_user_id: UUID,
    caller: CallerIdentity = Depends(TenantAccess(*USER_MANAGERS)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove User from Group

    Raises:
        - 404 Not Found: Group or active group user not found
    """
    await RemoveGroupUserUseCase(uow).execute(
        tenant_id, group_id, group_user_id, removed_by=caller.subject
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
