from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.api.schemas import AssignRolesRequest, CreateTenantRoleRequest
from src.api.utils.auth import TenantAccess, get_caller
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.roles import (
    AssignUserRolesUseCase,
    CreateTenantRoleUseCase,
    GetRolesUseCase,
    GetSsoUserRolesUseCase,
    GetTenantRolesUseCase,
    GetUserRolesUseCase,
    UnassignUserRoleUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import RoleName
from src.domain.identity import CallerIdentity

router = APIRouter()

USER_MANAGERS = (RoleName.tenant_owner, RoleName.user_admin)


@router.get("/roles", status_code=status.HTTP_200_OK)
async def get_roles(
    caller: CallerIdentity = Depends(get_caller),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Global roles"""
    roles = await GetRolesUseCase(uow).execute()
    return {"data": {"roles": roles}}


@router.get("/tenants/{tenant_id}/roles", status_code=status.HTTP_200_OK)
async def get_tenant_roles(
    tenant_id: UUID,
    caller: CallerIdentity = Depends(TenantAccess()),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Global roles and the tenant's own roles"""
    roles = await GetTenantRolesUseCase(uow).execute(tenant_id)
    return {"data": {"roles": roles}}


@router.post("/tenants/{tenant_id}/roles", status_code=status.HTTP_201_CREATED)
async def create_tenant_role(
    tenant_id: UUID,
    request: CreateTenantRoleRequest,
    caller: CallerIdentity = Depends(TenantAccess(*USER_MANAGERS)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Tenant Role

    Raises:
        - 404 Not Found: Tenant not found
        - 409 Conflict: Role name already used
    """
    role = await CreateTenantRoleUseCase(uow).execute(
        tenant_id,
        request.role.name,
        request.role.description,
        created_by=caller.subject,
    )
    return {"data": {"role": role}}


@router.post(
    "/tenants/{tenant_id}/users/{tenant_user_id}/roles",
    status_code=status.HTTP_201_CREATED,
)
async def assign_user_roles(
    tenant_id: UUID,
    tenant_user_id: UUID,
    request: AssignRolesRequest,
    caller: CallerIdentity = Depends(TenantAccess(*USER_MANAGERS)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Assign Roles to Tenant User

    The batch is all or nothing.

    Raises:
        - 404 Not Found: Tenant user or role not found
        - 409 Conflict: All roles are already assigned
    """
    roles = await AssignUserRolesUseCase(uow).execute(
        tenant_id, tenant_user_id, request.roles, assigned_by=caller.subject
    )
    return {"data": {"roles": roles}}


@router.get(
    "/tenants/{tenant_id}/users/{tenant_user_id}/roles",
    status_code=status.HTTP_200_OK,
)
async def get_user_roles(
    tenant_id: UUID,
    tenant_user_id: UUID,
    caller: CallerIdentity = Depends(TenantAccess()),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    roles = await GetUserRolesUseCase(uow).execute(tenant_id, tenant_user_id)
    return {"data": {"roles": roles}}


@router.delete(
    "/tenants/{tenant_id}/users/{tenant_user_id}/roles/{role_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def unassign_user_role(
    tenant_id: UUID,
    tenant_user_id: UUID,
    role_id: UUID,
    caller: CallerIdentity = Depends(TenantAccess(*USER_MANAGERS)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Unassign Role from Tenant User

    Raises:
        - 404 Not Found: Role is not assigned to the user
        - 409 Conflict: Last Tenant Owner of the tenant or last role of the user
    """
    await UnassignUserRoleUseCase(uow).execute(
        tenant_id, tenant_user_id, role_id, unassigned_by=caller.subject
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/tenants/{tenant_id}/ssousers/{sso_user_id}/roles",
    status_code=status.HTTP_200_OK,
)
async def get_sso_user_roles(
    tenant_id: UUID,
    sso_user_id: str,
    caller: CallerIdentity = Depends(TenantAccess()),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Active roles of an SSO user in the tenant, empty when not a member"""
    roles = await GetSsoUserRolesUseCase(uow).execute(tenant_id, sso_user_id)
    return {"data": {"roles": roles}}
