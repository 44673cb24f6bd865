from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.schemas import CreateTenantRequest, UpdateTenantRequest
from src.api.utils.auth import TenantAccess, get_caller, get_service_caller
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tenants import (
    CreateTenantCommand,
    CreateTenantUseCase,
    GetTenantsForUserUseCase,
    GetTenantUseCase,
    UpdateTenantCommand,
    UpdateTenantUseCase,
)
from src.depends import get_system_identity, get_unit_of_work
from src.domain.entities import RoleName
from src.domain.identity import CallerIdentity, SystemIdentity

router = APIRouter()

EXPAND_MEMBERS = "tenantUserRoles"


@router.post("/tenants", status_code=status.HTTP_201_CREATED)
async def create_tenant(
    request: CreateTenantRequest,
    caller: CallerIdentity = Depends(get_caller),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Tenant

    The user in the payload becomes the founding member holding the Tenant
    Owner, User Admin and Service User roles.

    Raises:
        - 400 Bad Request: Invalid payload
        - 401 Unauthorized: Missing/invalid token or non government identity provider
        - 409 Conflict: Tenant with the same name and ministry exists
    """
    command = CreateTenantCommand(
        name=request.name,
        ministry_name=request.ministry_name,
        description=request.description,
        user=request.user.to_profile(),
    )
    tenant = await CreateTenantUseCase(uow).execute(command, created_by=caller.subject)
    return {"data": {"tenant": tenant}}


@router.get("/tenants/{tenant_id}", status_code=status.HTTP_200_OK)
async def get_tenant(
    tenant_id: UUID,
    expand: Optional[str] = Query(None, pattern=f"^({EXPAND_MEMBERS})?$"),
    caller: CallerIdentity = Depends(TenantAccess()),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Tenant

    `expand=tenantUserRoles` includes the active members and their roles.

    Raises:
        - 403 Forbidden: Caller is not a member of the tenant
        - 404 Not Found: Tenant not found
    """
    use_case = GetTenantUseCase(uow)
    if expand == EXPAND_MEMBERS:
        tenant = await use_case.execute_with_members(tenant_id)
    else:
        tenant = await use_case.execute(tenant_id)
    return {"data": {"tenant": tenant}}


@router.put("/tenants/{tenant_id}", status_code=status.HTTP_200_OK)
async def update_tenant(
    tenant_id: UUID,
    request: UpdateTenantRequest,
    caller: CallerIdentity = Depends(TenantAccess(RoleName.tenant_owner)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Tenant

    Raises:
        - 403 Forbidden: Caller is not a Tenant Owner
        - 404 Not Found: Tenant not found
        - 409 Conflict: Another tenant has the same name and ministry
    """
    command = UpdateTenantCommand(**request.model_dump(exclude_unset=True))
    tenant = await UpdateTenantUseCase(uow).execute(
        tenant_id, command, updated_by=caller.subject
    )
    return {"data": {"tenant": tenant}}


@router.get("/users/{sso_user_id}/tenants", status_code=status.HTTP_200_OK)
async def get_tenants_for_user(
    sso_user_id: str,
    expand: Optional[str] = Query(None, pattern=f"^({EXPAND_MEMBERS})?$"),
    caller: CallerIdentity = Depends(get_service_caller),
    system: SystemIdentity = Depends(get_system_identity),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Tenants the SSO user actively belongs to

    A shared service caller only sees tenants associated with its service.
    """
    tenants = await GetTenantsForUserUseCase(uow, system).execute(
        sso_user_id, caller, with_members=expand == EXPAND_MEMBERS
    )
    return {"data": {"tenants": tenants}}
