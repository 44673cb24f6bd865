from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.api.schemas import (
    AddSharedServiceRolesRequest,
    AssociateSharedServiceRequest,
    CreateSharedServiceRequest,
    SharedServiceRoleRequest,
    UpdateGroupSharedServiceRolesRequest,
)
from src.api.utils.auth import TenantAccess, get_caller, require_operations_admin
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.shared_services import (
    AddSharedServiceRolesUseCase,
    AssociateSharedServiceUseCase,
    CreateSharedServiceCommand,
    CreateSharedServiceUseCase,
    GetEffectiveSharedServiceRolesUseCase,
    GetGroupSharedServiceRolesUseCase,
    GetSharedServicesUseCase,
    GetTenantSharedServicesUseCase,
    GetUserGroupsWithSharedServiceRolesUseCase,
    SharedServiceRoleSpec,
    SharedServiceRoleToggles,
    UpdateGroupSharedServiceRolesUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import RoleName
from src.domain.identity import CallerIdentity

router = APIRouter()

USER_MANAGERS = (RoleName.tenant_owner, RoleName.user_admin)
GROUP_ROLES_PATH = "/tenants/{tenant_id}/groups/{group_id}/shared-services/shared-service-roles"


def _role_spec(role: SharedServiceRoleRequest) -> SharedServiceRoleSpec:
    providers = role.allowed_identity_providers
    return SharedServiceRoleSpec(
        name=role.name,
        description=role.description,
        allowed_identity_providers=[p.value for p in providers] if providers else None,
    )


# ============================================================================
# Group role grants
# ============================================================================


@router.get(GROUP_ROLES_PATH, status_code=status.HTTP_200_OK)
async def get_group_shared_service_roles(
    tenant_id: UUID,
    group_id: UUID,
    caller: CallerIdentity = Depends(TenantAccess()),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Shared service roles available to a group

    Every role of every shared service associated with the tenant, flagged
    `enabled` when the group holds it.

    Raises:
        - 404 Not Found: Group not found in the tenant
    """
    shared_services = await GetGroupSharedServiceRolesUseCase(uow).execute(
        tenant_id, group_id
    )
    return {"data": {"sharedServices": shared_services}}


@router.put(GROUP_ROLES_PATH, status_code=status.HTTP_200_OK)
async def update_group_shared_service_roles(
    tenant_id: UUID,
    group_id: UUID,
    request: UpdateGroupSharedServiceRolesRequest,
    caller: CallerIdentity = Depends(TenantAccess(*USER_MANAGERS)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Enable or disable shared service roles of a group

    Raises:
        - 404 Not Found: Group, shared service or role not found
    """
    toggles = [
        SharedServiceRoleToggles.model_validate(service.model_dump())
        for service in request.shared_services
    ]
    shared_services = await UpdateGroupSharedServiceRolesUseCase(uow).execute(
        tenant_id, group_id, toggles, updated_by=caller.subject
    )
    return {"data": {"sharedServices": shared_services}}


@router.get(
    "/tenants/{tenant_id}/users/{sso_user_id}/groups/shared-service-roles",
    status_code=status.HTTP_200_OK,
)
async def get_user_groups_with_shared_service_roles(
    tenant_id: UUID,
    sso_user_id: str,
    caller: CallerIdentity = Depends(TenantAccess(shared_service=True)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Groups of an SSO user with the roles they grant for the calling service

    Raises:
        - 404 Not Found: User is not a member of the tenant
    """
    groups = await GetUserGroupsWithSharedServiceRolesUseCase(uow).execute(
        tenant_id, sso_user_id, caller.audience
    )
    return {"data": {"groups": groups}}


@router.get(
    "/tenants/{tenant_id}/ssousers/{sso_user_id}/shared-service-roles",
    status_code=status.HTTP_200_OK,
)
async def get_effective_shared_service_roles(
    tenant_id: UUID,
    sso_user_id: str,
    caller: CallerIdentity = Depends(TenantAccess(shared_service=True)),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Effective shared service roles of an SSO user for the calling service

    Raises:
        - 404 Not Found: User is not a member of the tenant
    """
    roles = await GetEffectiveSharedServiceRolesUseCase(uow).execute(
        tenant_id, sso_user_id, caller.audience
    )
    return {"data": {"sharedServiceRoles": roles}}


# ============================================================================
# Administration
# ============================================================================


@router.post("/shared-services", status_code=status.HTTP_201_CREATED)
async def create_shared_service(
    request: CreateSharedServiceRequest,
    caller: CallerIdentity = Depends(require_operations_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register Shared Service

    Raises:
        - 403 Forbidden: Caller is not an operations admin
        - 409 Conflict: Name or client identifier already used
    """
    command = CreateSharedServiceCommand(
        name=request.name,
        client_identifier=request.client_identifier,
        description=request.description,
        is_active=request.is_active,
        roles=[_role_spec(role) for role in request.roles],
    )
    shared_service = await CreateSharedServiceUseCase(uow).execute(
        command, created_by=caller.subject
    )
    return {"data": {"sharedService": shared_service}}


@router.post(
    "/shared-services/{shared_service_id}/shared-service-roles",
    status_code=status.HTTP_201_CREATED,
)
async def add_shared_service_roles(
    shared_service_id: UUID,
    request: AddSharedServiceRolesRequest,
    caller: CallerIdentity = Depends(require_operations_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Add roles to a Shared Service

    Raises:
        - 404 Not Found: Active shared service not found
        - 409 Conflict: Role name already used by the service
    """
    shared_service = await AddSharedServiceRolesUseCase(uow).execute(
        shared_service_id,
        [_role_spec(role) for role in request.roles],
        created_by=caller.subject,
    )
    return {"data": {"sharedService": shared_service}}


@router.get("/shared-services", status_code=status.HTTP_200_OK)
async def get_shared_services(
    caller: CallerIdentity = Depends(get_caller),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Active shared services with their roles"""
    shared_services = await GetSharedServicesUseCase(uow).execute()
    return {"data": {"sharedServices": shared_services}}


@router.post(
    "/tenants/{tenant_id}/shared-services", status_code=status.HTTP_201_CREATED
)
async def associate_shared_service(
    tenant_id: UUID,
    request: AssociateSharedServiceRequest,
    caller: CallerIdentity = Depends(require_operations_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Associate a Shared Service with a Tenant

    Raises:
        - 403 Forbidden: Caller is not an operations admin
        - 404 Not Found: Tenant or shared service not found
        - 409 Conflict: Service inactive or already associated
    """
    await AssociateSharedServiceUseCase(uow).execute(
        tenant_id, request.shared_service_id, created_by=caller.subject
    )
    return Response(status_code=status.HTTP_201_CREATED)


@router.get("/tenants/{tenant_id}/shared-services", status_code=status.HTTP_200_OK)
async def get_tenant_shared_services(
    tenant_id: UUID,
    caller: CallerIdentity = Depends(TenantAccess()),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Shared services associated with the tenant"""
    shared_services = await GetTenantSharedServicesUseCase(uow).execute(tenant_id)
    return {"data": {"sharedServices": shared_services}}
