from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.api.schemas import CreateTenantRequestRequest, UpdateTenantRequestStatusRequest
from src.api.utils.auth import caller_profile, get_caller, require_operations_admin
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.tenant_requests import (
    CreateTenantRequestCommand,
    CreateTenantRequestUseCase,
    DecideTenantRequestCommand,
    GetTenantRequestsUseCase,
    UpdateTenantRequestStatusUseCase,
)
from src.depends import get_unit_of_work
from src.domain.entities import TenantRequestStatus
from src.domain.identity import CallerIdentity

router = APIRouter(prefix="/tenant-requests")


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_tenant_request(
    request: CreateTenantRequestRequest,
    caller: CallerIdentity = Depends(get_caller),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Request a new Tenant

    Raises:
        - 400 Bad Request: Invalid payload
        - 409 Conflict: Tenant with the same name and ministry exists
    """
    command = CreateTenantRequestCommand(
        name=request.name,
        ministry_name=request.ministry_name,
        description=request.description,
        requester=request.user.to_profile(),
    )
    tenant_request = await CreateTenantRequestUseCase(uow).execute(command)
    return {"data": {"tenantRequest": tenant_request}}


@router.patch("/{request_id}/status", status_code=status.HTTP_200_OK)
async def update_tenant_request_status(
    request_id: UUID,
    request: UpdateTenantRequestStatusRequest,
    caller: CallerIdentity = Depends(require_operations_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Approve or reject a Tenant Request

    Approval provisions the tenant owned by the requester.

    Raises:
        - 400 Bad Request: Rejection without a reason
        - 403 Forbidden: Caller is not an operations admin
        - 404 Not Found: Tenant request not found
        - 409 Conflict: Request already decided or tenant already exists
    """
    command = DecideTenantRequestCommand(
        status=request.status,
        rejection_reason=request.rejection_reason,
        tenant_name=request.tenant_name,
        decider=caller_profile(caller),
    )
    decision = await UpdateTenantRequestStatusUseCase(uow).execute(request_id, command)

    data = {"tenantRequest": decision.tenant_request}
    if decision.tenant is not None:
        data["tenant"] = decision.tenant
    return {"data": data}


@router.get("", status_code=status.HTTP_200_OK)
async def get_tenant_requests(
    status_filter: Optional[TenantRequestStatus] = Query(None, alias="status"),
    caller: CallerIdentity = Depends(require_operations_admin),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Tenant requests, newest first"""
    tenant_requests = await GetTenantRequestsUseCase(uow).execute(status_filter)
    return {"data": {"tenantRequests": tenant_requests}}
