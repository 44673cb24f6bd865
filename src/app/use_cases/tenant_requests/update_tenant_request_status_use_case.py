"""
Update Tenant Request Status Use Case
"""

import logging
from uuid import UUID

from src.app.services.read_models import build_tenant
from src.app.services.tenant_provisioning import TenantProvisioningService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import TenantRequestStatus
from src.domain.errors import BadRequestError, ConflictError, NotFoundError

from .dtos import DecideTenantRequestCommand, TenantRequestDecisionResponse
from .read_model import build_tenant_requests

logger = logging.getLogger(__name__)


class UpdateTenantRequestStatusUseCase:
    """
    Use case for approving or rejecting a tenant request.

    Business Rules:
    - Unknown request is NotFound
    - Only NEW requests can be decided, otherwise Conflict
    - Rejection requires a reason
    - Approval creates the tenant owned by the requester, optionally under
      an overriding name; a clashing tenant is a Conflict and nothing changes
    - The decider's SSO user is resolved or created and stamped with the
      decision time, all in one transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, request_id: UUID, command: DecideTenantRequestCommand
    ) -> TenantRequestDecisionResponse:
        if command.status == TenantRequestStatus.NEW:
            raise BadRequestError("Status must be APPROVED or REJECTED")
        if command.status == TenantRequestStatus.REJECTED and not command.rejection_reason:
            raise BadRequestError("Rejection reason is required when rejecting a request")

        decided_by = command.decider.sso_user_id
        async with self.uow:
            tenant_request = await self.uow.tenant_requests.get_by_id(request_id)
            if tenant_request is None:
                raise NotFoundError(f"Tenant request not found: {request_id}")
            if not tenant_request.is_open():
                raise ConflictError(
                    f"Tenant request has already been {tenant_request.status.value.lower()}"
                )

            provisioning = TenantProvisioningService(self.uow)
            decider = await provisioning.resolve_sso_user(command.decider, decided_by)

            tenant_response = None
            if command.status == TenantRequestStatus.APPROVED:
                requester = await self.uow.sso_users.get_by_id(tenant_request.requested_by)
                if command.tenant_name:
                    tenant_request.name = command.tenant_name
                tenant, _, _ = await provisioning.provision_tenant(
                    tenant_request.name,
                    tenant_request.ministry_name,
                    tenant_request.description,
                    requester,
                    decided_by,
                )
                tenant_response = await build_tenant(self.uow, tenant, with_members=True)
            else:
                tenant_request.rejection_reason = command.rejection_reason

            tenant_request.status = command.status
            tenant_request.decisioned_by = decider.id
            tenant_request.decisioned_at = utc_now()
            tenant_request.touch(decided_by)
            tenant_request = await self.uow.tenant_requests.update(tenant_request)
            (request_response,) = await build_tenant_requests(self.uow, [tenant_request])

            await self.uow.commit()
            logger.info(f"Tenant request {request_id} {command.status.value}")
            return TenantRequestDecisionResponse(
                tenant_request=request_response, tenant=tenant_response
            )
