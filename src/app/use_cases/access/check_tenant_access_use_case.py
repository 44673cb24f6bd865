"""
Check Tenant Access Use Case

Decides whether a caller may act on a tenant.
"""

import logging
from typing import Iterable
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.identity import CallerIdentity, SystemIdentity
from src.domain.errors import ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


class CheckTenantAccessUseCase:
    """
    Use case for gating tenant-scoped operations.

    Business Rules:
    - A shared service caller (audience other than the system's own) needs an
      active shared service whose client identifier is the audience and which
      is actively associated with the tenant
    - Every caller's subject must map to an active member of the tenant
    - When roles are required, the membership must hold one of them
    - Read only; any missing claim or row denies access
    """

    def __init__(self, uow: UnitOfWork, system: SystemIdentity):
        self.uow = uow
        self.system = system

    async def execute(
        self,
        tenant_id: UUID,
        caller: CallerIdentity,
        required_roles: Iterable[str] = (),
    ) -> None:
        required_roles = list(required_roles)

        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                raise NotFoundError(f"Tenant not found: {tenant_id}")

            if caller.is_shared_service(self.system):
                available = await self.uow.shared_services.is_available_to_tenant(
                    tenant_id, caller.audience
                )
                if not available:
                    logger.info(
                        f"Shared service {caller.audience} denied access to tenant {tenant_id}"
                    )
                    raise ForbiddenError(
                        "Shared service does not have access to this tenant"
                    )

            if not caller.subject:
                raise ForbiddenError("Access denied: caller identity is missing")

            if not await self.uow.tenant_users.has_access(
                tenant_id, caller.subject, required_roles
            ):
                if required_roles:
                    raise ForbiddenError(
                        "Access denied: user does not have the required role(s) in this tenant"
                    )
                raise ForbiddenError("Access denied: user is not a member of this tenant")
