from src.app.services.tenant_provisioning import TenantProvisioningService
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TenantRequest
from src.domain.errors import ConflictError

from .dtos import CreateTenantRequestCommand, TenantRequestResponse
from .read_model import build_tenant_requests


class CreateTenantRequestUseCase:
    """
    Use case for asking operations admins to create a tenant.

    Business Rules:
    - A tenant with the same name and ministry must not already exist
    - The requester's SSO user is resolved or created
    - New requests start in NEW
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateTenantRequestCommand) -> TenantRequestResponse:
        async with self.uow:
            existing = await self.uow.tenants.get_by_name_and_ministry(
                command.name, command.ministry_name
            )
            if existing is not None:
                raise ConflictError(
                    f"A tenant with name '{command.name}' and ministry name "
                    f"'{command.ministry_name}' already exists"
                )

            created_by = command.requester.sso_user_id
            requester = await TenantProvisioningService(self.uow).resolve_sso_user(
                command.requester, created_by
            )
            tenant_request = await self.uow.tenant_requests.create(
                TenantRequest(
                    name=command.name,
                    ministry_name=command.ministry_name,
                    description=command.description,
                    requested_by=requester.id,
                    created_by=created_by,
                    updated_by=created_by,
                )
            )
            (response,) = await build_tenant_requests(self.uow, [tenant_request])

            await self.uow.commit()
            return response
