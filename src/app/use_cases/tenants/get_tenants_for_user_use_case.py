from typing import List

from src.app.services.read_models import build_tenants
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import TenantResponse
from src.domain.identity import CallerIdentity, SystemIdentity


class GetTenantsForUserUseCase:
    """
    List the tenants an SSO user actively belongs to.

    A shared service caller only sees tenants actively associated with its
    own active service.
    """

    def __init__(self, uow: UnitOfWork, system: SystemIdentity):
        self.uow = uow
        self.system = system

    async def execute(
        self, sso_user_id: str, caller: CallerIdentity, with_members: bool = False
    ) -> List[TenantResponse]:
        client_identifier = (
            caller.audience if caller.is_shared_service(self.system) else None
        )
        async with self.uow:
            tenants = await self.uow.tenants.list_for_sso_user(sso_user_id, client_identifier)
            return await build_tenants(self.uow, tenants, with_members)
