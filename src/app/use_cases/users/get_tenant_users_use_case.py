from typing import List, Optional
from uuid import UUID

from src.app.services.read_models import build_members
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import TenantUserResponse


class GetTenantUsersUseCase:
    """List the active members of a tenant with their active roles."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tenant_id: UUID,
        group_ids: Optional[List[UUID]] = None,
        shared_service_role_ids: Optional[List[UUID]] = None,
    ) -> List[TenantUserResponse]:
        async with self.uow:
            members = await self.uow.tenant_users.list_with_sso_users(
                tenant_id, group_ids, shared_service_role_ids
            )
            return await build_members(self.uow, members)
