from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import NotFoundError

from .dtos import GroupSharedServiceView
from .group_role_view import load_group_role_view


class GetGroupSharedServiceRolesUseCase:
    """Shared service roles available to a group, flagged `enabled` when granted."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID, group_id: UUID) -> List[GroupSharedServiceView]:
        async with self.uow:
            group = await self.uow.groups.get_in_tenant(tenant_id, group_id)
            if group is None:
                raise NotFoundError(f"Group not found: {group_id}")
            return await load_group_role_view(self.uow, tenant_id, group.id)
