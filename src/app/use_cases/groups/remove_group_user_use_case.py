from typing import Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.errors import NotFoundError


class RemoveGroupUserUseCase:
    """Soft delete an active group membership row of a tenant's group."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tenant_id: UUID,
        group_id: UUID,
        group_user_id: UUID,
        removed_by: Optional[str],
    ) -> None:
        async with self.uow:
            group = await self.uow.groups.get_in_tenant(tenant_id, group_id)
            if group is None:
                raise NotFoundError(f"Group not found: {group_id}")

            group_user = await self.uow.groups.get_active_group_user(group_id, group_user_id)
            if group_user is None:
                raise NotFoundError(f"Group user not found: {group_user_id}")

            group_user.is_deleted = True
            group_user.touch(removed_by)
            await self.uow.groups.update_group_user(group_user)

            await self.uow.commit()
