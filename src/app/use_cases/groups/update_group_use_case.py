from typing import Optional
from uuid import UUID

from src.app.services.read_models import resolve_creator_names
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import GroupResponse
from src.domain.errors import ConflictError, NotFoundError

from .dtos import UpdateGroupCommand


class UpdateGroupUseCase:
    """
    Use case for renaming or describing a group.

    Business Rules:
    - The group must belong to the tenant
    - A new name must not collide with another group of the tenant
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tenant_id: UUID,
        group_id: UUID,
        command: UpdateGroupCommand,
        updated_by: Optional[str],
    ) -> GroupResponse:
        async with self.uow:
            group = await self.uow.groups.get_in_tenant(tenant_id, group_id)
            if group is None:
                raise NotFoundError(f"Group not found: {group_id}")

            changes = command.model_dump(exclude_unset=True, exclude_none=True)
            if "name" in changes:
                clash = await self.uow.groups.get_by_name(
                    tenant_id, changes["name"], exclude_id=group_id
                )
                if clash is not None:
                    raise ConflictError(
                        f"A group with name '{changes['name']}' already exists in this tenant"
                    )

            for field, value in changes.items():
                setattr(group, field, value)
            group.touch(updated_by)
            group = await self.uow.groups.update(group)
            (response,) = await resolve_creator_names(
                self.uow, [GroupResponse.model_validate(group)]
            )

            await self.uow.commit()
            return response
