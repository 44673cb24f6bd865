from uuid import UUID

from src.app.services.read_models import resolve_creator_names
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import GroupResponse, SsoUserResponse
from src.domain.errors import NotFoundError

from .dtos import GroupMemberResponse, GroupWithMembersResponse


class GetGroupUseCase:
    """Fetch a tenant's group, optionally with its active members."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def _get(self, tenant_id: UUID, group_id: UUID):
        group = await self.uow.groups.get_in_tenant(tenant_id, group_id)
        if group is None:
            raise NotFoundError(f"Group not found: {group_id}")
        return group

    async def execute(self, tenant_id: UUID, group_id: UUID) -> GroupResponse:
        async with self.uow:
            group = await self._get(tenant_id, group_id)
            (response,) = await resolve_creator_names(
                self.uow, [GroupResponse.model_validate(group)]
            )
            return response

    async def execute_with_members(
        self, tenant_id: UUID, group_id: UUID
    ) -> GroupWithMembersResponse:
        async with self.uow:
            group = await self._get(tenant_id, group_id)
            members = await self.uow.groups.list_members(group.id)
            response = GroupWithMembersResponse(
                **group.model_dump(),
                group_users=[
                    GroupMemberResponse(
                        **group_user.model_dump(),
                        sso_user=SsoUserResponse.model_validate(sso_user),
                    )
                    for group_user, sso_user in members
                ],
            )
            (response,) = await resolve_creator_names(self.uow, [response])
            return response
