"""
Create Group Use Case
"""

from typing import Optional
from uuid import UUID

from src.app.services.membership import MembershipService
from src.app.services.read_models import resolve_creator_names
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import GroupResponse
from src.domain.entities import Group
from src.domain.errors import ConflictError, NotFoundError

from .dtos import CreateGroupCommand


class CreateGroupUseCase:
    """
    Use case for creating a group in a tenant.

    Business Rules:
    - Unknown tenant is NotFound
    - Group names are unique within the tenant
    - An initial member must be an active member of the tenant
    - The group and its initial member are written in one transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, command: CreateGroupCommand, created_by: Optional[str]
    ) -> GroupResponse:
        async with self.uow:
            tenant = await self.uow.tenants.get_by_id(tenant_id)
            if tenant is None:
                raise NotFoundError(f"Tenant not found: {tenant_id}")

            if await self.uow.groups.get_by_name(tenant_id, command.name) is not None:
                raise ConflictError(
                    f"A group with name '{command.name}' already exists in this tenant"
                )

            tenant_user = None
            if command.tenant_user_id is not None:
                tenant_user = await self.uow.tenant_users.get_active(
                    tenant_id, command.tenant_user_id
                )
                if tenant_user is None:
                    raise NotFoundError(f"Tenant user not found: {command.tenant_user_id}")

            group = await self.uow.groups.create(
                Group(
                    name=command.name,
                    description=command.description,
                    tenant_id=tenant_id,
                    created_by=created_by,
                    updated_by=created_by,
                )
            )
            if tenant_user is not None:
                await MembershipService(self.uow).add_to_group(group.id, tenant_user, created_by)

            (response,) = await resolve_creator_names(
                self.uow, [GroupResponse.model_validate(group)]
            )

            await self.uow.commit()
            return response
