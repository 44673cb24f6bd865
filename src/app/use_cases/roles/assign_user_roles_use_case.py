"""
Assign User Roles Use Case
"""

from typing import List, Optional
from uuid import UUID

from src.app.services.membership import MembershipService
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import RoleResponse, TenantUserRoleResponse
from src.domain.errors import NotFoundError


class AssignUserRolesUseCase:
    """
    Use case for assigning roles to a tenant member.

    Business Rules:
    - The membership must belong to the tenant, otherwise NotFound
    - Roles already held are skipped; if none remain, Conflict
    - Every remaining role must exist (global or the tenant's own), otherwise
      NotFound and nothing in the batch is persisted
    - A previously unassigned row is reactivated instead of duplicated
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        tenant_id: UUID,
        tenant_user_id: UUID,
        role_ids: List[UUID],
        assigned_by: Optional[str],
    ) -> List[TenantUserRoleResponse]:
        async with self.uow:
            tenant_user = await self.uow.tenant_users.get_active(tenant_id, tenant_user_id)
            if tenant_user is None:
                raise NotFoundError(f"Tenant user not found: {tenant_user_id}")

            assigned = await MembershipService(self.uow).assign_roles(
                tenant_user, role_ids, assigned_by
            )
            response = [
                TenantUserRoleResponse(
                    **assignment.model_dump(), role=RoleResponse.model_validate(role)
                )
                for assignment, role in assigned
            ]

            await self.uow.commit()
            return response
