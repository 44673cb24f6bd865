from typing import List

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import TenantRequest

from .dtos import TenantRequestResponse


async def build_tenant_requests(
    uow: UnitOfWork, requests: List[TenantRequest]
) -> List[TenantRequestResponse]:
    user_ids = {r.requested_by for r in requests} | {
        r.decisioned_by for r in requests if r.decisioned_by
    }
    users = await uow.sso_users.list_by_ids(list(user_ids))
    names = {user.id: user.display_name for user in users}

    return [
        TenantRequestResponse(
            **request.model_dump(exclude={"requested_by", "decisioned_by"}),
            requested_by=names.get(request.requested_by),
            decisioned_by=names.get(request.decisioned_by),
        )
        for request in requests
    ]
