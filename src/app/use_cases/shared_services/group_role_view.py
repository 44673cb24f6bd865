from typing import Dict, List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork

from .dtos import GroupSharedServiceRoleView, GroupSharedServiceView


async def load_group_role_view(
    uow: UnitOfWork, tenant_id: UUID, group_id: UUID
) -> List[GroupSharedServiceView]:
    """
    Every role of every shared service available to the tenant, flagged
    with whether the group currently holds it. Both levels are sorted by
    name, case-sensitive.
    """
    services = await uow.shared_services.list_for_tenant(tenant_id)
    roles = await uow.shared_services.list_roles([service.id for service in services])
    enabled = {
        grant.shared_service_role_id
        for grant in await uow.shared_services.list_group_grants(group_id)
        if not grant.is_deleted
    }

    roles_by_service: Dict[UUID, List[GroupSharedServiceRoleView]] = {}
    for role in sorted(roles, key=lambda r: r.name):
        roles_by_service.setdefault(role.shared_service_id, []).append(
            GroupSharedServiceRoleView(
                id=role.id,
                name=role.name,
                description=role.description,
                allowed_identity_providers=role.allowed_identity_providers,
                enabled=role.id in enabled,
            )
        )

    return [
        GroupSharedServiceView(
            id=service.id,
            name=service.name,
            client_identifier=service.client_identifier,
            description=service.description,
            shared_service_roles=roles_by_service.get(service.id, []),
        )
        for service in sorted(services, key=lambda s: s.name)
    ]
