"""
Shared service administration use cases.
"""

import logging
from typing import List, Optional
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import SharedServiceResponse, SharedServiceRoleResponse
from src.domain.entities import SharedService, SharedServiceRole, TenantSharedService
from src.domain.errors import ConflictError, NotFoundError

from .dtos import CreateSharedServiceCommand, SharedServiceRoleSpec

logger = logging.getLogger(__name__)


async def _with_roles(
    uow: UnitOfWork, services: List[SharedService]
) -> List[SharedServiceResponse]:
    roles = await uow.shared_services.list_roles([service.id for service in services])
    return [
        SharedServiceResponse(
            **service.model_dump(),
            roles=[
                SharedServiceRoleResponse.model_validate(role)
                for role in roles
                if role.shared_service_id == service.id
            ],
        )
        for service in services
    ]


async def _create_roles(
    uow: UnitOfWork,
    shared_service: SharedService,
    specs: List[SharedServiceRoleSpec],
    created_by: Optional[str],
) -> None:
    seen = set()
    for spec in specs:
        if spec.name in seen or await uow.shared_services.get_role_by_name(
            shared_service.id, spec.name
        ):
            raise ConflictError(
                f"Role '{spec.name}' already exists for shared service {shared_service.name}"
            )
        seen.add(spec.name)
        await uow.shared_services.create_role(
            SharedServiceRole(
                name=spec.name,
                description=spec.description,
                allowed_identity_providers=spec.allowed_identity_providers,
                shared_service_id=shared_service.id,
                created_by=created_by,
                updated_by=created_by,
            )
        )


class CreateSharedServiceUseCase:
    """
    Register a shared service with its initial roles.

    Name and client identifier are both unique.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, command: CreateSharedServiceCommand, created_by: Optional[str]
    ) -> SharedServiceResponse:
        async with self.uow:
            clash = await self.uow.shared_services.get_by_name_or_client_identifier(
                command.name, command.client_identifier
            )
            if clash is not None:
                raise ConflictError(
                    "A shared service with the same name or client identifier already exists"
                )

            shared_service = await self.uow.shared_services.create(
                SharedService(
                    name=command.name,
                    client_identifier=command.client_identifier,
                    description=command.description,
                    is_active=command.is_active,
                    created_by=created_by,
                    updated_by=created_by,
                )
            )
            await _create_roles(self.uow, shared_service, command.roles, created_by)
            (response,) = await _with_roles(self.uow, [shared_service])

            await self.uow.commit()
            logger.info(f"Registered shared service {shared_service.name}")
            return response


class AddSharedServiceRolesUseCase:
    """Add roles to an active shared service; duplicate names are a Conflict."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        shared_service_id: UUID,
        roles: List[SharedServiceRoleSpec],
        created_by: Optional[str],
    ) -> SharedServiceResponse:
        async with self.uow:
            shared_service = await self.uow.shared_services.get_by_id(shared_service_id)
            if shared_service is None or not shared_service.is_active:
                raise NotFoundError(f"Shared service not found: {shared_service_id}")

            await _create_roles(self.uow, shared_service, roles, created_by)
            (response,) = await _with_roles(self.uow, [shared_service])

            await self.uow.commit()
            return response


class GetSharedServicesUseCase:
    """All active shared services with their roles."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> List[SharedServiceResponse]:
        async with self.uow:
            services = await self.uow.shared_services.list_active()
            return await _with_roles(self.uow, services)


class GetTenantSharedServicesUseCase:
    """Active shared services actively associated with a tenant."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, tenant_id: UUID) -> List[SharedServiceResponse]:
        async with self.uow:
            services = await self.uow.shared_services.list_for_tenant(tenant_id)
            return await _with_roles(self.uow, services)


class AssociateSharedServiceUseCase:
    """
    Use case for allowing a tenant to use a shared service.

    Business Rules:
    - Tenant and shared service must exist
    - An inactive shared service cannot be associated
    - An active association is a Conflict; a removed one is restored
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, tenant_id: UUID, shared_service_id: UUID, created_by: Optional[str]
    ) -> None:
        async with self.uow:
            if await self.uow.tenants.get_by_id(tenant_id) is None:
                raise NotFoundError(f"Tenant not found: {tenant_id}")
            shared_service = await self.uow.shared_services.get_by_id(shared_service_id)
            if shared_service is None:
                raise NotFoundError(f"Shared service not found: {shared_service_id}")
            if not shared_service.is_active:
                raise ConflictError(f"Shared service {shared_service.name} is not active")

            association = await self.uow.shared_services.get_tenant_association(
                tenant_id, shared_service_id
            )
            if association is None:
                association = TenantSharedService(
                    tenant_id=tenant_id,
                    shared_service_id=shared_service_id,
                    created_by=created_by,
                    updated_by=created_by,
                )
            elif not association.is_deleted:
                raise ConflictError(
                    f"Shared service {shared_service.name} is already associated with this tenant"
                )
            else:
                association.is_deleted = False
                association.touch(created_by)
            await self.uow.shared_services.save_tenant_association(association)

            await self.uow.commit()
