"""
Tenant provisioning steps shared by tenant creation and tenant request
approval. Every method runs inside the caller's unit of work and never
commits on its own.
"""

import logging
from typing import Dict, List, Optional, Tuple

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.dtos import SsoUserProfile
from src.domain.entities import (
    ROLE_DESCRIPTIONS,
    Role,
    RoleName,
    SsoUser,
    Tenant,
    TenantUser,
    TenantUserRole,
)
from src.domain.errors import ConflictError

logger = logging.getLogger(__name__)


class TenantProvisioningService:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def resolve_sso_user(self, profile: SsoUserProfile, created_by: Optional[str]) -> SsoUser:
        """Look the identity up by subject id, creating it on first reference."""
        sso_user = await self.uow.sso_users.get_by_sso_user_id(profile.sso_user_id)
        if sso_user is not None:
            return sso_user

        sso_user = SsoUser(
            sso_user_id=profile.sso_user_id,
            first_name=profile.first_name,
            last_name=profile.last_name,
            display_name=profile.display_name,
            user_name=profile.user_name,
            email=profile.email,
            idp_type=profile.idp_type,
            created_by=created_by,
            updated_by=created_by,
        )
        return await self.uow.sso_users.create(sso_user)

    async def ensure_bootstrap_roles(self, created_by: Optional[str]) -> Dict[RoleName, Role]:
        """Return the global Service User, Tenant Owner and User Admin roles."""
        names = [role_name.value for role_name in RoleName]
        existing = {role.name: role for role in await self.uow.roles.find_by_names(names)}

        roles: Dict[RoleName, Role] = {}
        for role_name in RoleName:
            role = existing.get(role_name.value)
            if role is None:
                logger.info(f"Creating global role {role_name.value}")
                role = await self.uow.roles.create(
                    Role(
                        name=role_name.value,
                        description=ROLE_DESCRIPTIONS[role_name],
                        created_by=created_by,
                        updated_by=created_by,
                    )
                )
            roles[role_name] = role
        return roles

    async def provision_tenant(
        self,
        name: str,
        ministry_name: str,
        description: Optional[str],
        owner: SsoUser,
        created_by: Optional[str],
    ) -> Tuple[Tenant, TenantUser, List[Tuple[TenantUserRole, Role]]]:
        """
        Create a tenant owned by `owner` holding all three bootstrap roles.

        Raises:
            ConflictError: a tenant with the same name and ministry exists
        """
        duplicate = await self.uow.tenants.get_by_name_and_ministry(name, ministry_name)
        if duplicate is not None:
            raise ConflictError(
                f"A tenant with name '{name}' and ministry name '{ministry_name}' already exists"
            )

        tenant = await self.uow.tenants.create(
            Tenant(
                name=name,
                ministry_name=ministry_name,
                description=description,
                created_by=created_by,
                updated_by=created_by,
            )
        )
        tenant_user = await self.uow.tenant_users.create(
            TenantUser(
                tenant_id=tenant.id,
                sso_user_pk=owner.id,
                created_by=created_by,
                updated_by=created_by,
            )
        )

        roles = await self.ensure_bootstrap_roles(created_by)
        assignments = []
        for role in roles.values():
            assignment = await self.uow.tenant_user_roles.create(
                TenantUserRole(
                    tenant_user_id=tenant_user.id,
                    role_id=role.id,
                    created_by=created_by,
                    updated_by=created_by,
                )
            )
            assignments.append((assignment, role))

        logger.info(f"Provisioned tenant {tenant.id} for SSO user {owner.sso_user_id}")
        return tenant, tenant_user, assignments
