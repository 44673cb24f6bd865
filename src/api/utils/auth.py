"""
Authorization dependencies for routes.

`get_caller` is for standard endpoints and only admits government employee
identity providers. `get_service_caller` also admits shared service callers.
"""

from uuid import UUID

from fastapi import Depends

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.access import CheckTenantAccessUseCase
from src.app.use_cases.dtos import SsoUserProfile
from src.depends import get_current_claims, get_system_identity, get_unit_of_work
from src.domain.errors import ForbiddenError, UnauthorizedError
from src.domain.identity import CallerIdentity, SystemIdentity


async def get_service_caller(claims: dict = Depends(get_current_claims)) -> CallerIdentity:
    return CallerIdentity.from_claims(claims)


async def get_caller(
    caller: CallerIdentity = Depends(get_service_caller),
    system: SystemIdentity = Depends(get_system_identity),
) -> CallerIdentity:
    if not caller.is_government_user(system):
        raise UnauthorizedError(
            f"Identity provider '{caller.identity_provider}' is not allowed for this endpoint"
        )
    return caller


async def require_operations_admin(
    caller: CallerIdentity = Depends(get_caller),
    system: SystemIdentity = Depends(get_system_identity),
) -> CallerIdentity:
    if not caller.has_client_role(system.operations_admin_role):
        raise ForbiddenError("Operations admin role is required")
    return caller


def caller_profile(caller: CallerIdentity) -> SsoUserProfile:
    """SSO profile of the caller, used when the caller itself must be recorded."""
    full_name = " ".join(name for name in (caller.given_name, caller.family_name) if name)
    return SsoUserProfile(
        sso_user_id=caller.subject,
        first_name=caller.given_name,
        last_name=caller.family_name,
        display_name=caller.display_name or full_name or caller.user_name or caller.subject,
        user_name=caller.user_name,
        email=caller.email,
        idp_type=caller.identity_provider or "idir",
    )


class TenantAccess:
    """
    Dependency gating a `{tenant_id}` route.

    TenantAccess(RoleName.tenant_owner, RoleName.user_admin) requires one of
    the roles; `shared_service=True` also admits shared service callers.
    """

    def __init__(self, *required_roles: str, shared_service: bool = False):
        self.required_roles = [getattr(role, "value", role) for role in required_roles]
        self.shared_service = shared_service

    async def __call__(
        self,
        tenant_id: UUID,
        caller: CallerIdentity = Depends(get_service_caller),
        system: SystemIdentity = Depends(get_system_identity),
        uow: UnitOfWork = Depends(get_unit_of_work),
    ) -> CallerIdentity:
        if not self.shared_service:
            caller = await get_caller(caller, system)
        await CheckTenantAccessUseCase(uow, system).execute(
            tenant_id, caller, self.required_roles
        )
        return caller
