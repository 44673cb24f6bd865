"""
Tenant Management Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    ROLE_DESCRIPTIONS,
    SERVICE_USER_ONLY_PROVIDERS,
    IdentityProvider,
    RoleName,
    TenantRequestStatus,
)

# Export all entities
from .sso_user import SsoUser
from .tenant import Tenant
from .role import Role
from .tenant_user import TenantUser, TenantUserRole
from .group import Group, GroupUser
from .shared_service import (
    GroupSharedServiceRole,
    SharedService,
    SharedServiceRole,
    TenantSharedService,
)
from .tenant_request import TenantRequest

__all__ = [
    # Enums
    "ROLE_DESCRIPTIONS",
    "SERVICE_USER_ONLY_PROVIDERS",
    "IdentityProvider",
    "RoleName",
    "TenantRequestStatus",
    # Entities
    "SsoUser",
    "Tenant",
    "Role",
    "TenantUser",
    "TenantUserRole",
    "Group",
    "GroupUser",
    "SharedService",
    "SharedServiceRole",
    "TenantSharedService",
    "GroupSharedServiceRole",
    "TenantRequest",
]
