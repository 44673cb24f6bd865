"""
Tenant Management Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class RoleName(str, Enum):
    """Fixed business roles"""

    service_user = "TMS.SERVICE_USER"
    tenant_owner = "TMS.TENANT_OWNER"
    user_admin = "TMS.USER_ADMIN"


ROLE_DESCRIPTIONS = {
    RoleName.service_user: "Service User",
    RoleName.tenant_owner: "Tenant Owner",
    RoleName.user_admin: "User Admin",
}


class TenantRequestStatus(str, Enum):
    """Tenant request lifecycle"""

    NEW = "NEW"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class IdentityProvider(str, Enum):
    idir = "idir"
    azureidir = "azureidir"
    bceidbasic = "bceidbasic"
    bceidbusiness = "bceidbusiness"
    bceidboth = "bceidboth"


# Members from these providers can only ever hold the Service User role
SERVICE_USER_ONLY_PROVIDERS = (
    IdentityProvider.bceidbasic.value,
    IdentityProvider.bceidbusiness.value,
)
