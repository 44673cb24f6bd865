"""
Tenant User Use Cases

Membership of SSO users in tenants.
"""

from .add_tenant_user_use_case import AddTenantUserUseCase
from .dtos import AddTenantUserCommand, TenantUserDetailResponse
from .get_tenant_user_use_case import GetTenantUserUseCase
from .get_tenant_users_use_case import GetTenantUsersUseCase
from .remove_tenant_user_use_case import RemoveTenantUserUseCase

__all__ = [
    "AddTenantUserUseCase",
    "GetTenantUserUseCase",
    "GetTenantUsersUseCase",
    "RemoveTenantUserUseCase",
    "AddTenantUserCommand",
    "TenantUserDetailResponse",
]
