"""
Tenant Management Use Cases

All tenant-related business logic.
"""

from .create_tenant_use_case import CreateTenantUseCase
from .dtos import CreateTenantCommand, UpdateTenantCommand
from .get_tenant_use_case import GetTenantUseCase
from .get_tenants_for_user_use_case import GetTenantsForUserUseCase
from .update_tenant_use_case import UpdateTenantUseCase

__all__ = [
    "CreateTenantUseCase",
    "GetTenantUseCase",
    "GetTenantsForUserUseCase",
    "UpdateTenantUseCase",
    "CreateTenantCommand",
    "UpdateTenantCommand",
]
