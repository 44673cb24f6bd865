"""
Role Use Cases
"""

from .assign_user_roles_use_case import AssignUserRolesUseCase
from .create_tenant_role_use_case import CreateTenantRoleUseCase
from .get_roles_use_case import (
    GetRolesUseCase,
    GetSsoUserRolesUseCase,
    GetTenantRolesUseCase,
    GetUserRolesUseCase,
)
from .unassign_user_role_use_case import UnassignUserRoleUseCase

__all__ = [
    "AssignUserRolesUseCase",
    "CreateTenantRoleUseCase",
    "GetRolesUseCase",
    "GetSsoUserRolesUseCase",
    "GetTenantRolesUseCase",
    "GetUserRolesUseCase",
    "UnassignUserRoleUseCase",
]
