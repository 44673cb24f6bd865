"""
Shared Service Use Cases

Shared service administration and group-mediated role grants.
"""

from .dtos import (
    CreateSharedServiceCommand,
    EffectiveSharedServiceRoleResponse,
    GroupSharedServiceView,
    SharedServiceRoleSpec,
    SharedServiceRoleToggles,
    UserGroupRolesResponse,
)
from .get_group_shared_service_roles_use_case import GetGroupSharedServiceRolesUseCase
from .get_user_group_roles_use_case import (
    GetEffectiveSharedServiceRolesUseCase,
    GetUserGroupsWithSharedServiceRolesUseCase,
)
from .manage_shared_services_use_case import (
    AddSharedServiceRolesUseCase,
    AssociateSharedServiceUseCase,
    CreateSharedServiceUseCase,
    GetSharedServicesUseCase,
    GetTenantSharedServicesUseCase,
)
from .update_group_shared_service_roles_use_case import UpdateGroupSharedServiceRolesUseCase

__all__ = [
    "AddSharedServiceRolesUseCase",
    "AssociateSharedServiceUseCase",
    "CreateSharedServiceUseCase",
    "GetEffectiveSharedServiceRolesUseCase",
    "GetGroupSharedServiceRolesUseCase",
    "GetSharedServicesUseCase",
    "GetTenantSharedServicesUseCase",
    "GetUserGroupsWithSharedServiceRolesUseCase",
    "UpdateGroupSharedServiceRolesUseCase",
    "CreateSharedServiceCommand",
    "EffectiveSharedServiceRoleResponse",
    "GroupSharedServiceView",
    "SharedServiceRoleSpec",
    "SharedServiceRoleToggles",
    "UserGroupRolesResponse",
]
