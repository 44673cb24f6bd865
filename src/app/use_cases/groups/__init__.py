"""
Group Use Cases

Groups of tenant members and their membership rows.
"""

from .add_group_user_use_case import AddGroupUserUseCase
from .create_group_use_case import CreateGroupUseCase
from .dtos import (
    AddGroupUserCommand,
    CreateGroupCommand,
    GroupMemberResponse,
    GroupUserResponse,
    GroupWithMembersResponse,
    UpdateGroupCommand,
)
from .get_group_use_case import GetGroupUseCase
from .get_tenant_groups_use_case import GetTenantGroupsUseCase
from .remove_group_user_use_case import RemoveGroupUserUseCase
from .update_group_use_case import UpdateGroupUseCase

__all__ = [
    "AddGroupUserUseCase",
    "CreateGroupUseCase",
    "GetGroupUseCase",
    "GetTenantGroupsUseCase",
    "RemoveGroupUserUseCase",
    "UpdateGroupUseCase",
    "AddGroupUserCommand",
    "CreateGroupCommand",
    "UpdateGroupCommand",
    "GroupMemberResponse",
    "GroupUserResponse",
    "GroupWithMembersResponse",
]
