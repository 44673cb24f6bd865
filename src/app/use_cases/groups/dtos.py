"""
Group Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.use_cases.dtos import (
    AuditedResponse,
    GroupResponse,
    SsoUserProfile,
    SsoUserResponse,
    TenantUserResponse,
)


class CreateGroupCommand(BaseModel):
    name: str
    description: Optional[str] = None
    tenant_user_id: Optional[UUID] = None


class UpdateGroupCommand(BaseModel):
    """Partial update; None leaves a field untouched"""

    name: Optional[str] = None
    description: Optional[str] = None


class AddGroupUserCommand(BaseModel):
    user: SsoUserProfile


class GroupMemberResponse(AuditedResponse):
    """Group membership row flattened to the member's SSO identity"""

    is_deleted: bool
    sso_user: SsoUserResponse


class GroupWithMembersResponse(GroupResponse):
    group_users: List[GroupMemberResponse] = []


class GroupUserResponse(AuditedResponse):
    is_deleted: bool
    group_id: UUID
    tenant_user: TenantUserResponse
