"""
Tenant User Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.use_cases.dtos import (
    GroupResponse,
    SharedServiceRoleResponse,
    SsoUserProfile,
    TenantUserResponse,
)


class AddTenantUserCommand(BaseModel):
    """Add a user to a tenant with roles and optional initial groups"""

    user: SsoUserProfile
    roles: List[UUID]
    groups: List[UUID] = []


class TenantUserDetailResponse(TenantUserResponse):
    """Tenant member with the optional groups and granted shared service roles"""

    groups: Optional[List[GroupResponse]] = None
    shared_service_roles: Optional[List[SharedServiceRoleResponse]] = None
