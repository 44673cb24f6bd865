"""
Shared Service Use Case DTOs (Data Transfer Objects)
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel

from src.app.use_cases.dtos import CamelModel, GroupRef


# ============================================================================
# Command DTOs
# ============================================================================


class SharedServiceRoleToggle(BaseModel):
    id: UUID
    enabled: bool


class SharedServiceRoleToggles(BaseModel):
    id: UUID
    shared_service_roles: List[SharedServiceRoleToggle]


class SharedServiceRoleSpec(BaseModel):
    name: str
    description: Optional[str] = None
    allowed_identity_providers: Optional[List[str]] = None


class CreateSharedServiceCommand(BaseModel):
    name: str
    client_identifier: str
    description: Optional[str] = None
    is_active: bool = True
    roles: List[SharedServiceRoleSpec] = []


# ============================================================================
# Response DTOs
# ============================================================================


class GroupSharedServiceRoleView(CamelModel):
    """A shared service role annotated with whether the group holds it"""

    id: UUID
    name: str
    description: Optional[str] = None
    allowed_identity_providers: Optional[List[str]] = None
    enabled: bool


class GroupSharedServiceView(CamelModel):
    id: UUID
    name: str
    client_identifier: str
    description: Optional[str] = None
    shared_service_roles: List[GroupSharedServiceRoleView] = []


class EnabledRoleRef(CamelModel):
    name: str
    enabled: bool = True


class UserGroupRolesResponse(CamelModel):
    id: UUID
    name: str
    shared_service_roles: List[EnabledRoleRef] = []


class EffectiveSharedServiceRoleResponse(CamelModel):
    """An enabled role and every group that grants it"""

    id: UUID
    name: str
    description: Optional[str] = None
    allowed_identity_providers: Optional[List[str]] = None
    groups: List[GroupRef] = []
