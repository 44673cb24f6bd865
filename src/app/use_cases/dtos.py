"""
Shared DTOs (Data Transfer Objects)

Read models returned by several use case packages. Field names are
serialized in camelCase.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


# ============================================================================
# Command DTOs
# ============================================================================


class SsoUserProfile(CamelModel):
    """External identity as supplied by a client or resolved from claims"""

    sso_user_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    display_name: str
    user_name: Optional[str] = None
    email: Optional[str] = None
    idp_type: str = "idir"


# ============================================================================
# Response DTOs
# ============================================================================


class AuditedResponse(CamelModel):
    id: UUID
    created_date_time: datetime
    updated_date_time: datetime
    created_by: Optional[str] = None
    updated_by: Optional[str] = None


class SsoUserResponse(AuditedResponse):
    sso_user_id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    display_name: str
    user_name: Optional[str] = None
    email: Optional[str] = None
    idp_type: str


class RoleResponse(AuditedResponse):
    name: str
    description: Optional[str] = None
    tenant_id: Optional[UUID] = None


class TenantUserRoleResponse(AuditedResponse):
    """An assignment row exposing its role"""

    is_deleted: bool
    role: RoleResponse


class TenantUserResponse(AuditedResponse):
    """A tenant member with SSO identity and active roles"""

    is_deleted: bool
    sso_user: SsoUserResponse
    roles: List[RoleResponse] = []


class TenantResponse(AuditedResponse):
    name: str
    ministry_name: str
    description: Optional[str] = None


class TenantWithMembersResponse(TenantResponse):
    users: List[TenantUserResponse] = []


class GroupResponse(AuditedResponse):
    name: str
    description: Optional[str] = None
    tenant_id: UUID


class GroupRef(CamelModel):
    id: UUID
    name: str


class SharedServiceRoleResponse(AuditedResponse):
    name: str
    description: Optional[str] = None
    shared_service_id: UUID
    allowed_identity_providers: Optional[List[str]] = None


class SharedServiceResponse(AuditedResponse):
    name: str
    client_identifier: str
    description: Optional[str] = None
    is_active: bool
    roles: List[SharedServiceRoleResponse] = []
