"""
HTTP request payloads

Validated at the API boundary before being mapped to use case commands.
JSON keys are camelCase.
"""

from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel

from src.app.use_cases.dtos import SsoUserProfile
from src.domain.entities import IdentityProvider, TenantRequestStatus

# No leading or trailing whitespace
TENANT_NAME_PATTERN = r"^\S(.*\S)?$"


class RequestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserRequest(RequestModel):
    """SSO identity of a user being added or referenced"""

    sso_user_id: str = Field(..., min_length=1, max_length=255)
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    display_name: str = Field(..., min_length=1, max_length=50)
    user_name: Optional[str] = Field(None, min_length=1, max_length=15)
    email: Optional[EmailStr] = Field(None, max_length=100)
    idp_type: IdentityProvider = IdentityProvider.idir

    def to_profile(self) -> SsoUserProfile:
        return SsoUserProfile(
            sso_user_id=self.sso_user_id,
            first_name=self.first_name,
            last_name=self.last_name,
            display_name=self.display_name,
            user_name=self.user_name,
            email=self.email,
            idp_type=self.idp_type.value,
        )


# ============================================================================
# Tenants
# ============================================================================


class CreateTenantRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=30, pattern=TENANT_NAME_PATTERN)
    ministry_name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    user: UserRequest


class UpdateTenantRequest(RequestModel):
    name: Optional[str] = Field(
        None, min_length=1, max_length=30, pattern=TENANT_NAME_PATTERN
    )
    ministry_name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1, max_length=500)


# ============================================================================
# Users and roles
# ============================================================================


class AddTenantUserRequest(RequestModel):
    user: UserRequest
    roles: List[UUID] = Field(..., min_length=1, max_length=3)
    groups: List[UUID] = []


class AssignRolesRequest(RequestModel):
    roles: List[UUID] = Field(..., min_length=1)


class RoleSpec(RequestModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=255)


class CreateTenantRoleRequest(RequestModel):
    role: RoleSpec


# ============================================================================
# Groups
# ============================================================================


class CreateGroupRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=30, pattern=TENANT_NAME_PATTERN)
    description: Optional[str] = Field(None, max_length=500)
    tenant_user_id: Optional[UUID] = None


class UpdateGroupRequest(RequestModel):
    name: Optional[str] = Field(
        None, min_length=1, max_length=30, pattern=TENANT_NAME_PATTERN
    )
    description: Optional[str] = Field(None, max_length=500)


class AddGroupUserRequest(RequestModel):
    user: UserRequest


# ============================================================================
# Shared services
# ============================================================================


class RoleToggleRequest(RequestModel):
    id: UUID
    enabled: bool


class SharedServiceTogglesRequest(RequestModel):
    id: UUID
    shared_service_roles: List[RoleToggleRequest]


class UpdateGroupSharedServiceRolesRequest(RequestModel):
    shared_services: List[SharedServiceTogglesRequest]


class SharedServiceRoleRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=30)
    description: Optional[str] = Field(None, max_length=255)
    allowed_identity_providers: Optional[List[IdentityProvider]] = None


class CreateSharedServiceRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=30)
    client_identifier: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    is_active: bool = True
    roles: List[SharedServiceRoleRequest] = []


class AddSharedServiceRolesRequest(RequestModel):
    roles: List[SharedServiceRoleRequest] = Field(..., min_length=1)


class AssociateSharedServiceRequest(RequestModel):
    shared_service_id: UUID


# ============================================================================
# Tenant requests
# ============================================================================


class CreateTenantRequestRequest(RequestModel):
    name: str = Field(..., min_length=1, max_length=30, pattern=TENANT_NAME_PATTERN)
    ministry_name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1, max_length=500)
    user: UserRequest


class UpdateTenantRequestStatusRequest(RequestModel):
    status: TenantRequestStatus
    rejection_reason: Optional[str] = Field(None, min_length=1, max_length=255)
    tenant_name: Optional[str] = Field(
        None, min_length=1, max_length=30, pattern=TENANT_NAME_PATTERN
    )

    @model_validator(mode="after")
    def check_decision(self):
        if self.status == TenantRequestStatus.NEW:
            raise ValueError("status must be APPROVED or REJECTED")
        if self.status == TenantRequestStatus.REJECTED and not self.rejection_reason:
            raise ValueError("rejectionReason is required when status is REJECTED")
        return self
