"""
Tenant Request Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.app.use_cases.dtos import AuditedResponse, SsoUserProfile, TenantWithMembersResponse
from src.domain.entities import TenantRequestStatus


class CreateTenantRequestCommand(BaseModel):
    name: str
    ministry_name: str
    description: Optional[str] = None
    requester: SsoUserProfile


class DecideTenantRequestCommand(BaseModel):
    status: TenantRequestStatus
    rejection_reason: Optional[str] = None
    tenant_name: Optional[str] = None
    decider: SsoUserProfile


class TenantRequestResponse(AuditedResponse):
    """Tenant request with requester and decider shown by display name"""

    name: str
    ministry_name: str
    description: Optional[str] = None
    status: TenantRequestStatus
    requested_by: Optional[str] = None
    requested_at: datetime
    decisioned_by: Optional[str] = None
    decisioned_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None


class TenantRequestDecisionResponse(BaseModel):
    tenant_request: TenantRequestResponse
    tenant: Optional[TenantWithMembersResponse] = None
