"""
TenantRequest Entity

A pending ask to create a new tenant.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import DateTime, Field, Index

from src.domain.base import AuditedModel, utc_now

from .enums import TenantRequestStatus


class TenantRequest(AuditedModel, table=True):
    """
    TenantRequest entity.

    Business Rules:
    - NEW -> APPROVED | REJECTED, both terminal
    - rejection_reason is mandatory when REJECTED
    - Approval creates the tenant in the same transaction
    """

    __tablename__ = "tenant_requests"

    name: str = Field(max_length=30)
    ministry_name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    status: TenantRequestStatus = Field(default=TenantRequestStatus.NEW)

    requested_by: UUID = Field(foreign_key="sso_users.id")
    requested_at: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), nullable=False
    )
    decisioned_by: Optional[UUID] = Field(default=None, foreign_key="sso_users.id")
    decisioned_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    rejection_reason: Optional[str] = Field(default=None, max_length=255)

    __table_args__ = (Index("idx_tenant_request_status", "status"),)

    def is_open(self) -> bool:
        return self.status == TenantRequestStatus.NEW
