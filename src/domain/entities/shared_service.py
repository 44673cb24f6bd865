"""
Shared Service Entities

Downstream systems that tenants may use, their roles, and the grants
connecting them to tenants and groups.
"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import JSON
from sqlmodel import Column, Field, Index, UniqueConstraint

from src.domain.base import AuditedModel


class SharedService(AuditedModel, table=True):
    """
    SharedService entity - aggregate root for SharedServiceRole.

    client_identifier is the token audience the service presents.
    """

    __tablename__ = "shared_services"

    name: str = Field(max_length=100, unique=True)
    client_identifier: str = Field(max_length=255, unique=True, index=True)
    description: Optional[str] = Field(default=None, max_length=500)
    is_active: bool = Field(default=True, nullable=False)


class SharedServiceRole(AuditedModel, table=True):
    """
    SharedServiceRole entity.

    allowed_identity_providers of None means members from any provider may
    be granted the role.
    """

    __tablename__ = "shared_service_roles"

    name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)
    shared_service_id: UUID = Field(
        foreign_key="shared_services.id", ondelete="CASCADE", index=True
    )
    allowed_identity_providers: Optional[List[str]] = Field(
        default=None, sa_column=Column(JSON, nullable=True)
    )
    is_deleted: bool = Field(default=False, nullable=False)

    __table_args__ = (
        UniqueConstraint("name", "shared_service_id", name="uq_shared_service_role_name"),
    )


class TenantSharedService(AuditedModel, table=True):
    """TenantSharedService entity - authorizes a tenant to use a shared service."""

    __tablename__ = "tenant_shared_services"

    tenant_id: UUID = Field(foreign_key="tenants.id", ondelete="CASCADE", index=True)
    shared_service_id: UUID = Field(foreign_key="shared_services.id", index=True)
    is_deleted: bool = Field(default=False, nullable=False)

    __table_args__ = (
        UniqueConstraint("tenant_id", "shared_service_id", name="uq_tenant_shared_service"),
    )


class GroupSharedServiceRole(AuditedModel, table=True):
    """GroupSharedServiceRole entity - grants a group a shared service role."""

    __tablename__ = "group_shared_service_roles"

    group_id: UUID = Field(foreign_key="tenant_groups.id", ondelete="CASCADE")
    shared_service_role_id: UUID = Field(foreign_key="shared_service_roles.id")
    is_deleted: bool = Field(default=False, nullable=False)

    __table_args__ = (
        UniqueConstraint(
            "group_id", "shared_service_role_id", name="uq_group_shared_service_role"
        ),
        Index(
            "idx_groupsharedservicerole_access",
            "group_id",
            "shared_service_role_id",
            "is_deleted",
        ),
    )
