"""
TenantUser and TenantUserRole Entities

Tenant membership and the roles held through it.
"""

from uuid import UUID

from sqlalchemy import text
from sqlmodel import Field, Index, UniqueConstraint

from src.domain.base import AuditedModel


class TenantUser(AuditedModel, table=True):
    """
    TenantUser entity - binds one SsoUser to one Tenant.

    Business Rules:
    - At most one row per (tenant, sso user); removal is logical
    - Re-adding a removed user restores the existing row
    """

    __tablename__ = "tenant_users"

    tenant_id: UUID = Field(foreign_key="tenants.id", ondelete="CASCADE", index=True)
    sso_user_pk: UUID = Field(foreign_key="sso_users.id", index=True)
    is_deleted: bool = Field(default=False, nullable=False)

    __table_args__ = (
        UniqueConstraint("tenant_id", "sso_user_pk", name="uq_tenant_user_sso_user"),
    )


class TenantUserRole(AuditedModel, table=True):
    """
    TenantUserRole entity - role assignment for a membership.

    Business Rules:
    - Unassignment is a soft delete
    - At most one active row per (tenant_user, role)
    """

    __tablename__ = "tenant_user_roles"

    tenant_user_id: UUID = Field(
        foreign_key="tenant_users.id", ondelete="CASCADE", nullable=False
    )
    role_id: UUID = Field(foreign_key="roles.id", ondelete="CASCADE", nullable=False)
    is_deleted: bool = Field(default=False, nullable=False)

    __table_args__ = (
        Index("idx_tenantuserrole_access", "tenant_user_id", "role_id", "is_deleted"),
        Index(
            "uq_tenantuserrole_active",
            "tenant_user_id",
            "role_id",
            unique=True,
            sqlite_where=text("is_deleted = 0"),
            postgresql_where=text("is_deleted = false"),
        ),
    )
