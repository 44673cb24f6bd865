"""
Group and GroupUser Entities
"""

from typing import Optional
from uuid import UUID

from sqlmodel import Field, UniqueConstraint

from src.domain.base import AuditedModel


class Group(AuditedModel, table=True):
    """
    Group entity - named collection of tenant members.

    Business Rules:
    - (name, tenant) is unique
    - Deleted together with its tenant
    """

    __tablename__ = "tenant_groups"

    name: str = Field(max_length=50)
    description: Optional[str] = Field(default=None, max_length=500)
    tenant_id: UUID = Field(foreign_key="tenants.id", ondelete="CASCADE", index=True)

    __table_args__ = (UniqueConstraint("name", "tenant_id", name="uq_group_name_tenant"),)


class GroupUser(AuditedModel, table=True):
    """
    GroupUser entity - group membership of a tenant user.

    Business Rules:
    - Removal is a soft delete
    - Re-adding restores the same row
    """

    __tablename__ = "group_users"

    group_id: UUID = Field(foreign_key="tenant_groups.id", ondelete="CASCADE", index=True)
    tenant_user_id: UUID = Field(
        foreign_key="tenant_users.id", ondelete="CASCADE", index=True
    )
    is_deleted: bool = Field(default=False, nullable=False)

    __table_args__ = (
        UniqueConstraint("group_id", "tenant_user_id", name="uq_group_user"),
    )
