"""
Role Entity

Named permission grant, either global or scoped to a tenant.
"""

from typing import Optional
from uuid import UUID

from sqlmodel import Field, UniqueConstraint

from src.domain.base import AuditedModel


class Role(AuditedModel, table=True):
    """
    Role entity.

    Business Rules:
    - tenant_id is None for the global bootstrap roles
    - Unique by name within a tenant
    """

    __tablename__ = "roles"

    name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=255)
    tenant_id: Optional[UUID] = Field(
        default=None, foreign_key="tenants.id", ondelete="CASCADE", index=True
    )

    __table_args__ = (UniqueConstraint("name", "tenant_id", name="uq_role_name_tenant"),)
