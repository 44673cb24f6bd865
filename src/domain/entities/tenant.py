"""
Tenant Entity

Represents a customer/organization boundary.
"""

from typing import Optional

from sqlmodel import Field, UniqueConstraint

from src.domain.base import AuditedModel


class Tenant(AuditedModel, table=True):
    """
    Tenant entity - aggregate root for roles, tenant users and groups.

    Business Rules:
    - (name, ministry_name) is unique
    - Once a tenant has members, at least one active Tenant Owner must remain
    """

    __tablename__ = "tenants"

    name: str = Field(max_length=30)
    ministry_name: str = Field(max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)

    __table_args__ = (
        UniqueConstraint("name", "ministry_name", name="uq_tenant_name_ministry"),
    )
