"""
SsoUser Entity

External identity known through the single sign-on provider.
"""

from typing import Optional

from sqlmodel import Field

from src.domain.base import AuditedModel


class SsoUser(AuditedModel, table=True):
    """
    SsoUser entity - a person authenticated by an external identity provider.

    Business Rules:
    - Created lazily the first time a tenant operation references the subject
    - Never deleted
    - Looked up by sso_user_id to avoid duplication
    """

    __tablename__ = "sso_users"

    sso_user_id: str = Field(max_length=255, unique=True, index=True)
    first_name: Optional[str] = Field(default=None, max_length=50)
    last_name: Optional[str] = Field(default=None, max_length=50)
    display_name: str = Field(max_length=50)
    user_name: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    idp_type: str = Field(default="idir", max_length=50)
