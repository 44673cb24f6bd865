"""
Tenant Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional

from pydantic import BaseModel

from src.app.use_cases.dtos import SsoUserProfile


class CreateTenantCommand(BaseModel):
    """Create tenant command - the founding user becomes its owner"""

    name: str
    ministry_name: str
    description: Optional[str] = None
    user: SsoUserProfile


class UpdateTenantCommand(BaseModel):
    """Partial update; None leaves a field untouched"""

    name: Optional[str] = None
    ministry_name: Optional[str] = None
    description: Optional[str] = None
