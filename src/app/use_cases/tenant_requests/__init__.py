"""
Tenant Request Use Cases

NEW -> APPROVED | REJECTED approval workflow.
"""

from .create_tenant_request_use_case import CreateTenantRequestUseCase
from .dtos import (
    CreateTenantRequestCommand,
    DecideTenantRequestCommand,
    TenantRequestDecisionResponse,
    TenantRequestResponse,
)
from .get_tenant_requests_use_case import GetTenantRequestsUseCase
from .update_tenant_request_status_use_case import UpdateTenantRequestStatusUseCase

__all__ = [
    "CreateTenantRequestUseCase",
    "GetTenantRequestsUseCase",
    "UpdateTenantRequestStatusUseCase",
    "CreateTenantRequestCommand",
    "DecideTenantRequestCommand",
    "TenantRequestDecisionResponse",
    "TenantRequestResponse",
]
