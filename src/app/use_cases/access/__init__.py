from .check_tenant_access_use_case import CheckTenantAccessUseCase

__all__ = ["CheckTenantAccessUseCase"]
