import pytest
from unittest.mock import AsyncMock, MagicMock

from src.domain.entities import Role, SsoUser, Tenant, TenantUser
from src.domain.identity import SystemIdentity

REPOSITORIES = (
    "sso_users",
    "tenants",
    "tenant_users",
    "tenant_user_roles",
    "roles",
    "groups",
    "shared_services",
    "tenant_requests",
)


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with every repository as an AsyncMock"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for name in REPOSITORIES:
        setattr(uow, name, AsyncMock())
    return uow


@pytest.fixture
def system():
    return SystemIdentity(audience="tenant-management")


@pytest.fixture
def tenant():
    return Tenant(name="Digital Permits", ministry_name="Citizens' Services")


@pytest.fixture
def sso_user():
    return SsoUser(sso_user_id="owner-guid", display_name="Olivia Owner", idp_type="idir")


@pytest.fixture
def tenant_user(tenant, sso_user):
    return TenantUser(tenant_id=tenant.id, sso_user_pk=sso_user.id)


@pytest.fixture
def owner_role():
    return Role(name="TMS.TENANT_OWNER", description="Tenant owner")


@pytest.fixture
def service_user_role():
    return Role(name="TMS.SERVICE_USER", description="Service user")
