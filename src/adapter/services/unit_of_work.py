import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.group_repository import GroupRepository
from src.adapter.repositories.role_repository import RoleRepository
from src.adapter.repositories.shared_service_repository import SharedServiceRepository
from src.adapter.repositories.sso_user_repository import SsoUserRepository
from src.adapter.repositories.tenant_repository import TenantRepository
from src.adapter.repositories.tenant_request_repository import TenantRequestRepository
from src.adapter.repositories.tenant_user_repository import TenantUserRepository
from src.adapter.repositories.tenant_user_role_repository import TenantUserRoleRepository
from src.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.sso_users = SsoUserRepository(self.session)
        self.tenants = TenantRepository(self.session)
        self.tenant_users = TenantUserRepository(self.session)
        self.tenant_user_roles = TenantUserRoleRepository(self.session)
        self.roles = RoleRepository(self.session)
        self.groups = GroupRepository(self.session)
        self.shared_services = SharedServiceRepository(self.session)
        self.tenant_requests = TenantRequestRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc is not None:
            logger.warning(f"Rolling back transaction: {exc_type.__name__}: {exc}")
        # Uncommitted work is always discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
