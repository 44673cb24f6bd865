from abc import ABC, abstractmethod

from src.app.repositories.group_repository import IGroupRepository
from src.app.repositories.role_repository import IRoleRepository
from src.app.repositories.shared_service_repository import ISharedServiceRepository
from src.app.repositories.sso_user_repository import ISsoUserRepository
from src.app.repositories.tenant_repository import ITenantRepository
from src.app.repositories.tenant_request_repository import ITenantRequestRepository
from src.app.repositories.tenant_user_repository import ITenantUserRepository
from src.app.repositories.tenant_user_role_repository import ITenantUserRoleRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    sso_users: ISsoUserRepository
    tenants: ITenantRepository
    tenant_users: ITenantUserRepository
    tenant_user_roles: ITenantUserRoleRepository
    roles: IRoleRepository
    groups: IGroupRepository
    shared_services: ISharedServiceRepository
    tenant_requests: ITenantRequestRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
