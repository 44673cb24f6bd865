from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import SsoUser


class ISsoUserRepository(ABC):
    """SSO user repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[SsoUser]:
        """Get SSO user by primary key"""
        pass

    @abstractmethod
    async def get_by_sso_user_id(self, sso_user_id: str) -> Optional[SsoUser]:
        """Get SSO user by external subject id"""
        pass

    @abstractmethod
    async def list_by_sso_user_ids(self, sso_user_ids: List[str]) -> List[SsoUser]:
        """Get SSO users by external subject ids"""
        pass

    @abstractmethod
    async def list_by_ids(self, user_ids: List[UUID]) -> List[SsoUser]:
        """Get SSO users by primary keys"""
        pass

    @abstractmethod
    async def create(self, sso_user: SsoUser) -> SsoUser:
        """Create a new SSO user"""
        pass
