from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.sso_user_repository import ISsoUserRepository
from src.domain.entities import SsoUser


class SsoUserRepository(ISsoUserRepository):
    """SSO user repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[SsoUser]:
        stmt = select(SsoUser).where(SsoUser.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_sso_user_id(self, sso_user_id: str) -> Optional[SsoUser]:
        stmt = select(SsoUser).where(SsoUser.sso_user_id == sso_user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_by_sso_user_ids(self, sso_user_ids: List[str]) -> List[SsoUser]:
        if not sso_user_ids:
            return []
        stmt = select(SsoUser).where(col(SsoUser.sso_user_id).in_(sso_user_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_by_ids(self, user_ids: List[UUID]) -> List[SsoUser]:
        if not user_ids:
            return []
        stmt = select(SsoUser).where(col(SsoUser.id).in_(user_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, sso_user: SsoUser) -> SsoUser:
        self.session.add(sso_user)
        await self.session.flush()
        await self.session.refresh(sso_user)
        return sso_user
