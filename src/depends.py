from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.utils.jwt import verify_jwt
from src.domain.errors import UnauthorizedError
from src.domain.identity import SystemIdentity

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)

system_identity = SystemIdentity(
    audience=ApplicationConfig.TMS_AUDIENCE,
    gov_identity_providers=tuple(ApplicationConfig.GOV_IDENTITY_PROVIDERS),
    operations_admin_role=ApplicationConfig.OPERATIONS_ADMIN_ROLE,
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_system_identity() -> SystemIdentity:
    return system_identity


async def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and verify the bearer token from Authorization header.

    Returns:
        Decoded JWT claims

    Raises:
        UnauthorizedError: 401 if the token is missing or invalid
    """
    if credentials is None:
        raise UnauthorizedError("Authorization token is missing")
    return await verify_jwt(credentials.credentials)
