from typing import Optional

import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from config import ApplicationConfig
from src.depends import get_current_claims, get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.errors import UnauthorizedError

SERVICE_AUDIENCE = "forms-service"


class TokenClaims:
    """Claims handed to the app in place of a verified bearer token"""

    def __init__(self):
        self.claims: Optional[dict] = None

    def login(
        self,
        user: dict,
        audience: str = ApplicationConfig.TMS_AUDIENCE,
        client_roles=(),
    ) -> dict:
        idp = user.get("idpType", "idir")
        guid_claim = "bceid_user_guid" if idp.startswith("bceid") else "idir_user_guid"
        self.claims = {
            "sub": f"{user['ssoUserId']}@{idp}",
            guid_claim: user["ssoUserId"],
            "aud": audience,
            "identity_provider": idp,
            "client_roles": list(client_roles),
            "given_name": user.get("firstName"),
            "family_name": user.get("lastName"),
            "display_name": user.get("displayName"),
            "preferred_username": user.get("userName"),
            "email": user.get("email"),
        }
        return self.claims

    def logout(self):
        self.claims = None


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
def token():
    return TokenClaims()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, token):
    from httpx import ASGITransport
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    async def override_get_current_claims():
        if token.claims is None:
            raise UnauthorizedError("Authorization token is missing")
        return token.claims

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_current_claims] = override_get_current_claims

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def tenant(client, token, test_data):
    """A tenant founded by the `owner` user, who stays logged in"""
    token.login(test_data.user("owner"))
    response = await client.post("/tenants", json=test_data.payload("tenant", user="owner"))
    assert response.status_code == 201
    return response.json()["data"]["tenant"]
