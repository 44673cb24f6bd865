from datetime import datetime
from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient

from src.domain.entities import Tenant

from tests.utils.json_compare import AUDIT_KEYS, exclude_keys, names


@pytest.mark.asyncio
async def test_health_is_public(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["apiStatus"] == "Healthy"
    assert "time" in response.json()


@pytest.mark.asyncio
async def test_create_tenant_assigns_all_bootstrap_roles(client: AsyncClient, token, test_data):
    """Create tenant

    Given a government user
    When they create a tenant for themselves
    Then the tenant has exactly one member holding the three bootstrap roles
    """
    owner = test_data.get_copy("users")["owner"]
    token.login(owner)

    response = await client.post(
        "/tenants", json={**test_data.get_copy("tenant"), "user": owner}
    )

    assert response.status_code == 201
    tenant = response.json()["data"]["tenant"]
    assert exclude_keys(tenant, AUDIT_KEYS | {"users"}) == test_data.get("tenant")
    assert tenant["createdBy"] == owner["displayName"]
    assert len(tenant["users"]) == 1
    member = tenant["users"][0]
    assert member["ssoUser"]["ssoUserId"] == owner["ssoUserId"]
    assert member["isDeleted"] is False
    assert names(member["roles"]) == [
        "TMS.SERVICE_USER",
        "TMS.TENANT_OWNER",
        "TMS.USER_ADMIN",
    ]


@pytest.mark.asyncio
async def test_created_tenant_row_carries_audit_timestamps(client: AsyncClient, token, test_data, db_session):
    token.login(test_data.user("owner"))

    response = await client.post("/tenants", json=test_data.payload("tenant", user="owner"))

    assert response.status_code == 201
    tenant = response.json()["data"]["tenant"]
    assert datetime.fromisoformat(tenant["createdDateTime"])
    assert datetime.fromisoformat(tenant["updatedDateTime"])
    row = await db_session.get(Tenant, UUID(tenant["id"]))
    assert row is not None
    assert row.created_date_time is not None


@pytest.mark.asyncio
async def test_bootstrap_roles_are_created_once(client: AsyncClient, tenant, token, test_data):
    """Given an existing tenant, a second tenant reuses the same global roles"""
    owner = test_data.get_copy("users")["owner"]
    response = await client.post(
        "/tenants",
        json={**test_data.get_copy("tenant"), "name": "Second Tenant", "user": owner},
    )
    assert response.status_code == 201

    roles = await client.get("/roles")

    assert roles.status_code == 200
    assert names(roles.json()["data"]["roles"]) == [
        "TMS.SERVICE_USER",
        "TMS.TENANT_OWNER",
        "TMS.USER_ADMIN",
    ]


@pytest.mark.asyncio
async def test_duplicate_tenant_is_conflict(client: AsyncClient, tenant, test_data):
    """Duplicate tenant

    Given a tenant with a name and ministry
    When another tenant with the same pair is created
    Then the response is a 409 error envelope
    """
    owner = test_data.get_copy("users")["owner"]

    response = await client.post(
        "/tenants", json={**test_data.get_copy("tenant"), "user": owner}
    )

    assert response.status_code == 409
    body = response.json()
    assert body["name"] == "ConflictError"
    assert body["httpResponseCode"] == 409
    assert body["errorMessage"] == "Conflict"
    assert "already exists" in body["message"]


@pytest.mark.asyncio
async def test_same_name_in_other_ministry_is_allowed(client: AsyncClient, tenant, test_data):
    owner = test_data.get_copy("users")["owner"]

    response = await client.post(
        "/tenants",
        json={**test_data.get_copy("tenant"), "ministryName": "Health", "user": owner},
    )

    assert response.status_code == 201


@pytest.mark.asyncio
async def test_create_tenant_validation_details(client: AsyncClient, token, test_data):
    """Given a name with surrounding whitespace and no user, details name both fields"""
    token.login(test_data.get_copy("users")["owner"])

    response = await client.post(
        "/tenants", json={"name": " Padded ", "ministryName": "Health"}
    )

    assert response.status_code == 400
    body = response.json()
    assert body["name"] == "ValidationError"
    assert body["errorMessage"] == "Bad Request"
    paths = [detail["path"] for detail in body["details"]["body"]]
    assert "name" in paths
    assert "user" in paths


@pytest.mark.asyncio
async def test_missing_token_is_unauthorized(client: AsyncClient, token):
    token.logout()

    response = await client.get("/roles")

    assert response.status_code == 401
    assert response.json()["errorMessage"] == "Unauthorized"


@pytest.mark.asyncio
async def test_business_identity_provider_is_unauthorized(client: AsyncClient, token, test_data):
    """Given a caller from a business identity provider, standard endpoints answer 401"""
    business = test_data.get_copy("users")["business"]
    token.login(business)

    response = await client.post(
        "/tenants", json={**test_data.get_copy("tenant"), "user": business}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_get_tenant_requires_membership(client: AsyncClient, tenant, token, test_data):
    token.login(test_data.get_copy("users")["member"])

    response = await client.get(f"/tenants/{tenant['id']}")

    assert response.status_code == 403
    assert response.json()["errorMessage"] == "Forbidden"


@pytest.mark.asyncio
async def test_get_unknown_tenant_is_not_found(client: AsyncClient, tenant):
    response = await client.get(f"/tenants/{uuid4()}")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_tenant_with_and_without_members(client: AsyncClient, tenant):
    plain = await client.get(f"/tenants/{tenant['id']}")
    expanded = await client.get(f"/tenants/{tenant['id']}?expand=tenantUserRoles")
    invalid = await client.get(f"/tenants/{tenant['id']}?expand=everything")

    assert plain.status_code == 200
    assert "users" not in plain.json()["data"]["tenant"]
    assert expanded.status_code == 200
    assert len(expanded.json()["data"]["tenant"]["users"]) == 1
    assert invalid.status_code == 400
    assert "query" in invalid.json()["details"]


@pytest.mark.asyncio
async def test_update_tenant_by_owner(client: AsyncClient, tenant):
    response = await client.put(
        f"/tenants/{tenant['id']}", json={"description": "Updated description"}
    )

    assert response.status_code == 200
    updated = response.json()["data"]["tenant"]
    assert updated["description"] == "Updated description"
    assert updated["name"] == tenant["name"]


@pytest.mark.asyncio
async def test_update_tenant_to_existing_pair_is_conflict(client: AsyncClient, tenant, test_data):
    owner = test_data.get_copy("users")["owner"]
    other = await client.post(
        "/tenants",
        json={**test_data.get_copy("tenant"), "name": "Other Tenant", "user": owner},
    )
    assert other.status_code == 201

    response = await client.put(
        f"/tenants/{other.json()['data']['tenant']['id']}",
        json={"name": tenant["name"]},
    )

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_get_tenants_for_user(client: AsyncClient, tenant, test_data):
    owner = test_data.get_copy("users")["owner"]

    response = await client.get(f"/users/{owner['ssoUserId']}/tenants")
    expanded = await client.get(
        f"/users/{owner['ssoUserId']}/tenants?expand=tenantUserRoles"
    )
    nobody = await client.get("/users/unknown-user/tenants")

    assert response.status_code == 200
    assert [t["id"] for t in response.json()["data"]["tenants"]] == [tenant["id"]]
    assert len(expanded.json()["data"]["tenants"][0]["users"]) == 1
    assert nobody.json()["data"]["tenants"] == []
