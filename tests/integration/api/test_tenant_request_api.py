import pytest
from httpx import AsyncClient

from tests.utils.json_compare import names

OPERATIONS_ADMIN = "TMS.OPERATIONS_ADMIN"


async def request_tenant(client: AsyncClient, token, test_data, name: str = "Digital Permits"):
    token.login(test_data.user("member"))
    response = await client.post(
        "/tenant-requests", json=test_data.payload("tenant", user="member", name=name)
    )
    assert response.status_code == 201
    return response.json()["data"]["tenantRequest"]


def login_ops_admin(token, test_data):
    token.login(test_data.get_copy("users")["ops_admin"], client_roles=[OPERATIONS_ADMIN])


@pytest.mark.asyncio
async def test_create_tenant_request(client: AsyncClient, token, test_data):
    member = test_data.get_copy("users")["member"]

    tenant_request = await request_tenant(client, token, test_data)

    assert tenant_request["status"] == "NEW"
    assert tenant_request["requestedBy"] == member["displayName"]
    assert tenant_request["decisionedBy"] is None


@pytest.mark.asyncio
async def test_request_for_existing_tenant_is_conflict(client: AsyncClient, tenant, token, test_data):
    member = test_data.get_copy("users")["member"]
    token.login(member)

    response = await client.post(
        "/tenant-requests", json={**test_data.get_copy("tenant"), "user": member}
    )

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_approve_tenant_request(client: AsyncClient, token, test_data):
    """Approval

    Given a NEW tenant request
    When an operations admin approves it
    Then the tenant exists, owned by the requester, and the decision is stamped
    """
    users = test_data.get_copy("users")
    tenant_request = await request_tenant(client, token, test_data)
    login_ops_admin(token, test_data)

    response = await client.patch(
        f"/tenant-requests/{tenant_request['id']}/status", json={"status": "APPROVED"}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["tenantRequest"]["status"] == "APPROVED"
    assert data["tenantRequest"]["decisionedBy"] == users["ops_admin"]["displayName"]
    assert data["tenantRequest"]["decisionedAt"] is not None
    owner = data["tenant"]["users"][0]
    assert owner["ssoUser"]["ssoUserId"] == users["member"]["ssoUserId"]
    assert names(owner["roles"]) == ["TMS.SERVICE_USER", "TMS.TENANT_OWNER", "TMS.USER_ADMIN"]

    decided_again = await client.patch(
        f"/tenant-requests/{tenant_request['id']}/status", json={"status": "APPROVED"}
    )
    assert decided_again.status_code == 409


@pytest.mark.asyncio
async def test_approve_with_tenant_name_override(client: AsyncClient, token, test_data):
    tenant_request = await request_tenant(client, token, test_data)
    login_ops_admin(token, test_data)

    response = await client.patch(
        f"/tenant-requests/{tenant_request['id']}/status",
        json={"status": "APPROVED", "tenantName": "Permit Hub"},
    )

    assert response.status_code == 200
    assert response.json()["data"]["tenant"]["name"] == "Permit Hub"


@pytest.mark.asyncio
async def test_reject_requires_reason(client: AsyncClient, token, test_data):
    tenant_request = await request_tenant(client, token, test_data)
    login_ops_admin(token, test_data)
    url = f"/tenant-requests/{tenant_request['id']}/status"

    missing_reason = await client.patch(url, json={"status": "REJECTED"})
    rejected = await client.patch(
        url, json={"status": "REJECTED", "rejectionReason": "Use an existing tenant"}
    )

    assert missing_reason.status_code == 400
    assert missing_reason.json()["name"] == "ValidationError"
    assert rejected.status_code == 200
    data = rejected.json()["data"]
    assert data["tenantRequest"]["status"] == "REJECTED"
    assert data["tenantRequest"]["rejectionReason"] == "Use an existing tenant"
    assert "tenant" not in data


@pytest.mark.asyncio
async def test_approval_of_existing_tenant_changes_nothing(client: AsyncClient, token, test_data):
    """Given a tenant created after the request, approval is a Conflict and the request stays NEW"""
    users = test_data.get_copy("users")
    tenant_request = await request_tenant(client, token, test_data)
    token.login(users["owner"])
    created = await client.post(
        "/tenants", json={**test_data.get_copy("tenant"), "user": users["owner"]}
    )
    assert created.status_code == 201
    login_ops_admin(token, test_data)

    response = await client.patch(
        f"/tenant-requests/{tenant_request['id']}/status", json={"status": "APPROVED"}
    )

    assert response.status_code == 409
    pending = await client.get("/tenant-requests", params={"status": "NEW"})
    assert [r["id"] for r in pending.json()["data"]["tenantRequests"]] == [tenant_request["id"]]


@pytest.mark.asyncio
async def test_list_tenant_requests(client: AsyncClient, token, test_data):
    first = await request_tenant(client, token, test_data)
    await request_tenant(client, token, test_data, name="Second Request")
    forbidden = await client.get("/tenant-requests")
    login_ops_admin(token, test_data)
    await client.patch(
        f"/tenant-requests/{first['id']}/status",
        json={"status": "REJECTED", "rejectionReason": "Duplicate"},
    )

    everything = await client.get("/tenant-requests")
    rejected = await client.get("/tenant-requests", params={"status": "REJECTED"})
    invalid = await client.get("/tenant-requests", params={"status": "PENDING"})

    assert forbidden.status_code == 403
    assert names(everything.json()["data"]["tenantRequests"]) == [
        "Digital Permits",
        "Second Request",
    ]
    assert [r["id"] for r in rejected.json()["data"]["tenantRequests"]] == [first["id"]]
    assert invalid.status_code == 400
