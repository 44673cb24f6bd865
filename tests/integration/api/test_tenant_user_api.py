from uuid import UUID, uuid4

import pytest
from httpx import AsyncClient

from tests.utils.json_compare import names, role_id

OWNER_FLOOR = "at least one tenant owner must remain"


async def add_user(client: AsyncClient, tenant: dict, user: dict, *role_names: str):
    response = await client.post(
        f"/tenants/{tenant['id']}/users",
        json={"user": user, "roles": [role_id(tenant, name) for name in role_names]},
    )
    return response


@pytest.mark.asyncio
async def test_add_tenant_user(client: AsyncClient, tenant, test_data):
    member = test_data.get_copy("users")["member"]

    response = await add_user(client, tenant, member, "TMS.SERVICE_USER")

    assert response.status_code == 201
    user = response.json()["data"]["user"]
    assert user["ssoUser"]["ssoUserId"] == member["ssoUserId"]
    assert names(user["roles"]) == ["TMS.SERVICE_USER"]

    listing = await client.get(f"/tenants/{tenant['id']}/users")
    assert len(listing.json()["data"]["users"]) == 2


@pytest.mark.asyncio
async def test_add_existing_member_is_conflict(client: AsyncClient, tenant, test_data):
    """Membership uniqueness

    Given an active member
    When the same subject is added again
    Then the response is 409 and the tenant still has one membership for it
    """
    member = test_data.get_copy("users")["member"]
    assert (await add_user(client, tenant, member, "TMS.SERVICE_USER")).status_code == 201

    response = await add_user(client, tenant, member, "TMS.USER_ADMIN")

    assert response.status_code == 409
    assert "already added" in response.json()["message"]
    listing = await client.get(f"/tenants/{tenant['id']}/users")
    subjects = [u["ssoUser"]["ssoUserId"] for u in listing.json()["data"]["users"]]
    assert subjects.count(member["ssoUserId"]) == 1


@pytest.mark.asyncio
async def test_business_user_only_receives_service_user(client: AsyncClient, tenant, test_data):
    business = test_data.get_copy("users")["business"]

    response = await add_user(
        client, tenant, business, "TMS.TENANT_OWNER", "TMS.USER_ADMIN"
    )

    assert response.status_code == 201
    assert names(response.json()["data"]["user"]["roles"]) == ["TMS.SERVICE_USER"]


@pytest.mark.asyncio
async def test_add_user_requires_manager_role(client: AsyncClient, tenant, token, test_data):
    users = test_data.get_copy("users")
    assert (await add_user(client, tenant, users["member"], "TMS.SERVICE_USER")).status_code == 201
    token.login(users["member"])

    response = await add_user(client, tenant, users["second_owner"], "TMS.SERVICE_USER")

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_add_user_validates_role_count(client: AsyncClient, tenant, test_data):
    member = test_data.get_copy("users")["member"]

    response = await client.post(
        f"/tenants/{tenant['id']}/users", json={"user": member, "roles": []}
    )

    assert response.status_code == 400
    assert [d["path"] for d in response.json()["details"]["body"]] == ["roles"]


@pytest.mark.asyncio
async def test_remove_last_owner_is_conflict(client: AsyncClient, tenant):
    """Last owner removal

    Given a tenant with a single Tenant Owner
    When that owner is removed
    Then the response is 409 and the owner stays a member
    """
    owner_id = tenant["users"][0]["id"]

    response = await client.delete(f"/tenants/{tenant['id']}/users/{owner_id}")

    assert response.status_code == 409
    assert OWNER_FLOOR in response.json()["message"]
    fetched = await client.get(f"/tenants/{tenant['id']}/users/{owner_id}")
    assert fetched.status_code == 200


@pytest.mark.asyncio
async def test_remove_and_restore_member(client: AsyncClient, tenant, test_data):
    member = test_data.get_copy("users")["member"]
    added = (await add_user(client, tenant, member, "TMS.USER_ADMIN")).json()["data"]["user"]

    removed = await client.delete(f"/tenants/{tenant['id']}/users/{added['id']}")
    assert removed.status_code == 204
    assert (await client.get(f"/tenants/{tenant['id']}/users/{added['id']}")).status_code == 404

    restored = await add_user(client, tenant, member, "TMS.SERVICE_USER")

    assert restored.status_code == 201
    user = restored.json()["data"]["user"]
    assert user["id"] == added["id"]
    assert names(user["roles"]) == ["TMS.SERVICE_USER"]


@pytest.mark.asyncio
async def test_unassign_last_owner_role_is_conflict(client: AsyncClient, tenant):
    owner_id = tenant["users"][0]["id"]
    owner_role = role_id(tenant, "TMS.TENANT_OWNER")

    response = await client.delete(
        f"/tenants/{tenant['id']}/users/{owner_id}/roles/{owner_role}"
    )

    assert response.status_code == 409
    assert OWNER_FLOOR in response.json()["message"]


@pytest.mark.asyncio
async def test_unassign_owner_role_with_second_owner(client: AsyncClient, tenant, test_data):
    second = test_data.get_copy("users")["second_owner"]
    assert (await add_user(client, tenant, second, "TMS.TENANT_OWNER")).status_code == 201
    owner_id = tenant["users"][0]["id"]
    owner_role = role_id(tenant, "TMS.TENANT_OWNER")

    response = await client.delete(
        f"/tenants/{tenant['id']}/users/{owner_id}/roles/{owner_role}"
    )

    assert response.status_code == 204
    roles = await client.get(f"/tenants/{tenant['id']}/users/{owner_id}/roles")
    assert "TMS.TENANT_OWNER" not in names(roles.json()["data"]["roles"])


@pytest.mark.asyncio
async def test_unassign_last_role_is_conflict(client: AsyncClient, tenant, test_data):
    member = test_data.get_copy("users")["member"]
    added = (await add_user(client, tenant, member, "TMS.SERVICE_USER")).json()["data"]["user"]

    response = await client.delete(
        f"/tenants/{tenant['id']}/users/{added['id']}/roles/{role_id(tenant, 'TMS.SERVICE_USER')}"
    )

    assert response.status_code == 409
    assert "last role" in response.json()["message"]


@pytest.mark.asyncio
async def test_assign_roles_batch_is_atomic(client: AsyncClient, tenant, test_data):
    """Atomic role batch

    Given a member holding only Service User
    When User Admin and an unknown role are assigned together
    Then the response is 404 and User Admin is not assigned
    """
    member = test_data.get_copy("users")["member"]
    added = (await add_user(client, tenant, member, "TMS.SERVICE_USER")).json()["data"]["user"]
    roles_url = f"/tenants/{tenant['id']}/users/{added['id']}/roles"

    response = await client.post(
        roles_url, json={"roles": [role_id(tenant, "TMS.USER_ADMIN"), str(uuid4())]}
    )

    assert response.status_code == 404
    held = await client.get(roles_url)
    assert names(held.json()["data"]["roles"]) == ["TMS.SERVICE_USER"]


@pytest.mark.asyncio
async def test_assign_roles(client: AsyncClient, tenant, test_data):
    member = test_data.get_copy("users")["member"]
    added = (await add_user(client, tenant, member, "TMS.SERVICE_USER")).json()["data"]["user"]
    roles_url = f"/tenants/{tenant['id']}/users/{added['id']}/roles"

    response = await client.post(
        roles_url,
        json={
            "roles": [
                role_id(tenant, "TMS.SERVICE_USER"),
                role_id(tenant, "TMS.USER_ADMIN"),
            ]
        },
    )
    again = await client.post(roles_url, json={"roles": [role_id(tenant, "TMS.USER_ADMIN")]})

    assert response.status_code == 201
    assigned = response.json()["data"]["roles"]
    assert [a["role"]["name"] for a in assigned] == ["TMS.USER_ADMIN"]
    assert again.status_code == 409
    assert again.json()["message"] == "All roles are already assigned to the user"


@pytest.mark.asyncio
async def test_reassign_unassigned_role_restores_row(client: AsyncClient, tenant, test_data, db_session):
    """No duplicate active role: an unassigned role comes back on the same row"""
    from sqlmodel import select
    from src.domain.entities import TenantUserRole

    member = test_data.get_copy("users")["member"]
    added = (
        await add_user(client, tenant, member, "TMS.SERVICE_USER", "TMS.USER_ADMIN")
    ).json()["data"]["user"]
    roles_url = f"/tenants/{tenant['id']}/users/{added['id']}/roles"
    admin_role = role_id(tenant, "TMS.USER_ADMIN")

    assert (await client.delete(f"{roles_url}/{admin_role}")).status_code == 204
    assert (await client.post(roles_url, json={"roles": [admin_role]})).status_code == 201

    result = await db_session.exec(
        select(TenantUserRole).where(TenantUserRole.role_id == UUID(admin_role))
    )
    rows = [row for row in result.all() if str(row.tenant_user_id) == added["id"]]
    assert len(rows) == 1
    assert rows[0].is_deleted is False


@pytest.mark.asyncio
async def test_tenant_roles_and_sso_user_roles(client: AsyncClient, tenant, test_data):
    owner = test_data.get_copy("users")["owner"]

    created = await client.post(
        f"/tenants/{tenant['id']}/roles",
        json={"role": {"name": "Auditor", "description": "Reads everything"}},
    )
    duplicate = await client.post(
        f"/tenants/{tenant['id']}/roles",
        json={"role": {"name": "TMS.USER_ADMIN", "description": "Shadow"}},
    )
    tenant_roles = await client.get(f"/tenants/{tenant['id']}/roles")
    sso_roles = await client.get(
        f"/tenants/{tenant['id']}/ssousers/{owner['ssoUserId']}/roles"
    )
    stranger_roles = await client.get(f"/tenants/{tenant['id']}/ssousers/stranger/roles")

    assert created.status_code == 201
    assert created.json()["data"]["role"]["tenantId"] == tenant["id"]
    assert duplicate.status_code == 409
    assert "Auditor" in names(tenant_roles.json()["data"]["roles"])
    assert len(sso_roles.json()["data"]["roles"]) == 3
    assert stranger_roles.json()["data"]["roles"] == []


@pytest.mark.asyncio
async def test_get_tenant_user_expansions(client: AsyncClient, tenant):
    owner_id = tenant["users"][0]["id"]
    url = f"/tenants/{tenant['id']}/users/{owner_id}"

    plain = (await client.get(url)).json()["data"]["tenantUser"]
    expanded = (await client.get(f"{url}?expand=roles,groups")).json()["data"]["tenantUser"]

    assert plain["roles"] == []
    assert plain["groups"] is None
    assert len(expanded["roles"]) == 3
    assert expanded["groups"] == []
    assert expanded["sharedServiceRoles"] is None
