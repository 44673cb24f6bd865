import pytest
from httpx import AsyncClient

from tests.utils.json_compare import names, role_id


async def create_group(client: AsyncClient, tenant: dict, name: str = "Reviewers", **extra):
    response = await client.post(
        f"/tenants/{tenant['id']}/groups",
        json={"name": name, "description": "Reviews permits", **extra},
    )
    assert response.status_code == 201
    return response.json()["data"]["group"]


@pytest.mark.asyncio
async def test_create_group_with_initial_member(client: AsyncClient, tenant, test_data):
    owner = test_data.get_copy("users")["owner"]

    group = await create_group(client, tenant, tenantUserId=tenant["users"][0]["id"])

    assert group["tenantId"] == tenant["id"]
    assert group["createdBy"] == owner["displayName"]
    expanded = await client.get(
        f"/tenants/{tenant['id']}/groups/{group['id']}?expand=groupUsers"
    )
    members = expanded.json()["data"]["group"]["groupUsers"]
    assert [m["ssoUser"]["ssoUserId"] for m in members] == [owner["ssoUserId"]]


@pytest.mark.asyncio
async def test_duplicate_group_name_is_conflict(client: AsyncClient, tenant):
    await create_group(client, tenant)

    response = await client.post(
        f"/tenants/{tenant['id']}/groups", json={"name": "Reviewers"}
    )

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_update_group(client: AsyncClient, tenant):
    group = await create_group(client, tenant)
    await create_group(client, tenant, name="Approvers")
    url = f"/tenants/{tenant['id']}/groups/{group['id']}"

    renamed = await client.put(url, json={"name": "Senior Reviewers"})
    clash = await client.put(url, json={"name": "Approvers"})
    same = await client.put(url, json={"name": "Senior Reviewers", "description": "New"})

    assert renamed.status_code == 200
    assert renamed.json()["data"]["group"]["name"] == "Senior Reviewers"
    assert clash.status_code == 409
    assert same.status_code == 200
    assert same.json()["data"]["group"]["description"] == "New"


@pytest.mark.asyncio
async def test_group_re_add_restores_membership(client: AsyncClient, tenant, test_data, db_session):
    """Group re-add

    Given a user who was removed from a group
    When the user is added to the group again
    Then the same group membership row is reactivated
    """
    from sqlmodel import select
    from src.domain.entities import GroupUser

    owner = test_data.get_copy("users")["owner"]
    group = await create_group(client, tenant)
    users_url = f"/tenants/{tenant['id']}/groups/{group['id']}/users"

    added = await client.post(users_url, json={"user": owner})
    assert added.status_code == 201
    group_user = added.json()["data"]["groupUser"]
    assert group_user["tenantUser"]["id"] == tenant["users"][0]["id"]

    removed = await client.delete(f"{users_url}/{group_user['id']}")
    assert removed.status_code == 204
    removed_again = await client.delete(f"{users_url}/{group_user['id']}")
    assert removed_again.status_code == 404

    re_added = await client.post(users_url, json={"user": owner})

    assert re_added.status_code == 201
    restored = re_added.json()["data"]["groupUser"]
    assert restored["id"] == group_user["id"]
    assert restored["isDeleted"] is False
    result = await db_session.exec(select(GroupUser))
    assert len(result.all()) == 1


@pytest.mark.asyncio
async def test_add_active_group_member_is_conflict(client: AsyncClient, tenant, test_data):
    owner = test_data.get_copy("users")["owner"]
    group = await create_group(client, tenant)
    users_url = f"/tenants/{tenant['id']}/groups/{group['id']}/users"
    assert (await client.post(users_url, json={"user": owner})).status_code == 201

    response = await client.post(users_url, json={"user": owner})

    assert response.status_code == 409
    assert response.json()["message"] == "User is already a member of this group"


@pytest.mark.asyncio
async def test_add_group_user_onboards_non_member(client: AsyncClient, tenant, test_data):
    """Given a user outside the tenant, adding them to a group makes them a Service User"""
    member = test_data.get_copy("users")["member"]
    group = await create_group(client, tenant)

    response = await client.post(
        f"/tenants/{tenant['id']}/groups/{group['id']}/users", json={"user": member}
    )

    assert response.status_code == 201
    tenant_user = response.json()["data"]["groupUser"]["tenantUser"]
    assert tenant_user["ssoUser"]["ssoUserId"] == member["ssoUserId"]
    assert names(tenant_user["roles"]) == ["TMS.SERVICE_USER"]

    by_group = await client.get(
        f"/tenants/{tenant['id']}/users", params={"groupIds": group["id"]}
    )
    assert [u["id"] for u in by_group.json()["data"]["users"]] == [tenant_user["id"]]


@pytest.mark.asyncio
async def test_removing_tenant_user_leaves_groups(client: AsyncClient, tenant, test_data):
    member = test_data.get_copy("users")["member"]
    added = await client.post(
        f"/tenants/{tenant['id']}/users",
        json={"user": member, "roles": [role_id(tenant, "TMS.SERVICE_USER")]},
    )
    tenant_user_id = added.json()["data"]["user"]["id"]
    group = await create_group(client, tenant, tenantUserId=tenant_user_id)

    assert (await client.delete(f"/tenants/{tenant['id']}/users/{tenant_user_id}")).status_code == 204

    expanded = await client.get(
        f"/tenants/{tenant['id']}/groups/{group['id']}?expand=groupUsers"
    )
    assert expanded.json()["data"]["group"]["groupUsers"] == []


@pytest.mark.asyncio
async def test_tenant_groups_visible_to_members_only(client: AsyncClient, tenant, token, test_data):
    await create_group(client, tenant)
    await create_group(client, tenant, name="Approvers")

    listing = await client.get(f"/tenants/{tenant['id']}/groups")
    token.login(test_data.get_copy("users")["member"])
    outsider = await client.get(f"/tenants/{tenant['id']}/groups")

    assert listing.status_code == 200
    assert names(listing.json()["data"]["groups"]) == ["Approvers", "Reviewers"]
    assert outsider.status_code == 403
