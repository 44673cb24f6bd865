from uuid import uuid4

import pytest

from src.app.use_cases.shared_services import (
    GetEffectiveSharedServiceRolesUseCase,
    SharedServiceRoleToggles,
    UpdateGroupSharedServiceRolesUseCase,
)
from src.domain.entities import (
    Group,
    GroupSharedServiceRole,
    SharedService,
    SharedServiceRole,
    SsoUser,
)
from src.domain.errors import NotFoundError

from tests.utils.mock_helpers import returns_argument


@pytest.fixture
def forms():
    return SharedService(name="Forms Service", client_identifier="forms-service")


@pytest.fixture
def designer(forms):
    return SharedServiceRole(name="Form Designer", shared_service_id=forms.id)


@pytest.fixture
def viewer(forms):
    return SharedServiceRole(
        name="Form Viewer",
        shared_service_id=forms.id,
        allowed_identity_providers=["idir", "azureidir"],
    )


@pytest.fixture
def group(tenant):
    return Group(name="Reviewers", tenant_id=tenant.id)


@pytest.fixture
def toggles_uow(mock_uow, group, forms, designer, viewer):
    mock_uow.groups.get_in_tenant.return_value = group
    mock_uow.shared_services.list_for_tenant.return_value = [forms]
    mock_uow.shared_services.list_roles.return_value = [designer, viewer]
    mock_uow.shared_services.list_group_grants.return_value = []
    mock_uow.shared_services.save_grant.side_effect = returns_argument
    return mock_uow


def toggles(service, *pairs):
    return [
        SharedServiceRoleToggles(
            id=service.id,
            shared_service_roles=[{"id": role.id, "enabled": enabled} for role, enabled in pairs],
        )
    ]


@pytest.mark.asyncio
async def test_enable_role_inserts_grant(toggles_uow, tenant, group, forms, designer, viewer):
    view = await UpdateGroupSharedServiceRolesUseCase(toggles_uow).execute(
        tenant.id, group.id, toggles(forms, (designer, True), (viewer, False)), "owner-guid"
    )

    toggles_uow.shared_services.save_grant.assert_called_once()
    grant = toggles_uow.shared_services.save_grant.call_args[0][0]
    assert grant.group_id == group.id
    assert grant.shared_service_role_id == designer.id
    assert grant.created_by == "owner-guid"
    assert [s.name for s in view] == ["Forms Service"]
    toggles_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_toggles_reuse_existing_grants(toggles_uow, tenant, group, forms, designer, viewer):
    """Grant reuse

    Given a removed Designer grant and an active Viewer grant
    When Designer is enabled and Viewer disabled
    Then both rows are updated in place and no row is inserted
    """
    removed = GroupSharedServiceRole(
        group_id=group.id, shared_service_role_id=designer.id, is_deleted=True
    )
    active = GroupSharedServiceRole(group_id=group.id, shared_service_role_id=viewer.id)
    toggles_uow.shared_services.list_group_grants.return_value = [removed, active]

    await UpdateGroupSharedServiceRolesUseCase(toggles_uow).execute(
        tenant.id, group.id, toggles(forms, (designer, True), (viewer, False)), None
    )

    assert removed.is_deleted is False
    assert active.is_deleted is True
    saved = [call.args[0] for call in toggles_uow.shared_services.save_grant.call_args_list]
    assert saved == [removed, active]


@pytest.mark.asyncio
async def test_disable_without_grant_is_a_no_op(toggles_uow, tenant, group, forms, designer):
    await UpdateGroupSharedServiceRolesUseCase(toggles_uow).execute(
        tenant.id, group.id, toggles(forms, (designer, False)), None
    )

    toggles_uow.shared_services.save_grant.assert_not_called()


@pytest.mark.asyncio
async def test_unassociated_shared_service_is_not_found(toggles_uow, tenant, group, designer):
    other = SharedService(name="Maps Service", client_identifier="maps-service")

    with pytest.raises(NotFoundError, match="not associated"):
        await UpdateGroupSharedServiceRolesUseCase(toggles_uow).execute(
            tenant.id, group.id, toggles(other, (designer, True)), None
        )

    toggles_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_role_is_not_found(toggles_uow, tenant, group, forms):
    stray = SharedServiceRole(name="Map Editor", shared_service_id=uuid4())

    with pytest.raises(NotFoundError, match="Shared service role not found"):
        await UpdateGroupSharedServiceRolesUseCase(toggles_uow).execute(
            tenant.id, group.id, toggles(forms, (stray, True)), None
        )


@pytest.mark.asyncio
async def test_effective_roles_are_deduplicated_and_filtered(
    mock_uow, tenant, tenant_user, designer, viewer
):
    """Effective roles

    Given a business member in two groups that both grant Designer, and one granting Viewer
    When the member's effective roles are resolved
    Then Designer appears once listing both groups, and Viewer is filtered out by provider
    """
    reviewers = Group(name="Reviewers", tenant_id=tenant.id)
    approvers = Group(name="Approvers", tenant_id=tenant.id)
    business = SsoUser(sso_user_id="business-guid", display_name="Bo", idp_type="bceidbusiness")
    mock_uow.tenant_users.get_active_by_sso_user_id.return_value = tenant_user
    mock_uow.sso_users.get_by_sso_user_id.return_value = business
    mock_uow.groups.list_for_tenant_user.return_value = [reviewers, approvers]
    mock_uow.shared_services.list_enabled_grants.return_value = [
        (reviewers.id, designer),
        (approvers.id, designer),
        (reviewers.id, viewer),
    ]

    roles = await GetEffectiveSharedServiceRolesUseCase(mock_uow).execute(
        tenant.id, business.sso_user_id, "forms-service"
    )

    assert [r.name for r in roles] == ["Form Designer"]
    assert sorted(g.name for g in roles[0].groups) == ["Approvers", "Reviewers"]
    assert mock_uow.shared_services.list_enabled_grants.call_args.kwargs == {
        "client_identifier": "forms-service"
    }


@pytest.mark.asyncio
async def test_effective_roles_without_audience_are_empty(mock_uow, tenant, tenant_user, sso_user, group):
    mock_uow.tenant_users.get_active_by_sso_user_id.return_value = tenant_user
    mock_uow.sso_users.get_by_sso_user_id.return_value = sso_user
    mock_uow.groups.list_for_tenant_user.return_value = [group]

    roles = await GetEffectiveSharedServiceRolesUseCase(mock_uow).execute(
        tenant.id, sso_user.sso_user_id, None
    )

    assert roles == []
    mock_uow.shared_services.list_enabled_grants.assert_not_called()


@pytest.mark.asyncio
async def test_effective_roles_of_non_member_is_not_found(mock_uow, tenant):
    mock_uow.tenant_users.get_active_by_sso_user_id.return_value = None

    with pytest.raises(NotFoundError, match="not a member"):
        await GetEffectiveSharedServiceRolesUseCase(mock_uow).execute(
            tenant.id, "stranger", "forms-service"
        )
