from datetime import UTC

from src.domain.base import utc_now
from src.domain.entities import Tenant, TenantRequest


def test_utc_now_is_timezone_aware():
    assert utc_now().tzinfo is UTC


def test_audit_timestamps_are_timezone_aware(tenant):
    assert tenant.created_date_time.tzinfo is UTC
    assert tenant.updated_date_time.tzinfo is UTC


def test_timestamp_columns_store_timezone():
    columns = [
        Tenant.__table__.c.created_date_time,
        Tenant.__table__.c.updated_date_time,
        TenantRequest.__table__.c.requested_at,
        TenantRequest.__table__.c.decisioned_at,
    ]
    assert all(column.type.timezone for column in columns)


def test_touch_stamps_aware_time(tenant):
    tenant.touch("owner-guid")

    assert tenant.updated_by == "owner-guid"
    assert tenant.updated_date_time.tzinfo is UTC
