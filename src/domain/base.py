from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import DateTime, Field, SQLModel

SYSTEM_USER = "system"


def utc_now() -> datetime:
    return datetime.now(UTC)


class AuditedModel(SQLModel):
    """Identifier and audit columns shared by every table."""

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    created_date_time: datetime = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True), nullable=False
    )
    updated_date_time: datetime = Field(
        default_factory=utc_now,
        sa_type=DateTime(timezone=True),
        nullable=False,
        sa_column_kwargs={"onupdate": utc_now},
    )
    created_by: Optional[str] = Field(default=None, max_length=255)
    updated_by: Optional[str] = Field(default=None, max_length=255)

    def touch(self, updated_by: Optional[str]) -> None:
        self.updated_by = updated_by
        self.updated_date_time = utc_now()
