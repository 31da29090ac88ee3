from datetime import UTC, datetime

from pydantic import BaseModel, field_validator
from pydantic import Field as PydanticField


def ensure_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class Entity(BaseModel):
    """Base entity class with a storage-assigned integer identifier."""

    id: int | None = PydanticField(
        default=None,
        description="Surrogate key assigned by storage; None until persisted",
    )

    created_at: datetime = PydanticField(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = PydanticField(default=None)

    @field_validator("created_at", "updated_at", mode="after")
    @classmethod
    def _normalize_timestamps(cls, value: datetime | None) -> datetime | None:
        # SQLite hands back naive timestamps
        return ensure_utc(value)
