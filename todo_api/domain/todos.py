"""Todo record and request payloads."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def iso_timestamp(moment: datetime) -> str:
    """Format as UTC ISO-8601 with millisecond precision: 2026-10-19T12:00:00.123Z."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


class Todo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    completed: bool = False
    created_at: str = Field(alias="createdAt")

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)


class TodoCreate(BaseModel):
    # title stays optional here; the service answers "Title is required"
    title: Optional[str] = None
    # null is treated like an absent flag
    completed: Optional[bool] = None


class TodoUpdate(BaseModel):
    """
    Partial update. Only keys present in the request body are applied, so
    callers must look at model_fields_set rather than at None values.
    """

    title: Optional[str] = None
    completed: Optional[bool] = None

    @field_validator("title", "completed")
    @classmethod
    def _reject_null(cls, value):
        # Only runs for keys that were sent.
        if value is None:
            raise ValueError("may not be null")
        return value

    def changes(self) -> dict:
        return {name: getattr(self, name) for name in self.model_fields_set}
