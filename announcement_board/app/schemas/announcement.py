"""
Pydantic schemas for announcements.

``Announcement`` is both the persisted record and the response body.
Its ``updated_at`` attribute is exposed under the JSON key
``updatedAt`` and is left out of responses until the record has been
updated at least once.

``AnnouncementCreate`` and ``AnnouncementUpdate`` describe request
bodies.  Every field is optional and input is lenient: a value of the
wrong JSON type is treated as if it had not been supplied, so it falls
back to the default on creation and leaves the stored value untouched
on update.  A body that is not a JSON object counts as ``{}``.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator, model_validator


class Announcement(BaseModel):
    """Schema for a stored announcement."""

    model_config = ConfigDict(populate_by_name=True)

    id: StrictInt
    title: StrictStr
    content: StrictStr
    date: StrictStr = Field(..., description="Creation time, ISO‑8601 UTC")
    active: StrictBool
    updated_at: Optional[StrictStr] = Field(
        None, alias="updatedAt", description="Time of the last update, ISO‑8601 UTC"
    )

    def to_document(self) -> dict:
        """Return the JSON object written to the data file."""
        return self.model_dump(by_alias=True, exclude_none=True)


def _text_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _flag_or_none(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


class AnnouncementInput(BaseModel):
    """Fields accepted by the create and update endpoints.

    A body that is not a JSON object (an array, a string, a number) is
    read as ``{}``.
    """

    title: Optional[str] = None
    content: Optional[str] = None
    active: Optional[bool] = None

    @model_validator(mode="before")
    @classmethod
    def ignore_non_object(cls, data):
        return data if isinstance(data, dict) else {}

    @field_validator("title", "content", mode="before")
    @classmethod
    def ignore_non_text(cls, v):
        return _text_or_none(v)

    @field_validator("active", mode="before")
    @classmethod
    def ignore_non_bool(cls, v):
        return _flag_or_none(v)


class AnnouncementCreate(AnnouncementInput):
    """Schema for creating an announcement.

    Missing fields get ``title="Untitled"``, ``content=""`` and
    ``active=True``.  The defaults are applied by the service, not here,
    so that ``None`` always means "not supplied".
    """


class AnnouncementUpdate(AnnouncementInput):
    """Schema for updating an announcement.

    All fields are optional; only non‑null values replace stored ones.
    """


class Message(BaseModel):
    """Acknowledgement returned by the delete endpoint."""

    message: str
