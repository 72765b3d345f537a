"""
Service layer for announcements.

This module implements the read‑modify‑write cycle behind every
endpoint.  Each call loads the complete collection from the store,
works on it in memory and, for mutations, hands the whole collection
back to the store inside a ``transaction`` so concurrent writes are
applied one after another.

Lookups return ``None`` (or ``False`` for deletion) when the requested
id does not exist; the API layer turns that into a 404 response.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from announcement_board.app.core.storage import AnnouncementStore, utc_timestamp
from announcement_board.app.schemas.announcement import (
    Announcement,
    AnnouncementCreate,
    AnnouncementUpdate,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled"
DEFAULT_CONTENT = ""

_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_announcement_id(raw: str) -> Optional[int]:
    """Convert a path segment to an announcement id.

    Non‑numeric identifiers return ``None``, which matches no record.
    """
    if raw is None or not _ID_PATTERN.fullmatch(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        # Longer than the interpreter's integer string conversion limit.
        return None


def _find_index(announcements: List[Announcement], announcement_id: Optional[int]) -> int:
    if announcement_id is None:
        return -1
    for index, item in enumerate(announcements):
        if item.id == announcement_id:
            return index
    return -1


class AnnouncementService:
    """Service class for managing announcements."""

    @classmethod
    async def list_public(cls, store: AnnouncementStore) -> List[Announcement]:
        """Return active announcements in stored order."""
        return [item for item in store.load() if item.active]

    @classmethod
    async def list_all(cls, store: AnnouncementStore) -> List[Announcement]:
        """Return every announcement, active or not, in stored order."""
        return store.load()

    @classmethod
    async def get_announcement(
        cls, store: AnnouncementStore, announcement_id: Optional[int]
    ) -> Optional[Announcement]:
        """Retrieve a single announcement by its ID."""
        announcements = store.load()
        index = _find_index(announcements, announcement_id)
        if index == -1:
            return None
        return announcements[index]

    @classmethod
    async def create_announcement(
        cls, store: AnnouncementStore, data: AnnouncementCreate
    ) -> Announcement:
        """Append a new announcement and return it.

        The id is one more than the highest id currently stored, or 1
        for an empty collection.
        """
        with store.transaction() as announcements:
            new_id = max((item.id for item in announcements), default=0) + 1
            announcement = Announcement(
                id=new_id,
                title=data.title if data.title is not None else DEFAULT_TITLE,
                content=data.content if data.content is not None else DEFAULT_CONTENT,
                date=utc_timestamp(),
                active=data.active is not False,
            )
            announcements.append(announcement)
        logger.info("Created announcement %s", new_id)
        return announcement

    @classmethod
    async def update_announcement(
        cls, store: AnnouncementStore, announcement_id: Optional[int], data: AnnouncementUpdate
    ) -> Optional[Announcement]:
        """Update an existing announcement.

        Only fields provided with a non‑null value are replaced.
        ``updatedAt`` is refreshed on every call, even when nothing
        else changes.  Returns ``None`` if the record does not exist.
        """
        with store.transaction() as announcements:
            index = _find_index(announcements, announcement_id)
            if index == -1:
                return None
            current = announcements[index]
            changes = {
                key: value
                for key, value in data.model_dump().items()
                if value is not None
            }
            changes["updated_at"] = utc_timestamp()
            updated = current.model_copy(update=changes)
            announcements[index] = updated
        logger.info("Updated announcement %s", updated.id)
        return updated

    @classmethod
    async def delete_announcement(
        cls, store: AnnouncementStore, announcement_id: Optional[int]
    ) -> bool:
        """Delete an announcement by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        with store.transaction() as announcements:
            index = _find_index(announcements, announcement_id)
            if index == -1:
                return False
            del announcements[index]
        logger.info("Deleted announcement %s", announcement_id)
        return True
