"""
Administrative announcement endpoints.

These routes expose the full collection, including inactive entries,
and the create/update/delete operations used by the admin page.

The ``announcement_id`` path parameter is taken as a string and parsed
by the service layer: an identifier that is not a number simply does
not match any announcement, so the response is the usual 404 rather
than a validation error.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from announcement_board.app.api.deps import get_store
from announcement_board.app.core.storage import AnnouncementStore
from announcement_board.app.schemas.announcement import (
    Announcement,
    AnnouncementCreate,
    AnnouncementUpdate,
    Message,
)
from announcement_board.app.services.announcement_service import (
    AnnouncementService,
    parse_announcement_id,
)

router = APIRouter()

NOT_FOUND = "Announcement not found"


@router.get("", response_model=List[Announcement], response_model_exclude_none=True)
async def list_announcements(
    store: AnnouncementStore = Depends(get_store),
) -> List[Announcement]:
    """Return every announcement, active or not."""
    return await AnnouncementService.list_all(store)


@router.get("/{announcement_id}", response_model=Announcement, response_model_exclude_none=True)
async def get_announcement(
    announcement_id: str,
    store: AnnouncementStore = Depends(get_store),
) -> Announcement:
    """Retrieve a single announcement by ID."""
    announcement = await AnnouncementService.get_announcement(
        store, parse_announcement_id(announcement_id)
    )
    if announcement is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return announcement


@router.post(
    "",
    response_model=Announcement,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_announcement(
    data: Optional[AnnouncementCreate] = Body(None),
    store: AnnouncementStore = Depends(get_store),
) -> Announcement:
    """Create a new announcement.  An empty body creates one with defaults."""
    return await AnnouncementService.create_announcement(store, data or AnnouncementCreate())


@router.put("/{announcement_id}", response_model=Announcement, response_model_exclude_none=True)
async def update_announcement(
    announcement_id: str,
    data: Optional[AnnouncementUpdate] = Body(None),
    store: AnnouncementStore = Depends(get_store),
) -> Announcement:
    """Update title, content or active flag of an announcement."""
    announcement = await AnnouncementService.update_announcement(
        store, parse_announcement_id(announcement_id), data or AnnouncementUpdate()
    )
    if announcement is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return announcement


@router.delete("/{announcement_id}", response_model=Message)
async def delete_announcement(
    announcement_id: str,
    store: AnnouncementStore = Depends(get_store),
) -> Message:
    """Delete an announcement."""
    deleted = await AnnouncementService.delete_announcement(
        store, parse_announcement_id(announcement_id)
    )
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return Message(message="Announcement deleted")
