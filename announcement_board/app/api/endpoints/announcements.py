"""
Public announcement endpoints.

Only active announcements are visible here.  Clients such as the
landing page poll this list; no authentication is involved.
"""

from typing import List

from fastapi import APIRouter, Depends

from announcement_board.app.api.deps import get_store
from announcement_board.app.core.storage import AnnouncementStore
from announcement_board.app.schemas.announcement import Announcement
from announcement_board.app.services.announcement_service import AnnouncementService

router = APIRouter()


@router.get("", response_model=List[Announcement], response_model_exclude_none=True)
async def list_active_announcements(
    store: AnnouncementStore = Depends(get_store),
) -> List[Announcement]:
    """Return active announcements in the order they were created."""
    return await AnnouncementService.list_public(store)
