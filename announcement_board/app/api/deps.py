"""
Shared FastAPI dependencies.

The store is created by ``create_app`` and kept on ``app.state`` so
every request of one application works on the same data file and
shares the same write lock.
"""

from fastapi import Request

from announcement_board.app.core.storage import AnnouncementStore


def get_store(request: Request) -> AnnouncementStore:
    """Return the store attached to the running application."""
    return request.app.state.store
