"""
Top‑level API router.

Public and administrative announcement routes are grouped here and
mounted under ``/api`` by ``create_app``:

* ``/api/announcements`` – active announcements only.
* ``/api/admin/announcements`` – full collection and CRUD operations.
"""

from fastapi import APIRouter

from .endpoints import admin, announcements

router = APIRouter()

router.include_router(announcements.router, prefix="/announcements", tags=["announcements"])
router.include_router(admin.router, prefix="/admin/announcements", tags=["admin"])
