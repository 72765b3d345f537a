"""
HTML pages bundled with the service.

``/`` serves the public landing page and ``/admin`` the admin page.
Both files live in the configured static directory; other assets in
that directory are mounted at the site root by ``create_app``.
"""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

router = APIRouter()


def _page(request: Request, name: str) -> FileResponse:
    static_dir = Path(request.app.state.settings.static_dir)
    return FileResponse(static_dir / name, media_type="text/html")


@router.get("/", include_in_schema=False)
async def landing_page(request: Request) -> FileResponse:
    return _page(request, "index.html")


@router.get("/admin", include_in_schema=False)
async def admin_page(request: Request) -> FileResponse:
    return _page(request, "admin.html")
