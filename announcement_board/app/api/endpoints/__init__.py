"""
Endpoint modules.

Each module defines an ``APIRouter``; the announcement routers are
aggregated in ``api/router.py`` and the pages router is included
directly by ``create_app``.
"""
