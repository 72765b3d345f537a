"""
Application package initializer.

``core`` holds configuration, logging and the JSON document store,
``schemas`` the pydantic models, ``services`` the announcement logic
and ``api`` the FastAPI routers.  ``main`` assembles them into the
application object re‑exported here.
"""

from .main import app, create_app  # noqa: F401
