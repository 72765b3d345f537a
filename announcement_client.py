"""Announcement Board API client.

This module defines a small client wrapper around the announcement
HTTP API.  It uses the ``requests`` library internally and exposes
one method per endpoint:

* :meth:`list_announcements` – active announcements (public view).
* :meth:`list_all` – every announcement (admin view).
* :meth:`get` – fetch a single announcement by its identifier.
* :meth:`create` – create an announcement.
* :meth:`update` – change title, content or the active flag.
* :meth:`delete` – remove an announcement.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  The message is taken
from the ``error`` field of the JSON response when the server provides
one.

Example::

    client = AnnouncementClient(base_url="http://localhost:3000")
    created, error = client.create(title="Maintenance", content="Tonight 22:00")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

PUBLIC_PATH = "/api/announcements"
ADMIN_PATH = "/api/admin/announcements"


class AnnouncementClient:
    """Client for interacting with the announcement API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[Any] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional object with a ``requests``‑compatible
                ``request`` method.  If not supplied a
                :class:`requests.Session` is created.
            timeout: Timeout in seconds for every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url`.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            try:
                body = response.json()
                if isinstance(body, dict):
                    message = body.get("error") or body.get("message") or str(body)
                else:
                    message = str(body)
            except ValueError:
                message = response.text
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if response.content:
            return response.json(), None
        return None, None

    @staticmethod
    def _fields(**fields: Any) -> Dict[str, Any]:
        # Unset keyword arguments are not sent at all.
        return {key: value for key, value in fields.items() if value is not None}

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------
    def list_announcements(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve active announcements in creation order."""
        data, error = self._request("GET", PUBLIC_PATH)
        if error:
            return [], error
        return data or [], None

    def list_all(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve every announcement, including inactive ones."""
        data, error = self._request("GET", ADMIN_PATH)
        if error:
            return [], error
        return data or [], None

    def get(self, announcement_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve a single announcement by ID."""
        return self._request("GET", f"{ADMIN_PATH}/{announcement_id}")

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------
    def create(
        self,
        title: Optional[str] = None,
        content: Optional[str] = None,
        active: Optional[bool] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Create an announcement.  Omitted fields use the server defaults."""
        payload = self._fields(title=title, content=content, active=active)
        return self._request("POST", ADMIN_PATH, json_body=payload)

    def update(
        self,
        announcement_id: Any,
        title: Optional[str] = None,
        content: Optional[str] = None,
        active: Optional[bool] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Update an announcement.  Omitted fields keep their current value."""
        payload = self._fields(title=title, content=content, active=active)
        return self._request("PUT", f"{ADMIN_PATH}/{announcement_id}", json_body=payload)

    def delete(self, announcement_id: Any) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Delete an announcement.

        Returns:
            A tuple ``(success, error)``.
        """
        data, error = self._request("DELETE", f"{ADMIN_PATH}/{announcement_id}")
        if error:
            return False, error
        return data is not None, None
