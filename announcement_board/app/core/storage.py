"""
JSON document storage for the announcement collection.

The whole collection lives in a single JSON file containing an array
of announcement objects.  ``AnnouncementStore`` is the only code that
touches this file:

* ``load`` re‑reads the document on every call; nothing is cached.
* ``save`` rewrites the whole document.  The new content is written to
  a temporary file next to the target and then moved over it with
  ``os.replace`` so a reader never sees a half‑written collection.
* ``initialize`` creates the data directory and seeds the document on
  first start.
* ``transaction`` serialises read‑modify‑write cycles through one lock
  per store so two concurrent mutations cannot overwrite each other.

Any I/O or format problem is reported as ``StorageError``.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, List, Sequence, Union

from pydantic import ValidationError

from announcement_board.app.schemas.announcement import Announcement

logger = logging.getLogger(__name__)

WELCOME_TITLE = "Welcome to Announcements"
WELCOME_CONTENT = "This is your first announcement. Edit it from the admin panel."


class StorageError(RuntimeError):
    """Raised when the data document cannot be read or written."""


def utc_timestamp() -> str:
    """Return the current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class AnnouncementStore:
    """Persist the announcement collection as one JSON document."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._lock = threading.RLock()

    def load(self) -> List[Announcement]:
        """Return the full collection in stored order."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError as exc:
            raise StorageError(f"Data file {self.path} does not exist") from exc
        except (OSError, ValueError) as exc:
            raise StorageError(f"Cannot read data file {self.path}: {exc}") from exc

        if not isinstance(raw, list):
            raise StorageError(f"Data file {self.path} does not contain a JSON array")
        try:
            return [Announcement.model_validate(item) for item in raw]
        except ValidationError as exc:
            raise StorageError(f"Data file {self.path} contains an invalid record: {exc}") from exc

    def save(self, announcements: Sequence[Announcement]) -> None:
        """Overwrite the document with ``announcements`` in the given order."""
        payload = json.dumps(
            [item.to_document() for item in announcements],
            indent=2,
            ensure_ascii=False,
        )
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Cannot write data file {self.path}: {exc}") from exc

    def initialize(self) -> None:
        """Create the data directory and seed the document if it is absent."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create data directory {self.path.parent}: {exc}") from exc
        with self._lock:
            if self.path.exists():
                return
            seed = Announcement(
                id=1,
                title=WELCOME_TITLE,
                content=WELCOME_CONTENT,
                date=utc_timestamp(),
                active=True,
            )
            self.save([seed])
            logger.info("Initialised data file %s with a welcome announcement", self.path)

    @contextmanager
    def transaction(self) -> Iterator[List[Announcement]]:
        """Load the collection, let the caller mutate it, then save it.

        The store lock is held for the whole cycle.  The document is only
        rewritten when the list was changed; if the block raises, nothing
        is written.
        """
        with self._lock:
            announcements = self.load()
            original = list(announcements)
            yield announcements
            if announcements != original:
                self.save(announcements)
