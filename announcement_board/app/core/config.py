"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all: it listens on port 3000
and keeps its data in ``data/announcements.json`` under the project
root.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

# Directory containing the bundled landing and admin pages.
DEFAULT_STATIC_DIR = str(Path(__file__).resolve().parent.parent / "static")

# Project root (the directory that contains ``announcement_board/``).
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Announcement Board")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Path of the JSON document holding the whole collection.  A
    # relative path is resolved against the project root by
    # ``get_data_path``.
    data_file: str = os.getenv("DATA_FILE", os.path.join("data", "announcements.json"))

    static_dir: str = os.getenv("STATIC_DIR", DEFAULT_STATIC_DIR)

    # Comma‑separated list of origins allowed by CORS.  ``*`` allows any.
    cors_origins: List[str] = field(
        default_factory=lambda: [
            origin.strip()
            for origin in os.getenv("CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]
    )

    def get_data_path(self) -> Path:
        """Return the absolute path of the data document."""
        path = Path(self.data_file)
        if path.is_absolute():
            return path
        return (PROJECT_ROOT / path).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
