"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
server can be started with no configuration at all; in that case it
listens on port 3000 and stores its data in ``sightshare.db`` in the
current working directory.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

# Directory holding the admin dashboard and any other static assets.
DEFAULT_PUBLIC_DIR = str(Path(__file__).resolve().parent.parent.parent / "public")


def _split_origins(raw: str) -> List[str]:
    origins = [chunk.strip() for chunk in raw.split(",")]
    return [origin for origin in origins if origin] or ["*"]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "SightShare API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    # Level of uvicorn's per-request access log.
    access_log_level: str = os.getenv("ACCESS_LOG_LEVEL", "WARNING")

    # Address and port the HTTP server binds to.  Only ``PORT`` is
    # normally set by hosting platforms.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Path to the SQLite database file.  Relative paths are resolved
    # against the working directory by the ``db`` module.  ``:memory:``
    # keeps everything in RAM for the lifetime of the process.
    database_url: str = os.getenv("DATABASE_URL", "sightshare.db")

    public_dir: str = os.getenv("PUBLIC_DIR", DEFAULT_PUBLIC_DIR)

    # Comma‑separated list of origins allowed by CORS.  ``*`` allows any
    # origin, which is what the desktop client expects.
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", "*"))
    )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
