"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first (via ``python-dotenv``) so local deployments can keep
their connection string and port next to the code without exporting
them.  Defaults are provided for all fields.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Values already present in the environment take precedence over the
# ones in ``.env``.
load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Event Management API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    project_description: str = os.getenv(
        "PROJECT_DESCRIPTION", "Event, Attendee, Organizer API backed by a document store"
    )
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Connection string for the record store.  Accepts a file path
    # (relative paths are resolved against the working directory), a
    # ``sqlite:///`` URL, ``file:`` URI or ``:memory:``.
    database_url: str = os.getenv("DATABASE_URL", "event_management.db")

    # Comma-separated list of origins allowed by the CORS middleware.
    cors_allow_origins: str = os.getenv("CORS_ALLOW_ORIGINS", "*")

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before this module is imported.
settings = Settings()
