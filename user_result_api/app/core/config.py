"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with an empty user table, no artificial latency and
INFO logging.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables.

    Values are read when the instance is created, so tests can build a
    ``Settings`` after patching the environment, or pass explicit
    keyword arguments.
    """

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "User Result API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Preload the two demo users (John Doe and Jane Smith).  Off by
    # default because it makes "john@example.com" unavailable.
    seed_users: bool = field(default_factory=lambda: _env_bool("SEED_USERS"))

    # Per-operation delay of the in-memory store, in milliseconds.
    store_latency_ms: int = field(default_factory=lambda: int(os.getenv("STORE_LATENCY_MS", "0")))

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
