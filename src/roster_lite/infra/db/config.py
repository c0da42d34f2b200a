from __future__ import annotations

import os


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def sql_echo() -> bool:
    """Log every emitted SQL statement when SQL_ECHO is truthy."""
    return os.getenv("SQL_ECHO", "").strip().lower() in {"1", "true", "yes", "on"}
