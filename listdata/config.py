"""
ListData configuration — all environment variables in one place.

Read from environment at runtime.
"""

from __future__ import annotations

import os


def _flag(name: str) -> bool | None:
    value = os.environ.get(name)
    if value is None or value == "":
        return None
    return value.lower() in ("1", "true", "yes", "on")


class Settings:
    """Library settings from environment variables."""

    # Application
    ENVIRONMENT: str = os.environ.get("LISTDATA_ENV", "development")

    @property
    def STRICT_KEYS(self) -> bool:
        """Raise KeyIntegrityError instead of logging when a store's initial items have bad keys."""
        return bool(_flag("LISTDATA_STRICT_KEYS"))

    @property
    def KEY_CHECKS(self) -> bool:
        """Check initial items for duplicate/None/empty keys when a store is built."""
        flag = _flag("LISTDATA_KEY_CHECKS")
        if flag is not None:
            return flag
        return self.ENVIRONMENT == "development"


# Singleton instance
settings = Settings()
