from __future__ import annotations

import importlib
from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from ..core.constants import DEFAULT_MAX_PRESENCE_ENTRIES, DEFAULT_SESSION_DAYS
from ..core.exceptions import NotConfiguredError
from . import get_settings_module

REQUIRED_DB_KEYS = {"host": "DB_HOST", "user": "DB_USER", "database": "DB_NAME"}


@dataclass(frozen=True)
class Settings:
    """Validated view over one of the settings modules."""

    module_name: str
    secret_key: str
    db_config: dict
    timezone: str
    debug: bool
    log_level: str
    session_days: int
    max_presence_entries: int
    auto_init_db: bool


def build_settings(module: ModuleType, *, module_name: str = "") -> Settings:
    secret_key = str(getattr(module, "SECRET_KEY", "") or "")
    if not secret_key:
        raise NotConfiguredError("SECRET_KEY must be configured")

    db_config = dict(getattr(module, "DB_CONFIG", None) or {})
    missing = [env for key, env in REQUIRED_DB_KEYS.items() if not db_config.get(key)]
    if missing:
        raise NotConfiguredError(f"Database settings missing: {', '.join(missing)}")

    return Settings(
        module_name=module_name or module.__name__,
        secret_key=secret_key,
        db_config=db_config,
        timezone=str(getattr(module, "TIMEZONE", "") or ""),
        debug=bool(getattr(module, "DEBUG", False)),
        log_level=str(getattr(module, "LOG_LEVEL", "INFO")).upper(),
        session_days=int(getattr(module, "SESSION_DAYS", DEFAULT_SESSION_DAYS)),
        max_presence_entries=int(getattr(module, "MAX_PRESENCE_ENTRIES", DEFAULT_MAX_PRESENCE_ENTRIES)),
        auto_init_db=bool(getattr(module, "AUTO_INIT_DB", False)),
    )


def load_settings(module_name: Optional[str] = None) -> Settings:
    module_name = module_name or get_settings_module()
    return build_settings(importlib.import_module(module_name), module_name=module_name)
