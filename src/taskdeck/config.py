# src/taskdeck/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is required at import time; every value has a default.
- Module-level constants (MAX_NEW_TASKS, VALID_STATUSES) are exported for callers
  that only need the session limits.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .tasks.task_models import TaskStatus
from .tasks.task_store import MAX_NEW_TASKS as DEFAULT_MAX_NEW_TASKS

ENV_PREFIX = "TASKDECK"

DEFAULT_VALID_STATUSES: tuple[TaskStatus, ...] = tuple(TaskStatus)

logger = logging.getLogger(__name__)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: list[str]) -> list[str]:
    # Comma separated only: "in progress" contains a space.
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    return [p.strip() for p in raw.split(",") if p.strip()]


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def parse_statuses(raw: list[str]) -> tuple[TaskStatus, ...]:
    """
    Turn configured status names into TaskStatus members.

    Unknown names are dropped (with a warning); duplicates collapse.
    An empty result falls back to the full vocabulary.
    """
    out: list[TaskStatus] = []
    for name in raw:
        status = TaskStatus.parse(name)
        if status is None:
            logger.warning("Ignoring unknown status in %s: %r", _k("VALID_STATUSES"), name)
            continue
        if status not in out:
            out.append(status)
    if not out:
        return DEFAULT_VALID_STATUSES
    return tuple(out)


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Session ----
    max_new_tasks: int
    valid_statuses: tuple[TaskStatus, ...]
    seed_tasks: bool

    # ---- Console output ----
    icons: bool

    @property
    def log_file(self) -> Path:
        return self.data_dir / "taskdeck.log"

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "taskdeck").strip() or "taskdeck"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/taskdeck"))

        max_new_tasks = max(0, _env_int(_k("MAX_NEW_TASKS"), DEFAULT_MAX_NEW_TASKS))
        valid_statuses = parse_statuses(
            _env_list(_k("VALID_STATUSES"), [s.value for s in DEFAULT_VALID_STATUSES])
        )
        seed_tasks = _env_bool(_k("SEED_TASKS"), True)

        icons = _env_bool(_k("ICONS"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            max_new_tasks=max_new_tasks,
            valid_statuses=valid_statuses,
            seed_tasks=seed_tasks,
            icons=icons,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS


# Session limits as plain constants.
MAX_NEW_TASKS = SETTINGS.max_new_tasks
VALID_STATUSES = SETTINGS.valid_statuses
