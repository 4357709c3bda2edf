# src/pepper_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing secret is required at import time.
- Module-level constants (DB_PATH, COMMAND_PREFIX, ...) are exported for collaborators.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "PEPPER"
TEST_ENV = "test"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def tasks_db_filename(environment: str) -> str:
    """The test environment gets its own store file so test runs never touch real tasks."""
    suffix = ".test" if environment == TEST_ENV else ""
    return f"tasks-db{suffix}.json"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Chat commands ----
    command_prefix: str
    environment: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    tasks_db_path: Path

    @property
    def is_test(self) -> bool:
        return self.environment == TEST_ENV

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "pepper") or "pepper"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        command_prefix = _first_env(_k("PREFIX"), "PREFIX", default="!") or "!"
        environment = (_first_env(_k("ENV"), "APP_ENV", default="production") or "production").strip().lower()

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/pepper"))
        tasks_db_path = _env_path(_k("TASKS_DB_PATH"), data_dir / tasks_db_filename(environment))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            command_prefix=command_prefix,
            environment=environment,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS


# --------------------------------------------------------------------------------------
# Module-level exports for collaborators that only need a single value.
# --------------------------------------------------------------------------------------

APP_NAME = SETTINGS.app_name
LOG_LEVEL = SETTINGS.log_level

COMMAND_PREFIX = SETTINGS.command_prefix
ENVIRONMENT = SETTINGS.environment

DATA_DIR = SETTINGS.data_dir
TASKS_DB_PATH = SETTINGS.tasks_db_path
DB_PATH = TASKS_DB_PATH
