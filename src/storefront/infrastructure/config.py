"""Runtime configuration read from the environment.

A ``.env`` file in the working directory is loaded first, but it never
overrides variables that are already set, so tests and shells can always
win over it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///data/storefront.db"

_TRUTHY = {"1", "true", "yes", "on"}
_LEVEL_BY_ENV = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}


@dataclass(frozen=True)
class Settings:

    database_url: str
    sql_echo: bool
    environment: str
    log_level: str

    @staticmethod
    def from_env() -> Settings:
        load_dotenv(".env", override=False)

        environment = os.environ.get("STOREFRONT_ENV", "development").lower()
        log_level = os.environ.get(
            "STOREFRONT_LOG_LEVEL", _LEVEL_BY_ENV.get(environment, "INFO")
        ).upper()

        return Settings(
            database_url=os.environ.get("STOREFRONT_DATABASE_URL", DEFAULT_DATABASE_URL),
            sql_echo=os.environ.get("STOREFRONT_SQL_ECHO", "false").lower() in _TRUTHY,
            environment=environment,
            log_level=log_level,
        )

    @property
    def renders_json(self) -> bool:
        return self.environment in ("production", "staging")
