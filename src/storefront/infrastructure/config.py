"""Process configuration read from the environment.

Every setting has a default suitable for local, offline operation.
Leaving the store unconfigured is not an error: the service then runs
on the in-memory fallback catalog.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv
from sqlalchemy.engine import URL

from storefront.domain.exceptions import ConfigurationError


@dataclass(frozen=True)
class Settings:

    store_url: str | None = None
    store_driver: str = "mssql+aioodbc"
    store_host: str = "localhost"
    store_port: int = 1433
    store_user: str | None = None
    store_password: str | None = None
    store_db: str | None = None
    command_timeout: float = 15.0
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        """Read settings from *environ*, or from the process environment.

        For the process environment, a `.env` file found from the working
        directory upwards is loaded first; variables already set win.
        """
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
        env = os.environ if environ is None else environ
        return Settings(
            store_url=env.get("STORE_URL") or None,
            store_driver=env.get("STORE_DRIVER", "mssql+aioodbc"),
            store_host=env.get("STORE_HOST", "localhost"),
            store_port=_int(env, "STORE_PORT", 1433),
            store_user=env.get("STORE_USER") or None,
            store_password=env.get("STORE_PASSWORD") or None,
            store_db=env.get("STORE_DB") or None,
            command_timeout=_float(env, "STORE_TIMEOUT", 15.0),
            host=env.get("HOST", "0.0.0.0"),
            port=_int(env, "PORT", 3000),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def database_url(self) -> str | URL | None:
        """SQLAlchemy URL of the durable store, or None when unconfigured."""
        if self.store_url:
            return self.store_url
        if not (self.store_user and self.store_db):
            return None
        return URL.create(
            self.store_driver,
            username=self.store_user,
            password=self.store_password,
            host=self.store_host,
            port=self.store_port,
            database=self.store_db,
            query={"TrustServerCertificate": "yes", "Encrypt": "no"}
            if self.store_driver.startswith("mssql")
            else {},
        )


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value
