"""Lazily-initialised, process-wide handle on the durable store.

The connector moves through UNINITIALIZED -> CONNECTING -> CONNECTED or
FALLBACK exactly once. The first caller of ``engine()`` performs the
connection attempt while holding the lock; concurrent callers wait for
it and then observe the settled state.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum

from sqlalchemy import text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

logger = logging.getLogger(__name__)

POOL_SIZE = 10
POOL_RECYCLE_SECONDS = 1800


class StoreState(Enum):
    UNINITIALIZED = "UNINITIALIZED"
    CONNECTING = "CONNECTING"
    CONNECTED = "CONNECTED"
    FALLBACK = "FALLBACK"


class StoreConnector:

    def __init__(self, url: str | URL | None, command_timeout: float = 15.0) -> None:
        self._url = url
        self._command_timeout = command_timeout
        self._state = StoreState.UNINITIALIZED
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None
        self._lock = asyncio.Lock()
        self.connect_attempts = 0

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def command_timeout(self) -> float:
        return self._command_timeout

    async def engine(self) -> AsyncEngine | None:
        """Return the connected engine, or None in fallback mode."""
        if self._state in (StoreState.CONNECTED, StoreState.FALLBACK):
            return self._engine

        async with self._lock:
            if self._state is StoreState.UNINITIALIZED:
                self._state = StoreState.CONNECTING
                try:
                    self._engine = await self._connect()
                finally:
                    # a cancelled attempt settles in fallback too
                    if self._engine is None:
                        self._state = StoreState.FALLBACK
                    else:
                        self._session_factory = async_sessionmaker(
                            self._engine, expire_on_commit=False
                        )
                        self._state = StoreState.CONNECTED
        return self._engine

    async def session_factory(self) -> async_sessionmaker[AsyncSession] | None:
        await self.engine()
        return self._session_factory

    async def is_connected(self) -> bool:
        return await self.engine() is not None

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()

    # --- Internal helpers -----------------------------------------------------

    async def _connect(self) -> AsyncEngine | None:
        self.connect_attempts += 1
        if self._url is None:
            logger.warning(
                "No store configured; continuing with in-memory fallback."
            )
            return None

        engine: AsyncEngine | None = None
        try:
            engine = create_async_engine(self._url, **self._engine_options())
            await asyncio.wait_for(self._ping(engine), self._command_timeout)
        except asyncio.CancelledError:
            logger.warning(
                "Store connection attempt cancelled; continuing with in-memory fallback."
            )
            if engine is not None:
                await engine.dispose()
            raise
        except Exception as exc:
            logger.warning(
                "Store connection failed; continuing with in-memory fallback: %s",
                exc,
            )
            if engine is not None:
                await engine.dispose()
            return None

        logger.info("Connected to store %s.", _safe_url(self._url))
        return engine

    def _engine_options(self) -> dict:
        options: dict = {"pool_pre_ping": True}
        if make_url(self._url).get_backend_name() != "sqlite":
            options.update(pool_size=POOL_SIZE, pool_recycle=POOL_RECYCLE_SECONDS)
        return options

    @staticmethod
    async def _ping(engine: AsyncEngine) -> None:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))


def _safe_url(url: str | URL) -> str:
    return make_url(url).render_as_string(hide_password=True)
