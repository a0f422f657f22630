"""Tests for the lazily-initialised store connector."""

import asyncio
import logging

from storefront.infrastructure.database import StoreConnector, StoreState


def _settle(connector: StoreConnector, callers: int = 1) -> list:
    async def _run():
        try:
            return await asyncio.gather(*(connector.engine() for _ in range(callers)))
        finally:
            await connector.dispose()

    return asyncio.run(_run())


class TestFallback:

    def test_starts_uninitialized(self):
        assert StoreConnector(None).state is StoreState.UNINITIALIZED

    def test_no_url_means_fallback(self, caplog):
        connector = StoreConnector(None)
        with caplog.at_level(logging.WARNING, logger="storefront"):
            engines = _settle(connector)
        assert engines == [None]
        assert connector.state is StoreState.FALLBACK
        assert "in-memory fallback" in caplog.text

    def test_unreachable_store_means_fallback(self, tmp_path):
        missing = tmp_path / "no" / "such" / "dir" / "store.db"
        connector = StoreConnector(f"sqlite+aiosqlite:///{missing}")
        assert _settle(connector) == [None]
        assert connector.state is StoreState.FALLBACK

    def test_unknown_driver_means_fallback(self):
        connector = StoreConnector("nosuchdb+nodriver://user@host/db")
        assert _settle(connector) == [None]
        assert connector.state is StoreState.FALLBACK

    def test_fallback_is_permanent(self):
        connector = StoreConnector(None)

        async def _twice():
            await connector.engine()
            await connector.engine()
            return await connector.session_factory()

        assert asyncio.run(_twice()) is None
        assert connector.connect_attempts == 1


class TestConnected:

    def test_connects_to_reachable_store(self, sqlite_url):
        connector = StoreConnector(sqlite_url)

        async def _run():
            try:
                return await connector.is_connected(), await connector.session_factory()
            finally:
                await connector.dispose()

        connected, session_factory = asyncio.run(_run())
        assert connected is True
        assert session_factory is not None
        assert connector.state is StoreState.CONNECTED

    def test_concurrent_first_callers_share_one_attempt(self, sqlite_url):
        connector = StoreConnector(sqlite_url)
        engines = _settle(connector, callers=10)
        assert connector.connect_attempts == 1
        assert all(e is engines[0] for e in engines)
        assert engines[0] is not None

    def test_concurrent_first_callers_share_one_fallback(self):
        connector = StoreConnector(None)
        assert _settle(connector, callers=5) == [None] * 5
        assert connector.connect_attempts == 1


class TestCancelledAttempt:

    def test_cancelled_connect_settles_in_fallback(self, sqlite_url, monkeypatch):
        async def _stalled_ping(engine):
            await asyncio.sleep(10)

        monkeypatch.setattr(StoreConnector, "_ping", staticmethod(_stalled_ping))
        connector = StoreConnector(sqlite_url, command_timeout=30)

        async def _run():
            attempt = asyncio.create_task(connector.engine())
            await asyncio.sleep(0.01)
            attempt.cancel()
            try:
                await attempt
            except asyncio.CancelledError:
                pass
            return await connector.engine()

        assert asyncio.run(_run()) is None
        assert connector.state is StoreState.FALLBACK
        assert connector.connect_attempts == 1
