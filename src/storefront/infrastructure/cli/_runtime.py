"""Helpers shared by the CLI commands."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.config import Settings

T = TypeVar("T")


def run_with_container(action: Callable[[Container], Awaitable[T]]) -> T:
    """Run *action* against a fresh container on its own event loop."""

    async def _main() -> T:
        container = Container(Settings.from_env())
        try:
            return await action(container)
        finally:
            await container.close()

    return asyncio.run(_main())
