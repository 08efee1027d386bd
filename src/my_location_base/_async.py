"""Run blocking calls (sqlite3, file I/O, platform waits) in an anyio worker thread."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import anyio


async def run_sync(func: Callable[..., Any], *args: Any) -> Any:
    """Await func(*args) on a worker thread; the event loop stays free meanwhile."""
    return await anyio.to_thread.run_sync(func, *args)
