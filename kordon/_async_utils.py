# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
#
# The sync API runs each coroutine on an anyio event loop living in a single
# background thread. A background thread is used so the sync API keeps working
# when called from code that already has a running loop (IPython, pytest-asyncio).
from __future__ import annotations

import inspect
import threading
from functools import partial, wraps
from typing import Awaitable, Callable, ParamSpec, TypeVar

import anyio
import anyio.from_thread

T = TypeVar("T")
P = ParamSpec("P")


class Portal:
    """Singleton owning the background thread and its anyio blocking portal."""

    _instance: Portal
    _portal: anyio.from_thread.BlockingPortal
    _ready: threading.Event
    thread: threading.Thread

    def __new__(cls):
        if not hasattr(cls, "_instance"):
            inst = super().__new__(cls)
            inst._ready = threading.Event()
            inst.thread = threading.Thread(
                target=anyio.run, args=[inst._run], name="KordonSyncRunnerThread"
            )
            inst.thread.daemon = True
            inst.thread.start()
            cls._instance = inst
        return cls._instance

    async def _run(self):
        async with anyio.from_thread.BlockingPortal() as portal:
            self._portal = portal
            self._ready.set()
            await portal.sleep_until_stopped()

    def call(self, func: Callable[P, Awaitable[T]], *args, **kwargs) -> T:
        """Run a coroutine function on the portal loop and block until it returns."""
        self._ready.wait()
        return self._portal.call(partial(func, *args, **kwargs))


def run_sync(coro: Callable[P, Awaitable[T]]) -> Callable[P, T]:
    """Wrap a coroutine function in a plain function that blocks until it completes.

    Args:
        coro: A coroutine function

    Returns:
        A sync function that runs the coroutine via the :class:`Portal`
    """
    if not inspect.iscoroutinefunction(coro):
        raise TypeError(f"Expected coroutine function, got {coro.__class__.__name__}")

    @wraps(coro)
    def run_sync_inner(*args: P.args, **kwargs: P.kwargs) -> T:
        return Portal().call(coro, *args, **kwargs)

    return run_sync_inner
