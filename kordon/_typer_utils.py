# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
import asyncio
import inspect
from contextlib import suppress
from functools import wraps

import typer


def _typer_async(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        with suppress(asyncio.CancelledError, KeyboardInterrupt):
            return asyncio.run(f(*args, **kwargs))

    return wrapper


def register(app: typer.Typer, func, name=None):
    """Add a command to a typer app, running it in an event loop if it is async."""
    if inspect.iscoroutinefunction(func):
        func = _typer_async(func)
    app.command(name)(func)
