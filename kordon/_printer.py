# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape


class Printer:
    """Render status messages for cordon and drain operations.

    Success messages look like ``node/foo cordoned``, the same as kubectl.

    Args:
        console: The rich console to print to, defaults to stdout
        err_console: The rich console to print warnings to, defaults to stderr
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ) -> None:
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def success(self, kind: str, name: str, verb: str) -> None:
        self.console.print(
            f"{kind}/{name} {verb}", markup=False, highlight=False, soft_wrap=True
        )

    def warning(self, message: str) -> None:
        self.err_console.print(
            f"[yellow]WARNING:[/yellow] {escape(message)}",
            highlight=False,
            soft_wrap=True,
        )


class NullPrinter:
    """A printer that discards everything."""

    def success(self, kind: str, name: str, verb: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass
