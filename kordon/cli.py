# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ._commands import cordon, drain, uncordon
from ._config import CONTEXT_ENV, ClusterConfig
from ._typer_utils import register

app = typer.Typer(no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    kubeconfig: Optional[str] = typer.Option(
        None, "--kubeconfig", help="Path to the kubeconfig file to use."
    ),
    context: Optional[str] = typer.Option(
        None,
        "--context",
        envvar=CONTEXT_ENV,
        help="The name of the kubeconfig context to use.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug output to stderr."
    ),
):
    """Cordon, uncordon and drain Kubernetes nodes."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )
    ctx.obj = ClusterConfig.from_env(kubeconfig=kubeconfig, context=context)


register(app, cordon)
register(app, uncordon)
register(app, drain)


def go():
    app()


if __name__ == "__main__":
    go()
