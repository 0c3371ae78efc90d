# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
import typer
from rich.console import Console
from rich.markup import escape

from ._config import connect
from ._drain import Drainer
from ._printer import Printer

err_console = Console(stderr=True)


async def _run(ctx: typer.Context, node: str, action: str, **kwargs):
    config = ctx.obj
    try:
        control_plane = await connect(config)
        drainer = Drainer(node, control_plane, Printer(), **kwargs)
        await getattr(drainer, action)()
    except Exception as e:
        err_console.print(f"[red]error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)


async def cordon(
    ctx: typer.Context,
    node: str = typer.Argument(..., help="NODE"),
):
    """Mark node as unschedulable.

    Examples:
        # Mark node "foo" as unschedulable
        kordon cordon foo
    """
    await _run(ctx, node, "cordon")


async def uncordon(
    ctx: typer.Context,
    node: str = typer.Argument(..., help="NODE"),
):
    """Mark node as schedulable.

    Examples:
        # Mark node "foo" as schedulable
        kordon uncordon foo
    """
    await _run(ctx, node, "uncordon")


async def drain(
    ctx: typer.Context,
    node: str = typer.Argument(..., help="NODE"),
    force: bool = typer.Option(
        False,
        "--force",
        help="Continue even if there are pods not managed by a ReplicationController, Job, or DaemonSet.",
    ),
    grace_period: int = typer.Option(
        -1,
        "--grace-period",
        help="Period of time in seconds given to each pod to terminate gracefully. "
        "If negative, the default value specified in the pod will be used.",
    ),
):
    """Drain node in preparation for maintenance.

    The given node will be marked unschedulable to prevent new pods from arriving.
    Then drain deletes all pods except mirror pods (which cannot be deleted through
    the API server). If there are any pods that are neither mirror pods nor
    managed by a ReplicationController, Job, or DaemonSet, then drain will not
    delete any pods unless you use --force.

    When you are ready to put the node back into service, use kordon uncordon, which
    will make the node schedulable again.

    Examples:
        # Drain node "foo", even if there are pods not managed by a ReplicationController, Job, or DaemonSet on it
        kordon drain foo --force

        # As above, but abort if there are unmanaged pods, and use a grace period of 15 minutes
        kordon drain foo --grace-period=900
    """
    await _run(ctx, node, "drain", force=force, grace_period=grace_period)
