# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
from __future__ import annotations

from typing import Optional

from kordon._config import connect
from kordon._drain import Drainer
from kordon._printer import Printer
from kordon._types import (
    Classification,
    ControlPlaneProtocol,
    DrainResult,
    Outcome,
    PrinterProtocol,
)


async def _drainer(
    node: str,
    control_plane: Optional[ControlPlaneProtocol],
    printer: Optional[PrinterProtocol],
    **kwargs,
) -> Drainer:
    if control_plane is None:
        control_plane = await connect()
    if printer is None:
        printer = Printer()
    return Drainer(node, control_plane, printer, **kwargs)


async def cordon(
    node: str,
    control_plane: Optional[ControlPlaneProtocol] = None,
    printer: Optional[PrinterProtocol] = None,
) -> Outcome:
    """Mark a node as unschedulable.

    Args:
        node: The name of the node
        control_plane: The cluster to talk to, defaults to :func:`kordon.connect`
        printer: Receives status messages, defaults to printing to the terminal

    Returns:
        Whether the node was changed, already cordoned or skipped

    Examples:
        >>> import kordon.asyncio
        >>> await kordon.asyncio.cordon("foo")
        node/foo cordoned
        <Outcome.CHANGED: 'changed'>
    """
    drainer = await _drainer(node, control_plane, printer)
    return await drainer.cordon()


async def uncordon(
    node: str,
    control_plane: Optional[ControlPlaneProtocol] = None,
    printer: Optional[PrinterProtocol] = None,
) -> Outcome:
    """Mark a node as schedulable.

    Args:
        node: The name of the node
        control_plane: The cluster to talk to, defaults to :func:`kordon.connect`
        printer: Receives status messages, defaults to printing to the terminal

    Returns:
        Whether the node was changed, already uncordoned or skipped
    """
    drainer = await _drainer(node, control_plane, printer)
    return await drainer.uncordon()


async def classify(
    node: str,
    force: bool = False,
    control_plane: Optional[ControlPlaneProtocol] = None,
    printer: Optional[PrinterProtocol] = None,
) -> Classification:
    """Work out which pods a drain of a node would delete, without changing anything."""
    drainer = await _drainer(node, control_plane, printer, force=force)
    return await drainer.classify()


async def drain(
    node: str,
    force: bool = False,
    grace_period: int = -1,
    control_plane: Optional[ControlPlaneProtocol] = None,
    printer: Optional[PrinterProtocol] = None,
) -> DrainResult:
    """Drain a node in preparation for maintenance.

    The node is cordoned and then every pod on it is deleted, except mirror pods.
    If there are pods that are not managed by a ReplicationController, Job or
    DaemonSet, no pods are deleted unless ``force`` is set.

    Args:
        node: The name of the node
        force: Also delete pods that are not managed by a controller
        grace_period: Termination grace period in seconds, negative uses each pod's default
        control_plane: The cluster to talk to, defaults to :func:`kordon.connect`
        printer: Receives status messages, defaults to printing to the terminal

    Returns:
        What was cordoned, classified and deleted

    Raises:
        kordon.UnmanagedPodsError: If unmanaged pods were found and force is not set
        kordon.OwnerReferenceDecodeError: If a pod has a malformed created-by annotation

    Examples:
        >>> import kordon.asyncio
        >>> await kordon.asyncio.drain("foo", force=True, grace_period=900)
    """
    drainer = await _drainer(
        node, control_plane, printer, force=force, grace_period=grace_period
    )
    return await drainer.drain()
