# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._types import ControlPlaneProtocol, Outcome, PrinterProtocol

if TYPE_CHECKING:
    from kr8s.asyncio.objects import APIObject

logger = logging.getLogger(__name__)


def already(desired: bool) -> str:
    return "already cordoned" if desired else "already uncordoned"


def changed(desired: bool) -> str:
    return "cordoned" if desired else "uncordoned"


async def set_schedulability(
    node: APIObject,
    desired: bool,
    control_plane: ControlPlaneProtocol,
    printer: PrinterProtocol,
) -> Outcome:
    """Set the unschedulable flag of a node to ``desired``.

    Makes at most one write. If the flag already has the desired value nothing
    is written. Objects that are not nodes are skipped. If the write fails the
    flag on ``node`` is put back to what it was.

    Args:
        node: The resolved node
        desired: True to cordon, False to uncordon
        control_plane: Used to write the node back
        printer: Receives the status message

    Returns:
        The outcome of the operation

    Raises:
        kr8s.ServerError: If the API server rejects the write
    """
    if node.kind != "Node":
        logger.debug("Not toggling schedulability of %s, it is not a node", node)
        printer.success(node.singular, node.name, "skipped")
        return Outcome.SKIPPED
    if "spec" not in node.raw:
        node.raw["spec"] = {}
    if bool(node.unschedulable) == desired:
        printer.success(node.singular, node.name, already(desired))
        return Outcome.NOOP
    previous = node.raw["spec"].get("unschedulable")
    node.raw["spec"]["unschedulable"] = desired
    logger.debug("Setting spec.unschedulable=%s on node %s", desired, node.name)
    try:
        await control_plane.replace_node(node)
    except Exception:
        if previous is None:
            del node.raw["spec"]["unschedulable"]
        else:
            node.raw["spec"]["unschedulable"] = previous
        raise
    printer.success(node.singular, node.name, changed(desired))
    return Outcome.CHANGED
