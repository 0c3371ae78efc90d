# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
from __future__ import annotations

import logging

from ._policy import EvictionPolicy
from ._schedulability import set_schedulability
from ._types import (
    Classification,
    ControlPlaneProtocol,
    DrainResult,
    Outcome,
    PrinterProtocol,
)

logger = logging.getLogger(__name__)


class Drainer:
    """Cordon, uncordon or drain a single node.

    Each call resolves the node afresh, and steps run one after another. The
    first failure is raised and nothing that already happened is undone.

    Args:
        node_name: Name of the node
        control_plane: Remote access to the cluster
        printer: Receives status messages
        force: Also delete pods that are not managed by a controller
        grace_period: Termination grace period in seconds for deleted pods,
            a negative value uses each pod's own default
    """

    def __init__(
        self,
        node_name: str,
        control_plane: ControlPlaneProtocol,
        printer: PrinterProtocol,
        force: bool = False,
        grace_period: int = -1,
    ) -> None:
        self.node_name = node_name
        self.control_plane = control_plane
        self.printer = printer
        self.force = force
        self.grace_period = grace_period

    async def set_schedulability(self, desired: bool) -> Outcome:
        node = await self.control_plane.get_node(self.node_name)
        return await set_schedulability(node, desired, self.control_plane, self.printer)

    async def cordon(self) -> Outcome:
        """Mark the node as unschedulable."""
        return await self.set_schedulability(True)

    async def uncordon(self) -> Outcome:
        """Mark the node as schedulable."""
        return await self.set_schedulability(False)

    async def classify(self) -> Classification:
        policy = EvictionPolicy(self.control_plane, self.printer, force=self.force)
        return await policy.classify(self.node_name)

    async def drain(self) -> DrainResult:
        """Cordon the node and delete every pod on it that may be deleted.

        Deletion does not wait for pods to terminate.

        Raises:
            UnmanagedPodsError: If unmanaged pods were found and force is not set
            OwnerReferenceDecodeError: If a pod has a malformed created-by annotation
        """
        outcome = await self.cordon()
        classification = await self.classify()
        result = DrainResult(
            node=self.node_name, cordon=outcome, classification=classification
        )
        grace_period = self.grace_period if self.grace_period >= 0 else None
        for pod in classification.approved:
            logger.debug("Deleting pod %s/%s", pod.namespace, pod.name)
            await self.control_plane.delete_pod(pod, grace_period=grace_period)
            result.deleted.append(pod)
            self.printer.success(pod.singular, pod.name, "deleted")
        self.printer.success("node", self.node_name, "drained")
        return result
