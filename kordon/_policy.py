# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._constants import CONTROLLER_KINDS, MIRROR_ANNOTATION
from ._exceptions import UNMANAGED_DESCRIPTION, UnmanagedPodsError, join_names
from ._owners import owner_reference
from ._types import (
    Classification,
    ControlPlaneProtocol,
    EvictionDecision,
    PrinterProtocol,
)

if TYPE_CHECKING:
    from kr8s.asyncio.objects import Pod

logger = logging.getLogger(__name__)


class EvictionPolicy:
    """Decide which pods on a node a drain may delete.

    Mirror pods are never touched. Pods created by a ReplicationController,
    Job or DaemonSet that still exists are managed and always deleted. All
    other pods are unmanaged and are only deleted when ``force`` is set.

    Args:
        control_plane: Used to list pods and look up their controllers
        printer: Receives the warning about unmanaged pods when forcing
        force: Delete unmanaged pods instead of refusing to continue
    """

    def __init__(
        self,
        control_plane: ControlPlaneProtocol,
        printer: PrinterProtocol,
        force: bool = False,
    ) -> None:
        self.control_plane = control_plane
        self.printer = printer
        self.force = force

    async def is_managed(self, pod: Pod) -> bool:
        """Check whether a pod was created by a controller that still exists.

        Raises:
            OwnerReferenceDecodeError: If the created-by annotation is malformed
        """
        reference = owner_reference(pod)
        if reference is None or reference.kind not in CONTROLLER_KINDS:
            return False
        if not reference.name:
            return False
        # Any lookup failure is taken to mean the controller is gone.
        try:
            controller = await self.control_plane.get_controller(reference)
        except Exception as e:
            logger.debug(
                "Treating pod %s as unmanaged, lookup of %s %s/%s failed: %s",
                pod.name,
                reference.kind,
                reference.namespace,
                reference.name,
                e,
            )
            return False
        return controller is not None

    async def decide(self, pod: Pod) -> EvictionDecision:
        if MIRROR_ANNOTATION in pod.annotations:
            return EvictionDecision.SKIP_MIRROR
        if await self.is_managed(pod):
            return EvictionDecision.DELETE_MANAGED
        if self.force:
            return EvictionDecision.DELETE_FORCED
        return EvictionDecision.BLOCK_UNMANAGED

    async def classify(self, node_name: str) -> Classification:
        """Classify every pod on a node.

        Args:
            node_name: The node to look at

        Returns:
            The pods that may be deleted, in list order

        Raises:
            UnmanagedPodsError: If unmanaged pods were found and force is not set
            OwnerReferenceDecodeError: If any pod has a malformed created-by annotation
        """
        result = Classification()
        unmanaged = []
        for pod in await self.control_plane.list_pods(node_name):
            decision = await self.decide(pod)
            logger.debug("Pod %s/%s: %s", pod.namespace, pod.name, decision.value)
            result.decisions.append((pod, decision))
            if decision is EvictionDecision.SKIP_MIRROR:
                continue
            if decision is not EvictionDecision.DELETE_MANAGED:
                unmanaged.append(pod.name)
            if decision is EvictionDecision.BLOCK_UNMANAGED:
                result.blocked.append(pod.name)
            else:
                result.approved.append(pod)

        if result.blocked:
            raise UnmanagedPodsError(result.blocked)
        if unmanaged:
            self.printer.warning(
                f"About to delete these {UNMANAGED_DESCRIPTION}: {join_names(unmanaged)}"
            )
        return result
