# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
from __future__ import annotations

import json
import logging
from typing import Dict, List, Optional, Type

import kr8s
from kr8s import NotFoundError, ServerError
from kr8s.asyncio.objects import (
    APIObject,
    DaemonSet,
    Job,
    Node,
    Pod,
    ReplicationController,
)

from ._types import OwnerReference

logger = logging.getLogger(__name__)

CONTROLLER_CLASSES: Dict[str, Type[APIObject]] = {
    "ReplicationController": ReplicationController,
    "Job": Job,
    "DaemonSet": DaemonSet,
}


class ControlPlane:
    """Remote access to the Kubernetes API server for cordon and drain.

    Every method makes exactly one request and does not retry. Errors from
    the API server are raised as :class:`kr8s.NotFoundError` for 404 responses
    and :class:`kr8s.ServerError` otherwise.

    Args:
        api: The kr8s async API client to use
    """

    def __init__(self, api: kr8s.asyncio.Api) -> None:
        self.api = api

    async def get_node(self, name: str) -> APIObject:
        """Resolve a node name to a Node object."""
        return await Node.get(name, api=self.api)

    async def list_pods(self, node_name: str) -> List[Pod]:
        """List pods in all namespaces that are scheduled on a node."""
        pods = [
            pod
            async for pod in self.api.get(
                Pod,
                namespace=kr8s.ALL,
                field_selector={"spec.nodeName": node_name},
            )
        ]
        logger.debug("Found %d pods on node %s", len(pods), node_name)
        return pods

    async def get_controller(self, reference: OwnerReference) -> APIObject:
        """Fetch the controller an owner reference points at.

        Raises:
            KeyError: If the reference is not of a known controller kind
        """
        cls = CONTROLLER_CLASSES[reference.kind]
        controller = cls(reference.name, namespace=reference.namespace, api=self.api)
        await controller.refresh()
        return controller

    async def replace_node(self, node: Node) -> None:
        """Replace the whole node object.

        The object's ``resourceVersion`` is sent along so the API server rejects
        the write with a conflict if the node changed since it was read.
        """
        try:
            async with self.api.call_api(
                "PUT",
                version=node.version,
                url=f"{node.endpoint}/{node.name}",
                data=json.dumps(node.raw),
            ) as resp:
                node.raw = resp.json()
        except ServerError as e:
            if e.response and e.response.status_code == 404:
                raise NotFoundError(f"Node {node.name} does not exist") from e
            raise e

    async def delete_pod(self, pod: Pod, grace_period: Optional[int] = None) -> None:
        """Delete a pod without waiting for it to terminate.

        Args:
            pod: The pod to delete
            grace_period: Termination grace period in seconds, or None to use the pod's own
        """
        data = {}
        if grace_period is not None:
            data["gracePeriodSeconds"] = grace_period
        try:
            async with self.api.call_api(
                "DELETE",
                version=pod.version,
                url=f"{pod.endpoint}/{pod.name}",
                namespace=pod.namespace,
                data=json.dumps(data),
            ):
                pass
        except ServerError as e:
            if e.response and e.response.status_code == 404:
                raise NotFoundError(
                    f"Pod {pod.name} does not exist in {pod.namespace}"
                ) from e
            raise e
