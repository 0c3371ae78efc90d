# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
"""In-memory stand-ins for the cluster, used by the test suite."""
from __future__ import annotations

import contextlib
import json
import os
from typing import Dict, Generator, List, Optional, Set, Tuple

from kr8s import NotFoundError
from kr8s.asyncio.objects import APIObject, Node, Pod

from ._constants import CREATED_BY_ANNOTATION, MIRROR_ANNOTATION
from ._control_plane import CONTROLLER_CLASSES
from ._types import OwnerReference


@contextlib.contextmanager
def set_env(**environ: str) -> Generator[None, None, None]:
    """Temporarily set process environment variables.

    Examples:
        >>> with set_env(KORDON_CONTEXT="kind-test"):
        ...     "KORDON_CONTEXT" in os.environ
        True
    """
    old_environ = dict(os.environ)
    os.environ.update(environ)
    try:
        yield
    finally:
        os.environ.clear()
        os.environ.update(old_environ)


class FakeApi:
    """Just enough of :class:`kr8s.asyncio.Api` for objects to resolve their namespace."""

    namespace = "default"


def serialized_reference(kind: str, name: str, namespace: str = "default") -> str:
    """Build a ``kubernetes.io/created-by`` annotation value."""
    return json.dumps(
        {
            "kind": "SerializedReference",
            "apiVersion": "v1",
            "reference": {
                "kind": kind,
                "namespace": namespace,
                "name": name,
                "apiVersion": "v1",
            },
        }
    )


def make_node(name: str, unschedulable: Optional[bool] = None, api=None) -> Node:
    spec = {}
    if unschedulable is not None:
        spec["unschedulable"] = unschedulable
    return Node(
        {"metadata": {"name": name, "resourceVersion": "1"}, "spec": spec},
        api=api or FakeApi(),
    )


def make_pod(
    name: str,
    node: str,
    namespace: str = "default",
    created_by: Optional[str] = None,
    mirror: bool = False,
    api=None,
) -> Pod:
    annotations = {}
    if created_by is not None:
        annotations[CREATED_BY_ANNOTATION] = created_by
    if mirror:
        annotations[MIRROR_ANNOTATION] = "0123456789abcdef"
    return Pod(
        {
            "metadata": {
                "name": name,
                "namespace": namespace,
                "annotations": annotations,
            },
            "spec": {"nodeName": node, "containers": [{"name": "pause"}]},
        },
        api=api or FakeApi(),
    )


def make_controller(kind: str, name: str, namespace: str = "default", api=None):
    cls = CONTROLLER_CLASSES[kind]
    return cls(name, namespace=namespace, api=api or FakeApi())


class FakeControlPlane:
    """A cluster held in memory that records every call made against it.

    Attributes:
        calls: ``(method, arguments)`` tuples in call order
        lookup_errors: Errors to raise from :meth:`get_controller`, keyed by reference
        empty_lookups: References for which :meth:`get_controller` returns None
        delete_errors: Errors to raise from :meth:`delete_pod`, keyed by pod name
        replace_error: Error to raise from :meth:`replace_node`
    """

    def __init__(
        self,
        nodes: Tuple[APIObject, ...] = (),
        pods: Tuple[Pod, ...] = (),
        controllers: Tuple[APIObject, ...] = (),
    ) -> None:
        self.api = FakeApi()
        self.nodes: Dict[str, APIObject] = {node.name: node for node in nodes}
        self.pods: List[Pod] = list(pods)
        self.controllers = {
            (obj.kind, obj.namespace, obj.name): obj for obj in controllers
        }
        self.calls: List[Tuple[str, tuple]] = []
        self.lookup_errors: Dict[OwnerReference, Exception] = {}
        self.empty_lookups: Set[OwnerReference] = set()
        self.delete_errors: Dict[str, Exception] = {}
        self.replace_error: Optional[Exception] = None

    @property
    def writes(self) -> List[Tuple[str, tuple]]:
        return [c for c in self.calls if c[0] in ("replace_node", "delete_pod")]

    @property
    def delete_attempts(self) -> List[str]:
        return [args[0] for method, args in self.calls if method == "delete_pod"]

    async def get_node(self, name: str) -> APIObject:
        self.calls.append(("get_node", (name,)))
        try:
            node = self.nodes[name]
        except KeyError:
            raise NotFoundError(f"Could not find Node {name}.") from None
        return type(node)(node.raw.to_dict(), api=self.api)

    async def list_pods(self, node_name: str) -> List[Pod]:
        self.calls.append(("list_pods", (node_name,)))
        return [pod for pod in self.pods if pod.raw["spec"]["nodeName"] == node_name]

    async def get_controller(self, reference: OwnerReference) -> Optional[APIObject]:
        self.calls.append(("get_controller", (reference,)))
        if reference in self.lookup_errors:
            raise self.lookup_errors[reference]
        if reference in self.empty_lookups:
            return None
        key = (reference.kind, reference.namespace, reference.name)
        try:
            return self.controllers[key]
        except KeyError:
            raise NotFoundError(
                f"Object {reference.name} does not exist in {reference.namespace}"
            ) from None

    async def replace_node(self, node: Node) -> None:
        self.calls.append(("replace_node", (node.name, node.unschedulable)))
        if self.replace_error is not None:
            raise self.replace_error
        self.nodes[node.name] = type(node)(node.raw.to_dict(), api=self.api)

    async def delete_pod(self, pod: Pod, grace_period: Optional[int] = None) -> None:
        self.calls.append(("delete_pod", (pod.name, pod.namespace, grace_period)))
        if pod.name in self.delete_errors:
            raise self.delete_errors[pod.name]
        self.pods = [p for p in self.pods if p.name != pod.name]


class RecordingPrinter:
    """A printer that keeps what it was asked to print."""

    def __init__(self) -> None:
        self.successes: List[Tuple[str, str, str]] = []
        self.warnings: List[str] = []

    def success(self, kind: str, name: str, verb: str) -> None:
        self.successes.append((kind, name, verb))

    def warning(self, message: str) -> None:
        self.warnings.append(message)
