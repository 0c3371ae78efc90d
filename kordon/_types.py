# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Protocol, Tuple

if TYPE_CHECKING:
    from kr8s.asyncio.objects import APIObject, Node, Pod


class Outcome(enum.Enum):
    """Result of setting the schedulability of a node."""

    NOOP = "noop"
    CHANGED = "changed"
    SKIPPED = "skipped"


class EvictionDecision(enum.Enum):
    """What a drain will do with a single pod."""

    SKIP_MIRROR = "skip-mirror"
    DELETE_MANAGED = "delete-managed"
    DELETE_FORCED = "delete-forced"
    BLOCK_UNMANAGED = "block-unmanaged"


@dataclass(frozen=True)
class OwnerReference:
    """The controller a pod claims to have been created by."""

    kind: str
    namespace: str
    name: str


@dataclass
class Classification:
    """Pods on a node split into those a drain may delete and those blocking it."""

    approved: List[Pod] = field(default_factory=list)
    blocked: List[str] = field(default_factory=list)
    decisions: List[Tuple[Pod, EvictionDecision]] = field(default_factory=list)


@dataclass
class DrainResult:
    node: str
    cordon: Outcome
    classification: Classification
    deleted: List[Pod] = field(default_factory=list)


class ControlPlaneProtocol(Protocol):
    """Remote operations the drain logic needs from the cluster."""

    async def get_node(self, name: str) -> APIObject: ...

    async def list_pods(self, node_name: str) -> List[Pod]: ...

    async def get_controller(self, reference: OwnerReference) -> APIObject: ...

    async def replace_node(self, node: Node) -> None: ...

    async def delete_pod(self, pod: Pod, grace_period: Optional[int] = None) -> None: ...


class PrinterProtocol(Protocol):
    def success(self, kind: str, name: str, verb: str) -> None: ...

    def warning(self, message: str) -> None: ...
