# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from typing import Optional

import kr8s.asyncio

from ._control_plane import ControlPlane

CONTEXT_ENV = "KORDON_CONTEXT"


@dataclass
class ClusterConfig:
    """Where to find the Kubernetes API server.

    Unset fields fall back to kr8s's own discovery, which honours
    ``KUBECONFIG``, ``~/.kube/config`` and in-cluster service accounts.
    """

    url: Optional[str] = None
    kubeconfig: Optional[str] = None
    context: Optional[str] = None
    namespace: Optional[str] = None

    @classmethod
    def from_env(cls, **overrides) -> ClusterConfig:
        config = cls(context=os.environ.get(CONTEXT_ENV) or None)
        for key, value in overrides.items():
            if value is not None:
                setattr(config, key, value)
        return config


async def connect(config: Optional[ClusterConfig] = None) -> ControlPlane:
    """Create a :class:`ControlPlane` for the configured cluster."""
    if config is None:
        config = ClusterConfig.from_env()
    api = await kr8s.asyncio.api(**asdict(config))
    return ControlPlane(api)
