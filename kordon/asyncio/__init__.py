# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
"""The `kordon` asynchronous API.

This module provides coroutines to cordon, uncordon and drain Kubernetes nodes.
"""
from kordon._config import ClusterConfig, connect
from kordon._control_plane import ControlPlane

from ._helpers import classify, cordon, drain, uncordon

__all__ = [
    "classify",
    "connect",
    "cordon",
    "drain",
    "uncordon",
    "ClusterConfig",
    "ControlPlane",
]
