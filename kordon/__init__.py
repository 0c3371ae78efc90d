# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
"""
This module contains `kordon`, a tool to cordon, uncordon and drain Kubernetes nodes.

At the top level, `kordon` provides a synchronous API that wraps the asynchronous API provided by `kordon.asyncio`.
Both APIs are functionally identical with the same function signatures and return values.
"""
from . import asyncio
from ._async_utils import run_sync as _run_sync
from ._config import ClusterConfig
from ._control_plane import ControlPlane
from ._exceptions import KordonError, OwnerReferenceDecodeError, UnmanagedPodsError
from ._printer import NullPrinter, Printer
from ._types import Classification, DrainResult, EvictionDecision, Outcome
from .asyncio import classify as _classify
from .asyncio import connect as _connect
from .asyncio import cordon as _cordon
from .asyncio import drain as _drain
from .asyncio import uncordon as _uncordon

try:
    from ._version import version as __version__  # noqa
    from ._version import version_tuple as __version_tuple__  # noqa
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)


cordon = _run_sync(_cordon)
uncordon = _run_sync(_uncordon)
drain = _run_sync(_drain)
classify = _run_sync(_classify)
connect = _run_sync(_connect)

__all__ = [
    "__version__",
    "__version_tuple__",
    "asyncio",
    "classify",
    "connect",
    "cordon",
    "drain",
    "uncordon",
    "Classification",
    "ClusterConfig",
    "ControlPlane",
    "DrainResult",
    "EvictionDecision",
    "KordonError",
    "NullPrinter",
    "OwnerReferenceDecodeError",
    "Outcome",
    "Printer",
    "UnmanagedPodsError",
]
