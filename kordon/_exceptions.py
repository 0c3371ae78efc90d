# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kr8s.asyncio.objects import Pod

UNMANAGED_DESCRIPTION = (
    "pods managed by neither a ReplicationController, nor a Job, nor a DaemonSet"
)


class KordonError(Exception):
    """Base class for errors raised by kordon."""


class UnmanagedPodsError(KordonError):
    """A node has pods that are not managed by a controller and force was not set.

    Attributes:
        names: The names of the blocking pods, in list order
    """

    def __init__(self, names: list[str]) -> None:
        self.names = list(names)
        super().__init__(
            f"refusing to continue due to {UNMANAGED_DESCRIPTION}: "
            f"{join_names(self.names)} (use --force to override)"
        )


class OwnerReferenceDecodeError(KordonError):
    """The created-by annotation on a pod could not be decoded.

    Attributes:
        pod: The pod carrying the annotation
        payload: The raw annotation value
    """

    def __init__(
        self,
        message: str,
        pod: Pod | None = None,
        payload: str | bytes | None = None,
    ) -> None:
        self.pod = pod
        self.payload = payload
        super().__init__(message)


def join_names(names: list[str]) -> str:
    return ", ".join(names)
