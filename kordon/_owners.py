# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
"""Decoding of the ``kubernetes.io/created-by`` annotation.

The annotation holds a JSON encoded ``SerializedReference``::

    {
        "kind": "SerializedReference",
        "apiVersion": "v1",
        "reference": {
            "kind": "ReplicationController",
            "namespace": "default",
            "name": "frontend",
            ...
        }
    }

"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ._constants import CREATED_BY_ANNOTATION
from ._exceptions import OwnerReferenceDecodeError
from ._types import OwnerReference

if TYPE_CHECKING:
    from kr8s.asyncio.objects import Pod

SERIALIZED_REFERENCE_KIND = "SerializedReference"


def decode_reference(payload: str | bytes, default_namespace: str = "") -> OwnerReference:
    """Decode a serialized owner reference.

    Args:
        payload: The JSON encoded ``SerializedReference``
        default_namespace: Namespace to use when the reference does not set one

    Returns:
        The decoded reference

    Raises:
        OwnerReferenceDecodeError: If the payload is not a valid ``SerializedReference``
    """
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise OwnerReferenceDecodeError(
            f"unable to decode owner reference: {e}", payload=payload
        ) from e
    if not isinstance(data, dict):
        raise OwnerReferenceDecodeError(
            "unable to decode owner reference: expected a JSON object", payload=payload
        )
    kind = data.get("kind", SERIALIZED_REFERENCE_KIND)
    if kind != SERIALIZED_REFERENCE_KIND:
        raise OwnerReferenceDecodeError(
            f"unable to decode owner reference: unexpected kind {kind!r}",
            payload=payload,
        )
    reference = data.get("reference")
    if not isinstance(reference, dict):
        raise OwnerReferenceDecodeError(
            "unable to decode owner reference: missing reference", payload=payload
        )
    fields = {}
    for key in ("kind", "namespace", "name"):
        value = reference.get(key, "")
        if not isinstance(value, str):
            raise OwnerReferenceDecodeError(
                f"unable to decode owner reference: {key} must be a string",
                payload=payload,
            )
        fields[key] = value
    return OwnerReference(
        kind=fields["kind"],
        namespace=fields["namespace"] or default_namespace,
        name=fields["name"],
    )


def owner_reference(pod: Pod) -> OwnerReference | None:
    """Return the decoded created-by reference of a pod, or None if it has none."""
    payload = pod.annotations.get(CREATED_BY_ANNOTATION)
    if payload is None:
        return None
    try:
        return decode_reference(payload, default_namespace=pod.namespace or "")
    except OwnerReferenceDecodeError as e:
        raise OwnerReferenceDecodeError(
            f"pod {pod.namespace}/{pod.name}: {e}", pod=pod, payload=payload
        ) from e
