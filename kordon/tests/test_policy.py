# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
import kr8s
import pytest

from kordon._exceptions import OwnerReferenceDecodeError, UnmanagedPodsError
from kordon._policy import EvictionPolicy
from kordon._testutils import (
    FakeControlPlane,
    make_controller,
    make_node,
    make_pod,
    serialized_reference,
)
from kordon._types import EvictionDecision, OwnerReference


def names(pods):
    return [pod.name for pod in pods]


async def test_classify_blocks_unmanaged(cluster, printer):
    policy = EvictionPolicy(cluster, printer)
    with pytest.raises(UnmanagedPodsError) as excinfo:
        await policy.classify("foo")
    assert excinfo.value.names == ["standalone"]
    assert str(excinfo.value) == (
        "refusing to continue due to pods managed by neither a ReplicationController, "
        "nor a Job, nor a DaemonSet: standalone (use --force to override)"
    )
    assert printer.warnings == []


async def test_classify_force(cluster, printer):
    policy = EvictionPolicy(cluster, printer, force=True)
    result = await policy.classify("foo")
    assert names(result.approved) == ["rg1-x7k2p", "standalone"]
    assert result.blocked == []
    assert [decision for _, decision in result.decisions] == [
        EvictionDecision.SKIP_MIRROR,
        EvictionDecision.DELETE_MANAGED,
        EvictionDecision.DELETE_FORCED,
    ]
    assert printer.warnings == [
        "About to delete these pods managed by neither a ReplicationController, "
        "nor a Job, nor a DaemonSet: standalone"
    ]


async def test_classify_single_list_call(cluster, printer):
    await EvictionPolicy(cluster, printer, force=True).classify("foo")
    assert [c for c in cluster.calls if c[0] == "list_pods"] == [("list_pods", ("foo",))]


@pytest.mark.parametrize("force", [True, False])
async def test_mirror_pods_are_never_classified(printer, force):
    cluster = FakeControlPlane(
        nodes=(make_node("foo"),),
        pods=(
            make_pod("static-a", "foo", mirror=True),
            make_pod("static-b", "foo", mirror=True, created_by="{"),
        ),
    )
    result = await EvictionPolicy(cluster, printer, force=force).classify("foo")
    assert result.approved == []
    assert result.blocked == []
    assert printer.warnings == []


@pytest.mark.parametrize("kind", ["ReplicationController", "Job", "DaemonSet"])
@pytest.mark.parametrize("force", [True, False])
async def test_managed_regardless_of_force(printer, kind, force):
    cluster = FakeControlPlane(
        nodes=(make_node("foo"),),
        pods=(make_pod("owned", "foo", created_by=serialized_reference(kind, "ctrl")),),
        controllers=(make_controller(kind, "ctrl"),),
    )
    result = await EvictionPolicy(cluster, printer, force=force).classify("foo")
    assert names(result.approved) == ["owned"]
    assert result.decisions[0][1] is EvictionDecision.DELETE_MANAGED
    assert printer.warnings == []


@pytest.mark.parametrize(
    "created_by",
    [
        None,
        serialized_reference("Deployment", "web"),
        serialized_reference("ReplicationController", "gone"),
        serialized_reference("Job", ""),
    ],
    ids=["no-owner", "unknown-kind", "deleted-owner", "empty-name"],
)
async def test_unmanaged(printer, created_by):
    cluster = FakeControlPlane(
        nodes=(make_node("foo"),),
        pods=(
            make_pod("managed", "foo", created_by=serialized_reference("Job", "ok")),
            make_pod("unmanaged", "foo", created_by=created_by),
        ),
        controllers=(make_controller("Job", "ok"),),
    )
    with pytest.raises(UnmanagedPodsError) as excinfo:
        await EvictionPolicy(cluster, printer).classify("foo")
    assert excinfo.value.names == ["unmanaged"]

    result = await EvictionPolicy(cluster, printer, force=True).classify("foo")
    assert names(result.approved) == ["managed", "unmanaged"]
    assert result.blocked == []


async def test_unknown_kind_is_not_looked_up(printer):
    cluster = FakeControlPlane(
        pods=(make_pod("web-1", "foo", created_by=serialized_reference("Deployment", "web")),),
    )
    await EvictionPolicy(cluster, printer, force=True).classify("foo")
    assert not [c for c in cluster.calls if c[0] == "get_controller"]


async def test_lookup_error_is_treated_as_owner_absent(printer):
    cluster = FakeControlPlane(
        pods=(make_pod("rg1-x7k2p", "foo", created_by=serialized_reference("ReplicationController", "rg1")),),
        controllers=(make_controller("ReplicationController", "rg1"),),
    )
    reference = OwnerReference("ReplicationController", "default", "rg1")
    cluster.lookup_errors[reference] = kr8s.ServerError("etcdserver: request timed out")
    policy = EvictionPolicy(cluster, printer)
    assert await policy.decide(cluster.pods[0]) is EvictionDecision.BLOCK_UNMANAGED
    assert not await policy.is_managed(cluster.pods[0])


async def test_blocked_names_are_joined_in_list_order(printer):
    cluster = FakeControlPlane(
        pods=tuple(make_pod(name, "foo") for name in ("c", "a", "b")),
    )
    with pytest.raises(UnmanagedPodsError, match="c, a, b"):
        await EvictionPolicy(cluster, printer).classify("foo")


@pytest.mark.parametrize("force", [True, False])
async def test_malformed_reference_aborts(printer, force):
    cluster = FakeControlPlane(
        pods=(
            make_pod("fine", "foo"),
            make_pod("broken", "foo", created_by='{"reference": '),
            make_pod("never-seen", "foo"),
        ),
    )
    with pytest.raises(OwnerReferenceDecodeError):
        await EvictionPolicy(cluster, printer, force=force).classify("foo")
    assert printer.warnings == []


async def test_empty_lookup_is_treated_as_owner_absent(printer):
    cluster = FakeControlPlane(
        pods=(make_pod("job-abc12", "foo", created_by=serialized_reference("Job", "nightly")),),
        controllers=(make_controller("Job", "nightly"),),
    )
    cluster.empty_lookups.add(OwnerReference("Job", "default", "nightly"))
    pod = cluster.pods[0]

    assert await EvictionPolicy(cluster, printer).decide(pod) is EvictionDecision.BLOCK_UNMANAGED
    with pytest.raises(UnmanagedPodsError) as excinfo:
        await EvictionPolicy(cluster, printer).classify("foo")
    assert excinfo.value.names == ["job-abc12"]

    policy = EvictionPolicy(cluster, printer, force=True)
    assert await policy.decide(pod) is EvictionDecision.DELETE_FORCED
    result = await policy.classify("foo")
    assert names(result.approved) == ["job-abc12"]
    assert result.decisions[0][1] is EvictionDecision.DELETE_FORCED
