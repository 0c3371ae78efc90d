# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
import pytest

from kordon._testutils import (
    FakeControlPlane,
    RecordingPrinter,
    make_controller,
    make_node,
    make_pod,
    serialized_reference,
)


@pytest.fixture
def printer():
    return RecordingPrinter()


@pytest.fixture
def cluster():
    """Node foo running a mirror pod, a pod owned by ReplicationController rg1 and an unowned pod."""
    return FakeControlPlane(
        nodes=(make_node("foo"), make_node("bar", unschedulable=True)),
        pods=(
            make_pod("kube-apiserver-foo", "foo", namespace="kube-system", mirror=True),
            make_pod(
                "rg1-x7k2p",
                "foo",
                created_by=serialized_reference("ReplicationController", "rg1"),
            ),
            make_pod("standalone", "foo"),
            make_pod("other-node", "bar"),
        ),
        controllers=(make_controller("ReplicationController", "rg1"),),
    )
