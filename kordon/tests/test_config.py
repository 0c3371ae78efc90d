# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
import kordon._config
from kordon._config import ClusterConfig, connect
from kordon._control_plane import ControlPlane
from kordon._testutils import set_env


def test_config_from_env():
    with set_env(KORDON_CONTEXT="kind-env"):
        assert ClusterConfig.from_env().context == "kind-env"
        assert ClusterConfig.from_env(context="kind-flag").context == "kind-flag"
        assert ClusterConfig.from_env(context=None).context == "kind-env"


def test_config_from_env_overrides():
    config = ClusterConfig.from_env(kubeconfig="/tmp/kubeconfig", namespace="ops")
    assert config.kubeconfig == "/tmp/kubeconfig"
    assert config.namespace == "ops"


async def test_connect(monkeypatch):
    seen = {}
    sentinel = object()

    async def api(**kwargs):
        seen.update(kwargs)
        return sentinel

    monkeypatch.setattr(kordon._config.kr8s.asyncio, "api", api)
    control_plane = await connect(ClusterConfig(kubeconfig="/tmp/kubeconfig", context="ctx"))
    assert isinstance(control_plane, ControlPlane)
    assert control_plane.api is sentinel
    assert seen == {
        "url": None,
        "kubeconfig": "/tmp/kubeconfig",
        "context": "ctx",
        "namespace": None,
    }
