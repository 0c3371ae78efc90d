# SPDX-FileCopyrightText: Copyright (c) 2026, Kordon Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License

# Set by the kubelet on pods it mirrors from static manifests.
MIRROR_ANNOTATION = "kubernetes.io/config.mirror"
# JSON SerializedReference pointing at the controller that created a pod.
CREATED_BY_ANNOTATION = "kubernetes.io/created-by"

CONTROLLER_KINDS = ("ReplicationController", "Job", "DaemonSet")
