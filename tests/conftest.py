import sys
import os
import stat
from pathlib import Path

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

MACHINE_TEMPLATE = """apiVersion: machine.openshift.io/v1beta1
kind: Machine
metadata:
  name: {name}
  namespace: openshift-machine-api
  labels:
    machine.openshift.io/cluster-api-machine-role: {role}
spec:
  providerSpec: {{}}
status:
  phase: Running
"""

DEPLOYMENT_NAMES = [
    "cluster-autoscaler-operator",
    "cluster-baremetal-operator",
    "control-plane-machine-set-operator",
    "machine-api-controllers",
    "machine-api-operator",
]


def deployment_list_yaml(names):
    lines = ["apiVersion: apps/v1", "kind: DeploymentList", "items:"]
    for name in names:
        lines += [
            "- apiVersion: apps/v1",
            "  kind: Deployment",
            "  metadata:",
            f"    name: {name}",
            "    namespace: openshift-machine-api",
            "  spec:",
            "    replicas: 1",
        ]
    lines.append("metadata:")
    lines.append("  resourceVersion: \"1234\"")
    return "\n".join(lines) + "\n"


CLUSTERVERSION_YAML = """apiVersion: config.openshift.io/v1
kind: ClusterVersion
metadata:
  name: version
spec:
  channel: stable-4.16
status:
  desired:
    version: 4.16.3
"""

NODES_YAML = """apiVersion: v1
kind: NodeList
items:
- apiVersion: v1
  kind: Node
  metadata:
    name: master-0
- apiVersion: v1
  kind: Node
  metadata:
    name: worker-0
"""


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def bundle_dir(tmp_path) -> Path:
    """
    A realistic must-gather unpacked under two single-child wrappers:
    <tmp>/must-gather.local.123/quay-io-openshift-release-sha256/...
    """
    root = tmp_path / "must-gather.local.123" / "quay-io-openshift-release-sha256"
    write(root / "version", "openshift-must-gather 4.16.3\n")
    write(root / "timestamp", "2026-10-18 10:00:00\n")

    ns = root / "namespaces" / "openshift-machine-api"
    machines = ns / "machine.openshift.io" / "machines"
    write(machines / "ci-master-0.yaml", MACHINE_TEMPLATE.format(name="ci-master-0", role="master"))
    write(machines / "ci-master-1.yaml", MACHINE_TEMPLATE.format(name="ci-master-1", role="master"))
    write(machines / "ci-worker-0.yaml", MACHINE_TEMPLATE.format(name="ci-worker-0", role="worker"))
    write(ns / "apps" / "deployments.yaml", deployment_list_yaml(DEPLOYMENT_NAMES))
    write(ns / "openshift-machine-api.yaml", "apiVersion: v1\nkind: Namespace\nmetadata:\n  name: openshift-machine-api\n")

    (root / "namespaces" / "openshift-etcd").mkdir(parents=True)

    csr = root / "cluster-scoped-resources"
    write(csr / "config.openshift.io" / "clusterversions" / "version.yaml", CLUSTERVERSION_YAML)
    write(csr / "core" / "nodes.yaml", NODES_YAML)
    return root


@pytest.fixture
def bundle_top(bundle_dir) -> Path:
    """The directory the must-gather archive was unpacked into."""
    return bundle_dir.parent.parent


# Permission bits are not enforced for root, so sabotage tests cannot fail there.
skip_as_root = pytest.mark.skipif(
    os.name == "nt" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="permission bits are not enforced for root or on Windows",
)


@pytest.fixture
def lock():
    """chmod paths for one test and restore owner access afterwards so tmp cleanup works."""
    locked = []

    def _lock(path: Path, mode: int) -> Path:
        os.chmod(path, mode)
        locked.append(path)
        return path

    yield _lock
    for path in reversed(locked):
        os.chmod(path, stat.S_IRWXU)
