#!/usr/bin/env python3
"""
KUBEGATHER CATALOG - Known Resource Kinds
-----------------------------------------
Descriptors for the kinds an OpenShift must-gather usually carries.
Core API objects are filed under the `core` group directory.

Author: KubeGather Team
Date: 2026-10-18
"""

from kubegather.core.models import ResourceScope
from kubegather.resources.descriptor import ResourceRegistry, ResourceType


class Machine(ResourceType):
    group = "machine.openshift.io"
    kind = "machine"
    scope = ResourceScope.NAMESPACED


class MachineSet(ResourceType):
    group = "machine.openshift.io"
    kind = "machineset"
    scope = ResourceScope.NAMESPACED


class Deployment(ResourceType):
    group = "apps"
    kind = "deployment"
    scope = ResourceScope.NAMESPACED


class DaemonSet(ResourceType):
    group = "apps"
    kind = "daemonset"
    scope = ResourceScope.NAMESPACED


class StatefulSet(ResourceType):
    group = "apps"
    kind = "statefulset"
    scope = ResourceScope.NAMESPACED


class ReplicaSet(ResourceType):
    group = "apps"
    kind = "replicaset"
    scope = ResourceScope.NAMESPACED


class Pod(ResourceType):
    group = "core"
    kind = "pod"
    scope = ResourceScope.NAMESPACED


class Service(ResourceType):
    group = "core"
    kind = "service"
    scope = ResourceScope.NAMESPACED


class ConfigMap(ResourceType):
    group = "core"
    kind = "configmap"
    scope = ResourceScope.NAMESPACED


class Event(ResourceType):
    group = "core"
    kind = "event"
    scope = ResourceScope.NAMESPACED


class Ingress(ResourceType):
    group = "networking.k8s.io"
    kind = "ingress"
    scope = ResourceScope.NAMESPACED
    kind_plural = "ingresses"


class Node(ResourceType):
    group = "core"
    kind = "node"
    scope = ResourceScope.CLUSTER


class Namespace(ResourceType):
    group = "core"
    kind = "namespace"
    scope = ResourceScope.CLUSTER


class PersistentVolume(ResourceType):
    group = "core"
    kind = "persistentvolume"
    scope = ResourceScope.CLUSTER


class MachineConfigPool(ResourceType):
    group = "machineconfiguration.openshift.io"
    kind = "machineconfigpool"
    scope = ResourceScope.CLUSTER


class ClusterOperator(ResourceType):
    group = "config.openshift.io"
    kind = "clusteroperator"
    scope = ResourceScope.CLUSTER


class ClusterVersion(ResourceType):
    group = "config.openshift.io"
    kind = "clusterversion"
    scope = ResourceScope.CLUSTER_SINGLETON


class Infrastructure(ResourceType):
    group = "config.openshift.io"
    kind = "infrastructure"
    scope = ResourceScope.CLUSTER_SINGLETON


DEFAULT_KINDS = [
    Machine, MachineSet, Deployment, DaemonSet, StatefulSet, ReplicaSet,
    Pod, Service, ConfigMap, Event, Ingress,
    Node, Namespace, PersistentVolume, MachineConfigPool, ClusterOperator,
    ClusterVersion, Infrastructure,
]


def build_default_registry() -> ResourceRegistry:
    return ResourceRegistry([kind() for kind in DEFAULT_KINDS])
