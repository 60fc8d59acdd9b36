#!/usr/bin/env python3
"""
KUBEGATHER CORE MODELS
----------------------
Defines the fundamental data structures shared across KubeGather.
A BundleRoot is the validated top of a must-gather tree, a ScopePath is
one queryable area inside it, and a ParsedResource is a single record
lifted out of the YAML files stored there.

Author: KubeGather Team
Date: 2026-10-18
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Any

from kubegather.loader.loader import lookup

NAMESPACES_DIR = "namespaces"
CLUSTER_SCOPED_DIR = "cluster-scoped-resources"
VERSION_MARKER = "version"


class ResourceScope(Enum):
    """How a resource kind is partitioned inside a bundle."""
    NAMESPACED = "Namespaced"
    CLUSTER = "Cluster"
    CLUSTER_SINGLETON = "ClusterSingleton"


@dataclass(frozen=True)
class BundleRoot:
    """
    The validated top-level directory of a must-gather bundle.

    Only the BundleLocator should build one. Every ScopePath derived from
    a root keeps a reference to the same instance.
    """
    path: Path

    def namespace(self, name: str) -> "ScopePath":
        return ScopePath(root=self, namespace=name)

    def cluster_scoped(self) -> "ScopePath":
        return ScopePath(root=self)


@dataclass(frozen=True)
class ScopePath:
    """
    A queryable area of a bundle: one namespace, or the cluster scope
    when `namespace` is None.
    """
    root: BundleRoot
    namespace: Optional[str] = None

    @property
    def is_cluster_scoped(self) -> bool:
        return self.namespace is None

    @property
    def path(self) -> Path:
        """Pure concatenation. The directory may or may not exist."""
        if self.namespace is None:
            return self.root.path / CLUSTER_SCOPED_DIR
        return self.root.path / NAMESPACES_DIR / self.namespace


@dataclass(frozen=True)
class ParsedResource:
    """
    A single resource instance extracted from a bundle.

    `raw` holds the exact file text when the file was dedicated to this
    resource. It is None for items sliced out of a list document.
    """
    source_path: Path            # File the resource was read from
    document: Any = field(hash=False)  # Parsed YAML node; excluded from hashing
    raw: Optional[str] = None    # Original text, one-file-per-instance layout only

    @property
    def api_version(self) -> Optional[str]:
        return lookup(self.document, "apiVersion")

    @property
    def resource_kind(self) -> Optional[str]:
        return lookup(self.document, "kind")

    @property
    def name(self) -> Optional[str]:
        return lookup(self.document, "metadata", "name")

    @property
    def namespace(self) -> Optional[str]:
        return lookup(self.document, "metadata", "namespace")
