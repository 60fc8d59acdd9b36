#!/usr/bin/env python3
"""
KUBEGATHER ENGINE - The Bundle Reader
-------------------------------------
The GatherEngine binds a located must-gather root to the extractor and
answers questions per resource type: list the namespaces, collect one
kind in the scope it belongs to, or sweep many kinds at once and report
how each one went.

Author: KubeGather Team
Date: 2026-10-18
"""

import logging
import time
from pathlib import Path
from typing import Dict, Any, Iterable, List, Optional, Union

from kubegather.core.config import GatherSettings
from kubegather.core.errors import (
    KubeGatherError,
    ResourceReadError,
    ResourcesNotFoundError,
    ScopeMismatchError,
    UnexpectedShapeError,
)
from kubegather.core.locator import BundleLocator
from kubegather.core.models import BundleRoot, ParsedResource, ScopePath, NAMESPACES_DIR
from kubegather.loader.loader import is_dir
from kubegather.resources.descriptor import ResourceType
from kubegather.resources.extractor import ResourceExtractor

logger = logging.getLogger("kubegather.engine")


class GatherEngine:
    """
    Read-only view over one must-gather bundle.
    The root is located once at construction and shared by every query.
    """

    def __init__(self, bundle_path: Union[str, Path], settings: Optional[GatherSettings] = None):
        self.settings = settings or GatherSettings()
        self.root: BundleRoot = BundleLocator(self.settings).locate(bundle_path)
        self.extractor = ResourceExtractor(self.settings)
        logger.info(f"Using must-gather root {self.root.path}")

    def list_namespaces(self) -> List[str]:
        ns_dir = self.root.path / NAMESPACES_DIR
        if not is_dir(ns_dir):
            return []
        try:
            return sorted(p.name for p in ns_dir.iterdir() if p.is_dir())
        except OSError as e:
            raise ResourceReadError(ns_dir, e.strerror or str(e)) from e

    def scope_for(self, descriptor: ResourceType, namespace: Optional[str] = None) -> ScopePath:
        """Picks the scope a descriptor lives in, rejecting a namespace it cannot use."""
        if descriptor.is_namespaced:
            if not namespace:
                raise ScopeMismatchError(
                    f"{descriptor.qualified_name} is namespaced; a namespace is required",
                    {"resource": descriptor.qualified_name},
                )
            return self.root.namespace(namespace)

        if namespace:
            raise ScopeMismatchError(
                f"{descriptor.qualified_name} is cluster-scoped; namespace '{namespace}' does not apply",
                {"resource": descriptor.qualified_name, "namespace": namespace},
            )
        return self.root.cluster_scoped()

    def collect(self, descriptor: ResourceType, namespace: Optional[str] = None) -> List[ParsedResource]:
        scope = self.scope_for(descriptor, namespace)
        return self.extractor.extract(scope, descriptor)

    def collect_singleton(self, descriptor: ResourceType) -> ParsedResource:
        """The single instance of a cluster-wide singleton kind."""
        resources = self.collect(descriptor)
        if len(resources) != 1:
            source = resources[0].source_path if resources else descriptor.resources_dir(self.root.cluster_scoped())
            raise UnexpectedShapeError(
                source,
                f"Expected exactly one {descriptor.kind}, found {len(resources)}",
                {"count": len(resources)},
            )
        return resources[0]

    def collect_all(self, descriptors: Iterable[ResourceType], namespace: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Collects several kinds and reports each outcome without raising.

        Namespaced kinds are read from `namespace`, cluster kinds from the
        cluster scope; namespaced kinds are skipped when no namespace is given.
        """
        reports = []
        for descriptor in descriptors:
            if descriptor.is_namespaced and not namespace:
                continue
            target_ns = namespace if descriptor.is_namespaced else None
            started = time.time()
            try:
                resources = self.collect(descriptor, target_ns)
                reports.append(self._report(descriptor, target_ns, "FOUND", resources=resources))
            except KubeGatherError as e:
                logger.debug(f"{descriptor.qualified_name}: {e.message}")
                reports.append(self._report(descriptor, target_ns, e.code, error=e))
            reports[-1]["elapsed"] = time.time() - started
        return reports

    def _report(self, descriptor: ResourceType, namespace: Optional[str], status: str,
                resources: Optional[List[ParsedResource]] = None,
                error: Optional[KubeGatherError] = None) -> Dict[str, Any]:
        return {
            "resource": descriptor.qualified_name,
            "kind": descriptor.kind,
            "namespace": namespace,
            "status": status,
            "success": error is None,
            "count": len(resources or []),
            "resources": resources or [],
            "error": error.message if error else None,
            "path": error.details.get("path") if error else None,
        }

    def generate_summary(self, reports: List[Dict[str, Any]]) -> Dict[str, Any]:
        if not reports:
            return {
                "resource_types": 0, "found": 0, "missing": 0,
                "errors": 0, "total_resources": 0
            }

        found = sum(1 for r in reports if r.get("success"))
        missing = sum(1 for r in reports if r.get("status") == ResourcesNotFoundError.code)
        return {
            "resource_types": len(reports),
            "found": found,
            "missing": missing,
            "errors": len(reports) - found - missing,
            "total_resources": sum(r.get("count", 0) for r in reports),
            "summary_timestamp": time.strftime("%Y-%m-%d %H:%M:%S")
        }
