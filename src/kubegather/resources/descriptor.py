#!/usr/bin/env python3
"""
KUBEGATHER RESOURCE TYPES
-------------------------
A ResourceType names one kind of resource the way a must-gather bundle
files it: API group directory, lowercase kind and its plural, and the
scope the kind lives in. Concrete kinds are small subclasses that the
caller registers; the extractor only ever sees the abstract interface.

Author: KubeGather Team
Date: 2026-10-18
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from kubegather.core.errors import UnknownResourceTypeError
from kubegather.core.models import ResourceScope, ScopePath


class ResourceType(ABC):
    """
    Identifies a resource kind inside a bundle.

    Subclasses must provide `group`, `kind` and `scope`. `kind_plural`
    defaults to kind + "s" and is overridden for irregular plurals.
    """

    @property
    @abstractmethod
    def group(self) -> str:
        ...

    @property
    @abstractmethod
    def kind(self) -> str:
        ...

    @property
    @abstractmethod
    def scope(self) -> ResourceScope:
        ...

    @property
    def kind_plural(self) -> str:
        return f"{self.kind}s"

    @property
    def is_namespaced(self) -> bool:
        return self.scope == ResourceScope.NAMESPACED

    def resources_dir(self, scope_path: ScopePath) -> Path:
        """`<scope>/<group>/<plural>`: the one-file-per-instance location."""
        return scope_path.path / self.group / self.kind_plural

    @property
    def qualified_name(self) -> str:
        return f"{self.kind_plural}.{self.group}"

    def __repr__(self):
        return f"<{type(self).__name__} {self.qualified_name} ({self.scope.value})>"


class ResourceRegistry:
    """
    Name-to-descriptor lookup for the command line and the engine.

    A descriptor answers to its kind, its plural and either of those
    suffixed with ".<group>", all case-insensitive.
    """

    def __init__(self, descriptors: Optional[List[ResourceType]] = None):
        self._descriptors: List[ResourceType] = []
        self._aliases: Dict[str, ResourceType] = {}
        for descriptor in descriptors or []:
            self.register(descriptor)

    @staticmethod
    def _names_for(descriptor: ResourceType) -> List[str]:
        names = [descriptor.kind, descriptor.kind_plural]
        names += [f"{n}.{descriptor.group}" for n in list(names)]
        return [n.lower() for n in names]

    def register(self, descriptor: ResourceType) -> ResourceType:
        """Adds a descriptor. A later registration wins on a clashing name."""
        self._descriptors = [d for d in self._descriptors if d.qualified_name != descriptor.qualified_name]
        self._descriptors.append(descriptor)
        for name in self._names_for(descriptor):
            self._aliases[name] = descriptor
        return descriptor

    def lookup(self, name: str) -> ResourceType:
        try:
            return self._aliases[name.strip().lower()]
        except KeyError:
            raise UnknownResourceTypeError(name) from None

    def __contains__(self, name: str) -> bool:
        return name.strip().lower() in self._aliases

    def __iter__(self) -> Iterator[ResourceType]:
        return iter(list(self._descriptors))

    def __len__(self) -> int:
        return len(self._descriptors)
