#!/usr/bin/env python3
"""
KUBEGATHER LOCATOR - Bundle Root Discovery
------------------------------------------
must-gather archives are usually unpacked under one or more wrapper
directories (the archive name, then the image digest, ...). The locator
walks down from any starting point until it reaches the directory that
actually holds the cluster dump.

A directory is the root when it contains:
  1. a `version` file, or
  2. both a `namespaces` and a `cluster-scoped-resources` directory.
Otherwise the search descends into the only subdirectory. Zero or
several subdirectories leave nothing to choose, so the search stops.

Author: KubeGather Team
Date: 2026-10-18
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from kubegather.core.config import GatherSettings
from kubegather.core.errors import (
    AmbiguousRootError,
    BundleNotADirectoryError,
    ResourceReadError,
    RootDepthExceededError,
)
from kubegather.core.models import BundleRoot, CLUSTER_SCOPED_DIR, NAMESPACES_DIR, VERSION_MARKER
from kubegather.loader.loader import is_dir, is_file

logger = logging.getLogger("kubegather.locator")


class BundleLocator:
    """Resolves an arbitrary path to the BundleRoot beneath it."""

    def __init__(self, settings: Optional[GatherSettings] = None):
        self.settings = settings or GatherSettings()

    @staticmethod
    def is_bundle_root(path: Path) -> bool:
        if is_file(path / VERSION_MARKER):
            return True
        return is_dir(path / NAMESPACES_DIR) and is_dir(path / CLUSTER_SCOPED_DIR)

    @staticmethod
    def _subdirectories(path: Path) -> List[Path]:
        try:
            return sorted(p for p in path.iterdir() if p.is_dir())
        except OSError as e:
            raise ResourceReadError(path, e.strerror or str(e)) from e

    def locate(self, start: Union[str, Path]) -> BundleRoot:
        current = Path(start).expanduser().resolve()
        if not is_dir(current):
            raise BundleNotADirectoryError(current)

        depth = 0
        while True:
            if self.is_bundle_root(current):
                logger.debug(f"Found must-gather root at {current} (depth {depth})")
                return BundleRoot(path=current)

            children = self._subdirectories(current)
            if len(children) != 1:
                raise AmbiguousRootError(current, len(children))

            if depth >= self.settings.max_root_depth:
                raise RootDepthExceededError(current, self.settings.max_root_depth)

            logger.debug(f"No markers in {current}, descending into {children[0].name}")
            current = children[0]
            depth += 1
