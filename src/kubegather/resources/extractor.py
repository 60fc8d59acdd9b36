#!/usr/bin/env python3
"""
KUBEGATHER EXTRACTOR - Resource Layout Resolution
-------------------------------------------------
must-gather stores a resource type in one of two shapes under a scope:

  1. Directory layout:  <scope>/<group>/<plural>/<name>.yaml
     One file per instance, each holding exactly one document.
  2. List layout:       <scope>/<group>/<plural>.yaml
     One list-type document whose `items` array holds every instance.

The directory wins when both exist. Extraction is all-or-nothing: the
first unreadable or malformed file aborts the call and nothing is
returned. Nothing is cached; every call reads the filesystem again.

Author: KubeGather Team
Date: 2026-10-18
"""

import logging
from pathlib import Path
from typing import List, Optional

from kubegather.core.config import GatherSettings
from kubegather.core.errors import ResourceReadError, ResourcesNotFoundError, UnexpectedShapeError
from kubegather.core.models import ParsedResource, ScopePath
from kubegather.loader.loader import YamlLoader, is_dir, is_file
from kubegather.resources.descriptor import ResourceType

logger = logging.getLogger("kubegather.extractor")


class ResourceExtractor:
    """Reads every instance of a resource type from one scope of a bundle."""

    def __init__(self, settings: Optional[GatherSettings] = None, loader: Optional[YamlLoader] = None):
        self.settings = settings or GatherSettings()
        self.loader = loader or YamlLoader()

    def list_file_for(self, resources_dir: Path) -> Path:
        # Sits next to the plural directory, so the group stays in the path but not in the file name.
        return resources_dir.parent / f"{resources_dir.name}{self.settings.list_file_extension}"

    def extract(self, scope_path: ScopePath, descriptor: ResourceType) -> List[ParsedResource]:
        resources_dir = descriptor.resources_dir(scope_path)
        if is_dir(resources_dir):
            logger.debug(f"{descriptor.qualified_name}: directory layout at {resources_dir}")
            return self.read_dir(resources_dir)

        list_file = self.list_file_for(resources_dir)
        if is_file(list_file):
            logger.debug(f"{descriptor.qualified_name}: list layout at {list_file}")
            return self.read_list_file(list_file)

        raise ResourcesNotFoundError(resources_dir)

    def _is_document_file(self, path: Path) -> bool:
        # Files without a suffix are skipped like any other non-matching name.
        return path.suffix.lower() in self.settings.document_extensions and is_file(path)

    def read_dir(self, path: Path) -> List[ParsedResource]:
        """One ParsedResource per document file directly inside `path`."""
        try:
            entries = sorted(path.iterdir())
        except OSError as e:
            raise ResourceReadError(path, e.strerror or str(e)) from e

        manifests = []
        for entry in entries:
            if not self._is_document_file(entry):
                logger.debug(f"Skipping {entry.name}: not a {'/'.join(self.settings.document_extensions)} file")
                continue

            raw_content = self.loader.read(entry)
            document = self.loader.load_single(raw_content, entry)
            manifests.append(ParsedResource(source_path=entry, document=document, raw=raw_content))

        return manifests

    def read_list_file(self, path: Path) -> List[ParsedResource]:
        """One ParsedResource per element of the list document's items array."""
        raw_content = self.loader.read(path)
        document = self.loader.load_single(raw_content, path)

        key = self.settings.list_items_key
        items = document.get(key) if isinstance(document, dict) else None
        if not isinstance(items, list):
            raise UnexpectedShapeError(
                path,
                f"{path} does not look like a list type resource: '{key}' is missing or not an array",
            )

        # The text of an embedded item cannot be recovered, so raw stays empty.
        return [ParsedResource(source_path=path, document=element) for element in items]
