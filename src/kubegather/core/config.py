"""
KUBEGATHER SETTINGS
-------------------
Tunables shared by the locator, extractor and engine. The CLI maps its
flags onto a GatherSettings instance; library callers build one directly.

Author: KubeGather Team
Date: 2026-10-18
"""

import logging
from dataclasses import dataclass, field
from typing import Tuple, Any

logger = logging.getLogger("kubegather.config")

DEFAULT_MAX_ROOT_DEPTH = 64


def _normalize_depth(value: Any) -> int:
    try:
        depth = int(value)
    except (ValueError, TypeError):
        logger.warning(f"Invalid max_root_depth '{value}'. Falling back to default: {DEFAULT_MAX_ROOT_DEPTH}")
        return DEFAULT_MAX_ROOT_DEPTH
    if depth < 0:
        logger.warning(f"Negative max_root_depth '{value}'. Falling back to default: {DEFAULT_MAX_ROOT_DEPTH}")
        return DEFAULT_MAX_ROOT_DEPTH
    return depth


def _normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


@dataclass
class GatherSettings:
    max_root_depth: int = DEFAULT_MAX_ROOT_DEPTH      # Wrapper levels the locator may descend
    document_extensions: Tuple[str, ...] = field(default=(".yaml",))  # Suffixes scanned in resource dirs
    list_items_key: str = "items"                    # Key holding the array in list documents

    def __post_init__(self):
        self.max_root_depth = _normalize_depth(self.max_root_depth)
        if isinstance(self.document_extensions, str):
            self.document_extensions = (self.document_extensions,)
        self.document_extensions = tuple(_normalize_extension(e) for e in self.document_extensions)

    @property
    def list_file_extension(self) -> str:
        """Suffix of the list-type document that stands in for a resource directory."""
        return self.document_extensions[0] if self.document_extensions else ".yaml"
