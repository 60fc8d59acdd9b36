#!/usr/bin/env python3
"""
KUBEGATHER LOADER - Structured Document Access
----------------------------------------------
Turns the text of a bundle file into YAML documents via ruamel.yaml and
offers absence-tolerant access into the parsed tree. A single file may
carry several '---' separated documents; callers decide how many they
accept.

Author: KubeGather Team
Date: 2026-10-18
"""

import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from ruamel.yaml import YAML, YAMLError

from kubegather.core.errors import DocumentParseError, MultiDocumentFileError, ResourceReadError

logger = logging.getLogger("kubegather.loader")

PathLike = Union[str, Path]


def is_dir(path: PathLike) -> bool:
    """Path.is_dir(), with permission and I/O failures raised as ResourceReadError."""
    try:
        return Path(path).is_dir()
    except OSError as e:
        raise ResourceReadError(path, e.strerror or str(e)) from e


def is_file(path: PathLike) -> bool:
    """Path.is_file(), with permission and I/O failures raised as ResourceReadError."""
    try:
        return Path(path).is_file()
    except OSError as e:
        raise ResourceReadError(path, e.strerror or str(e)) from e


def item(seq: Any, index: int) -> Any:
    """Sequence element by index, or None when out of range or not a sequence."""
    if not isinstance(seq, list):
        return None
    try:
        return seq[index]
    except IndexError:
        return None


def lookup(doc: Any, *keys: Union[str, int]) -> Any:
    """
    Walks mapping keys and sequence indices from `doc`.

    Returns None as soon as a key is missing, an index is out of range,
    or the node at that level has the wrong type.
    """
    node = doc
    for key in keys:
        if isinstance(key, int) and not isinstance(key, bool):
            node = item(node, key)
        elif isinstance(node, dict):
            node = node.get(key)
        else:
            return None
        if node is None:
            return None
    return node


def scalar(node: Any) -> Any:
    """The node itself when it is a scalar, else None."""
    if isinstance(node, (dict, list)):
        return None
    return node


class YamlLoader:
    """
    Parses YAML text into documents. A fresh ruamel parser is built for
    every call so one loader can be shared between threads.
    """

    def __init__(self, typ: str = "rt"):
        self.typ = typ

    def _parser(self) -> YAML:
        yaml = YAML(typ=self.typ)
        yaml.preserve_quotes = True
        return yaml

    def read(self, path: PathLike) -> str:
        """Reads file text, mapping I/O and decoding failures to ResourceReadError."""
        try:
            return Path(path).read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ResourceReadError(path, f"not valid UTF-8 ({e.reason})") from e
        except OSError as e:
            raise ResourceReadError(path, e.strerror or str(e)) from e

    def load_all(self, text: str, source: Optional[PathLike] = None) -> List[Any]:
        """Every document in `text`, in order. Empty text yields an empty list."""
        try:
            return list(self._parser().load_all(text))
        except YAMLError as e:
            raise DocumentParseError(source or "<string>", str(e).strip()) from e

    def load_single(self, text: str, source: Optional[PathLike] = None) -> Any:
        """The only document in `text`. Zero or several documents is an error."""
        docs = self.load_all(text, source)
        if len(docs) != 1:
            raise MultiDocumentFileError(source or "<string>", len(docs))
        return docs[0]

    def load_file(self, path: PathLike) -> List[Any]:
        return self.load_all(self.read(path), path)
