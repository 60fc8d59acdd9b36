"""Typed errors raised while locating bundles and extracting resources."""

from pathlib import Path
from typing import Optional, Dict, Any, Union


class KubeGatherError(Exception):
    """Base exception for KubeGather."""
    code = "ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class PathError(KubeGatherError):
    """An error tied to one offending filesystem path."""

    def __init__(self, path: Union[str, Path], message: str, details: Optional[Dict[str, Any]] = None):
        self.path = Path(path)
        merged = {"path": str(self.path)}
        merged.update(details or {})
        super().__init__(message, merged)


class BundleNotADirectoryError(PathError):
    """Raised when the root search starts from a missing path or a file."""
    code = "NOT_A_DIRECTORY"

    def __init__(self, path: Union[str, Path]):
        super().__init__(path, f"Not a directory: {path}")


class AmbiguousRootError(PathError):
    """Raised when the root heuristic cannot descend to a unique bundle root."""
    code = "AMBIGUOUS_ROOT"

    def __init__(self, path: Union[str, Path], candidates: int):
        self.candidates = candidates
        if candidates == 0:
            reason = "no bundle markers and no subdirectories"
        else:
            reason = f"no bundle markers and {candidates} candidate subdirectories"
        super().__init__(
            path,
            f"Cannot determine root of must-gather at {path}: {reason}",
            {"candidates": candidates},
        )


class RootDepthExceededError(PathError):
    """Raised when the root search descends past the configured depth."""
    code = "DEPTH_EXCEEDED"

    def __init__(self, path: Union[str, Path], max_depth: int):
        self.max_depth = max_depth
        super().__init__(
            path,
            f"Gave up looking for must-gather root after {max_depth} levels at {path}",
            {"max_depth": max_depth},
        )


class ResourceReadError(PathError):
    """Raised when a directory listing or file read fails."""
    code = "READ_ERROR"

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(path, f"Cannot read {path}: {reason}")


class DocumentParseError(PathError):
    """Raised when file content is not well-formed YAML."""
    code = "PARSE_ERROR"

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(path, f"Malformed YAML in {path}: {reason}")


class MultiDocumentFileError(PathError):
    """Raised when a file expected to hold exactly one document does not."""
    code = "MULTI_DOCUMENT"

    def __init__(self, path: Union[str, Path], count: int):
        self.count = count
        super().__init__(
            path,
            f"{path} expected to contain exactly one yaml document, found {count}",
            {"documents": count},
        )


class UnexpectedShapeError(PathError):
    """Raised when a document does not have the structure the caller needs."""
    code = "UNEXPECTED_SHAPE"


class ResourcesNotFoundError(PathError):
    """Raised when neither on-disk layout exists for a resource type."""
    code = "NOT_FOUND"

    def __init__(self, path: Union[str, Path]):
        super().__init__(path, f"Cannot find suitable manifests in {path}")


class UnknownResourceTypeError(KubeGatherError):
    """Raised when a registry has no descriptor for the requested name."""
    code = "UNKNOWN_TYPE"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown resource type '{name}'", {"name": name})


class ScopeMismatchError(KubeGatherError):
    """Raised when a namespace is given for a cluster kind, or omitted for a namespaced one."""
    code = "SCOPE_MISMATCH"
