from __future__ import annotations


class PathDataError(ValueError):
    """Raised when path input cannot be turned into structurally valid points."""
