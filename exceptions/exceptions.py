from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence


class ReplacementError(Exception):
    def __init__(self, code: str, message: str, context: str = ""):
        super().__init__(message)
        self.code = code
        self.context = context


class PreconditionFailed(ReplacementError):
    """Source image or target root is unusable; nothing has been written."""

    def __init__(self, message: str, issues: Optional[Sequence] = None, context: str = ""):
        super().__init__("PRECONDITION_FAILED", message, context)
        self.issues = list(issues or [])


class DiscoveryFailed(ReplacementError):
    """Listing the target root or one of its subdirectories failed."""

    def __init__(self, path: Path, cause: BaseException):
        super().__init__("DISCOVERY_FAILED", f"Issue listing {path}: {cause}", str(path))
        self.path = path


class CopyFailed(ReplacementError):
    """A candidate could not be overwritten; earlier replacements are kept."""

    def __init__(self, path: Path, cause: BaseException, replaced: Optional[List[Path]] = None):
        super().__init__("COPY_FAILED", f"Issue copying to {path}: {cause}", str(path))
        self.path = path
        self.replaced = list(replaced or [])
