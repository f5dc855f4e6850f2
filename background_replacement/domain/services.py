from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Union

from .model import CandidateImage

PathLike = Union[str, Path]


def is_supported_image(path: PathLike, extensions: Iterable[str] = CandidateImage.image_exts) -> bool:
    """Return True iff the lower-cased extension of ``path`` is supported.

    Only the path string is inspected; the file is never touched.
    """
    suffix = Path(path).suffix.lower()
    return bool(suffix) and suffix in {e.lower() for e in extensions}


def progress_percent(replaced: int, total: int) -> int:
    """floor(replaced / total * 100), computed in integers."""
    if total <= 0:
        raise ValueError("total must be positive")
    return (replaced * 100) // total


@dataclass
class CandidateFilter:
    """Domain service: keep only files the replacer is allowed to overwrite."""

    extensions: Iterable[str] = CandidateImage.image_exts

    def select(self, paths: Iterable[Path]) -> List[CandidateImage]:
        return [CandidateImage(path=Path(p)) for p in paths if is_supported_image(p, self.extensions)]


@dataclass
class ProgressTracker:
    """Counts successful replacements and turns them into percentages."""

    total: int
    replaced: int = field(default=0)

    def advance(self) -> int:
        self.replaced += 1
        return progress_percent(self.replaced, self.total)
