from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Tuple


@dataclass(frozen=True)
class SourceImage:
    """Value object referencing the image that will be copied everywhere."""

    path: Path

    @property
    def extension(self) -> str:
        return self.path.suffix.lower()


@dataclass(frozen=True)
class TargetRoot:
    """Value object referencing the folder whose subfolders hold the targets."""

    path: Path


@dataclass(frozen=True)
class CandidateImage:
    """Value object referencing an image file that will be overwritten."""

    image_exts: ClassVar[Tuple[str, ...]] = (".jpg", ".jpeg", ".png")

    path: Path

    @property
    def extension(self) -> str:
        return self.path.suffix.lower()

    @property
    def folder(self) -> Path:
        return self.path.parent
