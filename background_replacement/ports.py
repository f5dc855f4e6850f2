"""Ports (Protocol interfaces) for background replacement.

Infrastructure adapters implement these; the use case depends only on them.
"""
from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Protocol

from background_replacement.domain.model import CandidateImage, SourceImage, TargetRoot

ProgressCallback = Callable[[int], None]


class CandidateSource(Protocol):
    """Port: list files one level below the target root's subfolders."""

    def list_files(self, *, root: TargetRoot) -> List[Path]:
        """Files directly inside each immediate subfolder, in enumeration order.

        Raises DiscoveryFailed when a folder cannot be listed.
        """
        ...


class ImageWriter(Protocol):
    """Port: overwrite a candidate in place with the source image's bytes."""

    def overwrite(self, *, source: SourceImage, target: CandidateImage) -> None: ...
