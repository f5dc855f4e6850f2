"""Filesystem adapters for background replacement."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from background_replacement.domain.model import CandidateImage, SourceImage, TargetRoot
from common.fs import list_immediate_files, list_immediate_subdirs, overwrite_file
from exceptions.exceptions import DiscoveryFailed


@dataclass(frozen=True)
class FilesystemCandidateSource:
    """Filesystem adapter: list files inside each immediate subfolder of the root.

    Files placed directly in the root are ignored. Names are sorted so the
    order does not depend on the platform's directory listing.
    """

    def list_files(self, *, root: TargetRoot) -> List[Path]:
        try:
            subdirs = list_immediate_subdirs(root.path)
        except OSError as exc:
            raise DiscoveryFailed(root.path, exc) from exc

        files: List[Path] = []
        for subdir in subdirs:
            try:
                files.extend(list_immediate_files(subdir))
            except OSError as exc:
                raise DiscoveryFailed(subdir, exc) from exc
        return files


@dataclass(frozen=True)
class FilesystemImageWriter:
    """Filesystem adapter: copy the source bytes over the candidate's path."""

    preserve_metadata: bool = False

    def overwrite(self, *, source: SourceImage, target: CandidateImage) -> None:
        overwrite_file(source.path, target.path, preserve_metadata=self.preserve_metadata)
