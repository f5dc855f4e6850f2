"""Application layer: replace every candidate image below a root with one source image."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple, Union

from background_replacement.domain.model import CandidateImage, SourceImage, TargetRoot
from background_replacement.domain.services import CandidateFilter, ProgressTracker
from background_replacement.ports import CandidateSource, ImageWriter, ProgressCallback
from exceptions.exceptions import CopyFailed, DiscoveryFailed, PreconditionFailed, ReplacementError
from validation.validate_input import validate_replace_inputs
from validation.validation_helpers import has_issues, log_issues

PathLike = Union[str, Path]


@dataclass(frozen=True)
class ReplaceBackgroundsUseCase:
    """Use case: overwrite candidate images with a single source image.

    Orchestrates:
    - Precondition checks (validation helpers)
    - Candidate discovery (via CandidateSource port, filtered by CandidateFilter)
    - Sequential overwrites (via ImageWriter port) with progress reporting

    The first failing copy aborts the run; files already replaced stay replaced.
    """

    candidate_source: CandidateSource
    image_writer: ImageWriter
    candidate_filter: CandidateFilter = field(default_factory=CandidateFilter)

    def run(
        self,
        *,
        source_image: PathLike,
        target_root: PathLike,
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[Path]:
        """Replace all candidates and return their paths in replacement order.

        Raises:
            PreconditionFailed: source is not a file or root is not a directory.
            DiscoveryFailed: a folder under the root could not be listed.
            CopyFailed: a candidate could not be overwritten.
        """
        source, root = self._check_preconditions(source_image, target_root)
        candidates = self._discover(root)
        tracker = ProgressTracker(total=len(candidates))
        replaced: List[Path] = []

        for candidate in candidates:
            self._overwrite(source, candidate, replaced)
            self._report(tracker, on_progress)

        logging.info("Replaced %d image(s) under %s", len(replaced), root.path)
        return replaced

    async def run_async(
        self,
        *,
        source_image: PathLike,
        target_root: PathLike,
        on_progress: Optional[ProgressCallback] = None,
    ) -> List[Path]:
        """Same as ``run`` but blocking IO happens on a worker thread.

        Copies are awaited one at a time, so ``on_progress`` is called on the
        event loop's thread in candidate order.
        """
        source, root = self._check_preconditions(source_image, target_root)
        candidates = await asyncio.to_thread(self._discover, root)
        tracker = ProgressTracker(total=len(candidates))
        replaced: List[Path] = []

        for candidate in candidates:
            await asyncio.to_thread(self._overwrite, source, candidate, replaced)
            self._report(tracker, on_progress)

        logging.info("Replaced %d image(s) under %s", len(replaced), root.path)
        return replaced

    def list_candidates(self, *, source_image: PathLike, target_root: PathLike) -> List[Path]:
        """Candidates that ``run`` would overwrite, without writing anything."""
        _, root = self._check_preconditions(source_image, target_root)
        return [c.path for c in self._discover(root)]

    def _check_preconditions(self, source_image: PathLike, target_root: PathLike) -> Tuple[SourceImage, TargetRoot]:
        issues = validate_replace_inputs(source_image, target_root, self.candidate_filter.extensions)
        if issues:
            log_issues(issues, "error")
        if has_issues(issues, "error"):
            message = "; ".join(i.message for i in issues if i.severity == "error")
            raise PreconditionFailed(message, issues=issues)
        return SourceImage(path=Path(source_image)), TargetRoot(path=Path(target_root))

    def _discover(self, root: TargetRoot) -> List[CandidateImage]:
        try:
            files = self.candidate_source.list_files(root=root)
        except ReplacementError:
            raise
        except OSError as exc:
            raise DiscoveryFailed(root.path, exc) from exc

        candidates = self.candidate_filter.select(files)
        logging.info("Found %d candidate image(s) in %d file(s) under %s",
                     len(candidates), len(files), root.path)
        return candidates

    def _overwrite(self, source: SourceImage, candidate: CandidateImage, replaced: List[Path]) -> None:
        try:
            self.image_writer.overwrite(source=source, target=candidate)
        except Exception as exc:
            logging.error("Failed to replace %s: %s", candidate.path, exc)
            raise CopyFailed(candidate.path, exc, replaced=replaced) from exc
        replaced.append(candidate.path)

    @staticmethod
    def _report(tracker: ProgressTracker, on_progress: Optional[ProgressCallback]) -> None:
        percent = tracker.advance()
        if on_progress is not None:
            on_progress(percent)
