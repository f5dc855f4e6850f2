"""Entrypoint: replace_backgrounds functions for CLIs and UIs."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from background_replacement.application.use_case import ReplaceBackgroundsUseCase
from background_replacement.domain.services import CandidateFilter
from background_replacement.infrastructure.filesystem import (
    FilesystemCandidateSource,
    FilesystemImageWriter,
)
from background_replacement.ports import CandidateSource, ImageWriter, ProgressCallback
from common.config import Config

PathLike = Union[str, Path]


def build_use_case(
    *,
    config: Optional[Config] = None,
    candidate_source: Optional[CandidateSource] = None,
    image_writer: Optional[ImageWriter] = None,
) -> ReplaceBackgroundsUseCase:
    """Composition root: wire filesystem adapters into the use case.

    Args:
        config: Optional config; supplies extensions and preserve_metadata.
        candidate_source: Override for the discovery adapter.
        image_writer: Override for the writing adapter.
    """
    cfg = config or Config()
    return ReplaceBackgroundsUseCase(
        candidate_source=candidate_source or FilesystemCandidateSource(),
        image_writer=image_writer or FilesystemImageWriter(
            preserve_metadata=cfg.replace.preserve_metadata),
        candidate_filter=CandidateFilter(extensions=cfg.replace.extensions),
    )


def replace_backgrounds(
    source_image: PathLike,
    target_root: PathLike,
    on_progress: Optional[ProgressCallback] = None,
    *,
    config: Optional[Config] = None,
) -> List[Path]:
    """Overwrite every supported image in the root's immediate subfolders.

    Returns the replaced paths in order; see ReplaceBackgroundsUseCase.run
    for the errors raised.
    """
    use_case = build_use_case(config=config)
    return use_case.run(source_image=source_image, target_root=target_root, on_progress=on_progress)


async def replace_backgrounds_async(
    source_image: PathLike,
    target_root: PathLike,
    on_progress: Optional[ProgressCallback] = None,
    *,
    config: Optional[Config] = None,
) -> List[Path]:
    use_case = build_use_case(config=config)
    return await use_case.run_async(source_image=source_image, target_root=target_root, on_progress=on_progress)
