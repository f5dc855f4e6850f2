from pathlib import Path
from typing import Iterable, List, Optional, Union
from background_replacement.domain.services import is_supported_image
from common.config import DEFAULT_IMAGE_EXTS
from validation.validation_helpers import ValidationIssue

PathLike = Union[str, Path, None]


def _as_path(value: PathLike) -> Optional[Path]:
    if value is None or str(value) == "":
        return None
    return Path(value)


def validate_source_image(source_image: PathLike, exts: Iterable[str] = DEFAULT_IMAGE_EXTS) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    path = _as_path(source_image)
    if path is None or not path.is_file():
        issues.append(ValidationIssue(str(source_image or ""), "MISSING_SOURCE_IMAGE", "error",
                                      f"Source image does not exist: {source_image or '<none>'}"))
    elif not is_supported_image(path, exts):
        issues.append(ValidationIssue(str(path), "UNSUPPORTED_SOURCE_EXTENSION", "warning",
                                      f"Source image has an unsupported extension: {path.suffix or '<none>'}"))
    return issues

def validate_target_root(target_root: PathLike) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    path = _as_path(target_root)
    if path is None or not path.is_dir():
        issues.append(ValidationIssue(str(target_root or ""), "MISSING_TARGET_ROOT", "error",
                                      f"Target folder does not exist: {target_root or '<none>'}"))
    return issues

def validate_replace_inputs(source_image: PathLike, target_root: PathLike,
                            exts: Iterable[str] = DEFAULT_IMAGE_EXTS) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    issues.extend(validate_source_image(source_image, exts))
    issues.extend(validate_target_root(target_root))
    return issues
