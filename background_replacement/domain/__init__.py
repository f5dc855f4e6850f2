"""Domain layer: value objects and domain services for background replacement."""

from .model import SourceImage, TargetRoot, CandidateImage
from .services import is_supported_image, progress_percent, CandidateFilter, ProgressTracker

__all__ = [
    "SourceImage",
    "TargetRoot",
    "CandidateImage",
    "is_supported_image",
    "progress_percent",
    "CandidateFilter",
    "ProgressTracker",
]
