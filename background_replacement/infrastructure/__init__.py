"""Infrastructure layer: concrete IO implementations for background replacement."""

from .filesystem import FilesystemCandidateSource, FilesystemImageWriter

__all__ = ["FilesystemCandidateSource", "FilesystemImageWriter"]
