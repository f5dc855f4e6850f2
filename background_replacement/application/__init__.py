"""Application layer: use cases for the background_replacement bounded context."""

from .use_case import ReplaceBackgroundsUseCase

__all__ = ["ReplaceBackgroundsUseCase"]
