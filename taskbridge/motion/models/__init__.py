"""Data models."""

from .status import NormalizedStatus

__all__ = ["NormalizedStatus"]
