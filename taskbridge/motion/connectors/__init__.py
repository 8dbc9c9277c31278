"""Upstream connectors."""

from .motion import MotionConfig, MotionRESTConnector

__all__ = ["MotionConfig", "MotionRESTConnector"]
