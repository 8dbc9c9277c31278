"""Motion REST connector."""

from .provider import MotionRESTConnector

__all__ = ["MotionRESTConnector"]
