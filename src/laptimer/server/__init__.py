"""HTTP and WebSocket front end for the timing engine."""

from laptimer.server.app import create_app, main
from laptimer.server.service import TimingService

__all__ = ["TimingService", "create_app", "main"]
