"""Infrastructure layer: call recording."""

from filtermap.infrastructure.recording import RecordingCallable

__all__ = ["RecordingCallable"]
