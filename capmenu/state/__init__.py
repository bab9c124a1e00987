"""
Recording session persistence for capmenu.

Tracks the single in-flight recording in a small text file.
"""

from capmenu.state.store import Kind, RecordingSession, SessionStore

__all__ = ["Kind", "RecordingSession", "SessionStore"]
