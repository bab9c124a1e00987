"""
Exceptions raised while driving capture collaborators.
"""


class CaptureError(RuntimeError):
    """A collaborator exited non-zero or produced unusable output."""


class SelectionCancelled(CaptureError):
    """The user dismissed the region selector or a menu."""


class GeometryError(CaptureError, ValueError):
    """A region string could not be parsed."""


class TranscodeError(CaptureError):
    """A GIF conversion pass failed. Intermediate files are left on disk."""


class UploadError(CaptureError):
    """The artifact could not be uploaded."""


class RecordingActiveError(RuntimeError):
    """A recording is already running."""

    def __init__(self, pid: int):
        super().__init__(f"A recording is already active (pid {pid}). Stop it first with --stop.")
        self.pid = pid
