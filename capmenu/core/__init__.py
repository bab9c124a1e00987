from capmenu.core.errors import (
    CaptureError,
    GeometryError,
    RecordingActiveError,
    SelectionCancelled,
    TranscodeError,
    UploadError,
)
from capmenu.core.geometry import Geometry, Orientation, parse_geometry, scale_filter
from capmenu.core.mode import Mode

__all__ = [
    "CaptureError",
    "GeometryError",
    "RecordingActiveError",
    "SelectionCancelled",
    "TranscodeError",
    "UploadError",
    "Geometry",
    "Orientation",
    "parse_geometry",
    "scale_filter",
    "Mode",
]
