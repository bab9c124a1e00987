"""
Wrappers around the external capture collaborators.

Each wrapper owns one tool's command line and turns its exit status
into a return value or a CaptureError.
"""

from capmenu.tools.notifier import Notifier
from capmenu.tools.picker import Picker
from capmenu.tools.recorder import Recorder
from capmenu.tools.screenshot import Screenshotter
from capmenu.tools.selector import Selector
from capmenu.tools.transcoder import Transcoder
from capmenu.tools.uploader import Uploader

__all__ = [
    "Notifier",
    "Picker",
    "Recorder",
    "Screenshotter",
    "Selector",
    "Transcoder",
    "Uploader",
]
