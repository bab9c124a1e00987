__version__ = "0.1.0"

from capmenu.core import Mode, Geometry, Orientation, parse_geometry
from capmenu.config import Config, load_config
from capmenu.logging import get_logger, get_capmenu_logger, setup_logging

"""
capmenu in brief:
    Mode is what one invocation does: screenshot, video, gif, stop or exit.
    Config holds defaults plus the user's override file.
    SessionController sequences the external tools for a Mode.
    SessionStore keeps the single in-flight recording across invocations.
"""

__all__ = [
    "Mode",
    "Geometry",
    "Orientation",
    "parse_geometry",
    "Config",
    "load_config",
    "get_logger",
    "get_capmenu_logger",
    "setup_logging",
]
