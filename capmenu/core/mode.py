"""
Capture modes and the menu labels that select them.
"""

from enum import Enum
from typing import Dict, List, Optional


class Mode(Enum):
    """What a single invocation does."""
    SCREENSHOT = "screenshot"
    VIDEO = "video"
    GIF = "gif"
    STOP = "stop"
    EXIT = "exit"


# Menu labels are only ever compared here
CAPTURE_MENU: Dict[str, Mode] = {
    "Screenshot": Mode.SCREENSHOT,
    "Video": Mode.VIDEO,
    "GIF": Mode.GIF,
    "Exit": Mode.EXIT,
}

RECORDING_MENU: Dict[str, Mode] = {
    "Stop": Mode.STOP,
    "Cancel": Mode.EXIT,
}

# Screenshot target label -> screenshot tool target
SCREENSHOT_TARGETS: Dict[str, str] = {
    "Active window": "active",
    "Screen": "screen",
    "Output": "output",
    "Region": "area",
}


def menu_labels(menu: Dict[str, Mode]) -> List[str]:
    return list(menu.keys())


def mode_for_label(menu: Dict[str, Mode], label: Optional[str]) -> Mode:
    """Map a picker selection back to a Mode. Anything unknown means exit."""
    if label is None:
        return Mode.EXIT
    return menu.get(label.strip(), Mode.EXIT)
