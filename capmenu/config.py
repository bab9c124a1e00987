"""
Configuration for capmenu.

Defaults live on the Config dataclass. An optional override file at
$XDG_CONFIG_HOME/capmenu/config (or ~/.config/capmenu/config) is applied
on top, one `key=value` per line:

    # ~/.config/capmenu/config
    video_dir=~/Videos
    gif_scale=480
    record_audio=yes
    menu_cmd="rofi -dmenu -p {prompt}"
"""

import os
import shlex
import tempfile
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, Optional

from capmenu.logging import get_logger

logger = get_logger(__name__)

APP_NAME = "capmenu"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def config_home() -> Path:
    """Root of user configuration, honoring XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def default_config_path() -> Path:
    return config_home() / APP_NAME / "config"


def _default_session_file() -> str:
    runtime = os.environ.get("XDG_RUNTIME_DIR") or tempfile.gettempdir()
    return str(Path(runtime) / f"{APP_NAME}.session")


@dataclass
class Config:
    """Runtime options. Every field has a usable default."""
    session_file: str = field(default_factory=_default_session_file)
    image_dir: str = field(default_factory=lambda: str(Path.home() / "Pictures" / "Screenshots"))
    video_dir: str = field(default_factory=lambda: str(Path.home() / "Videos" / "Screencasts"))
    tmp_dir: str = field(default_factory=tempfile.gettempdir)
    gif_scale: int = 720
    gif_fps: int = 15
    record_audio: bool = False
    no_upload: bool = False
    upload_url: str = ""
    menu_cmd: str = "wofi --dmenu --prompt {prompt}"
    settle_seconds: float = 1.0
    log_level: str = "INFO"

    @property
    def upload_enabled(self) -> bool:
        return bool(self.upload_url) and not self.no_upload

    def apply(self, overrides: Dict[str, str]) -> None:
        """
        Apply string overrides on top of the current values.

        Unknown keys and values that do not convert are logged and skipped.
        """
        known = {f.name: f for f in fields(self)}

        for key, raw in overrides.items():
            f = known.get(key)
            if f is None:
                logger.warning(f"Unknown config key ignored: {key}")
                continue

            try:
                value = _convert(raw, f.type)
            except ValueError:
                logger.warning(f"Invalid value for {key}: {raw!r}")
                continue

            if key.endswith("_dir") or key == "session_file":
                value = os.path.expanduser(os.path.expandvars(value))

            setattr(self, key, value)


def _convert(raw: str, kind):
    """Convert a raw string to the field's declared type."""
    if kind in (bool, "bool"):
        lowered = raw.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
        raise ValueError(raw)
    if kind in (int, "int"):
        return int(raw)
    if kind in (float, "float"):
        return float(raw)
    return raw


def parse_config_text(text: str) -> Dict[str, str]:
    """
    Parse `key=value` lines.

    Blank lines and `#` comments are skipped, an `export ` prefix is
    allowed, values are unquoted the way a shell would.
    """
    values: Dict[str, str] = {}

    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()

        key, sep, raw = line.partition("=")
        if not sep:
            logger.warning(f"Config line {lineno} ignored: {line}")
            continue

        try:
            parts = shlex.split(raw, comments=True)
        except ValueError:
            logger.warning(f"Config line {lineno} has unbalanced quotes: {line}")
            continue

        # Multi-word values stay shell-quoted so they can be split again
        if len(parts) == 1:
            values[key.strip().lower()] = parts[0]
        else:
            values[key.strip().lower()] = shlex.join(parts)

    return values


def load_config(path: Optional[str] = None) -> Config:
    """
    Build a Config from defaults plus the override file.

    Args:
        path: Override file (default: $XDG_CONFIG_HOME/capmenu/config)

    Returns:
        Config with overrides applied
    """
    config = Config()
    config_path = Path(path) if path else default_config_path()

    if not config_path.is_file():
        logger.warning(f"Config not found at {config_path}, using defaults")
        return config

    config.apply(parse_config_text(config_path.read_text()))
    logger.debug(f"Loaded config from {config_path}")
    return config
