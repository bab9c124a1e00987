"""
GIF transcoding (ffmpeg).

Two passes over the intermediate recording: palettegen builds a
256-colour palette, paletteuse encodes against it.
"""

from pathlib import Path
from typing import List

from capmenu.core.errors import TranscodeError
from capmenu.core.geometry import Orientation, scale_filter
from capmenu.logging import get_logger
from capmenu.runner.base import Runner

logger = get_logger(__name__)


class Transcoder:
    binary = "ffmpeg"

    def __init__(self, runner: Runner, scale: int = 720, fps: int = 15):
        self.runner = runner
        self.scale = scale
        self.fps = fps

    @staticmethod
    def palette_path(src: str) -> str:
        """Palette lives next to the intermediate recording."""
        p = Path(src)
        return str(p.with_name(f"{p.stem}-palette.png"))

    def filters(self, orientation: Orientation) -> str:
        return f"fps={self.fps},{scale_filter(orientation, self.scale)}:flags=lanczos"

    def palette_command(self, src: str, palette: str, orientation: Orientation) -> List[str]:
        return [
            self.binary, "-y", "-loglevel", "error",
            "-i", src,
            "-vf", f"{self.filters(orientation)},palettegen",
            palette,
        ]

    def encode_command(self, src: str, palette: str, dst: str,
                       orientation: Orientation) -> List[str]:
        return [
            self.binary, "-y", "-loglevel", "error",
            "-i", src,
            "-i", palette,
            "-filter_complex", f"{self.filters(orientation)}[x];[x][1:v]paletteuse",
            dst,
        ]

    def to_gif(self, src: str, dst: str, orientation: Orientation) -> str:
        """
        Convert an intermediate recording to a GIF.

        Args:
            src: Intermediate video
            dst: GIF to write
            orientation: Picks the pinned scale axis

        Returns:
            dst

        Raises:
            TranscodeError: If either pass fails. src and palette are kept.
        """
        palette = self.palette_path(src)

        logger.info(f"Generating palette from {src}")
        output, code = self.runner.run(self.palette_command(src, palette, orientation))
        if code != 0:
            raise TranscodeError(f"Palette generation failed (exit {code}): {output.strip()}")

        logger.info(f"Encoding {dst}")
        output, code = self.runner.run(self.encode_command(src, palette, dst, orientation))
        if code != 0:
            raise TranscodeError(f"GIF encoding failed (exit {code}): {output.strip()}")

        return dst
