"""
Screenshot tool (grimshot).
"""

from capmenu.core.errors import CaptureError
from capmenu.runner.base import Runner


class Screenshotter:
    """Single-shot capture to clipboard and file."""

    binary = "grimshot"

    def __init__(self, runner: Runner):
        self.runner = runner

    def capture(self, target: str, file: str) -> str:
        """
        Capture `target` (active, screen, output, area) into `file`.

        Returns:
            The saved file path
        """
        output, code = self.runner.run(
            [self.binary, "--notify", "copysave", target, file]
        )
        if code != 0:
            raise CaptureError(f"Screenshot failed: {output.strip() or f'exit {code}'}")
        return file
