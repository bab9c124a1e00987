"""
Region selector (slurp).
"""

from capmenu.core.errors import SelectionCancelled
from capmenu.runner.base import Runner

# WxH+X+Y, parsed by capmenu.core.geometry
GIF_FORMAT = "%wx%h+%x+%y"


class Selector:
    """Ask the user to drag out a screen region."""

    binary = "slurp"

    def __init__(self, runner: Runner):
        self.runner = runner

    def select(self, gif: bool = False) -> str:
        """
        Run the selector and return its region string.

        Args:
            gif: Ask for `WxH+X+Y` instead of the default `X,Y WxH`

        Raises:
            SelectionCancelled: If the user pressed escape
        """
        args = [self.binary]
        if gif:
            args += ["-f", GIF_FORMAT]

        output, code = self.runner.run(args)
        region = output.strip()
        if code != 0 or not region:
            raise SelectionCancelled("Region selection cancelled")
        return region
