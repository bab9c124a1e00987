"""
Desktop notifications (notify-send).
"""

from capmenu.core.errors import CaptureError
from capmenu.logging import get_logger
from capmenu.runner.base import Runner

logger = get_logger(__name__)


class Notifier:
    binary = "notify-send"

    def __init__(self, runner: Runner, app_name: str = "capmenu"):
        self.runner = runner
        self.app_name = app_name

    def send(self, summary: str, body: str = "") -> None:
        """Show a notification. Failures are logged, never raised."""
        args = [self.binary, "-a", self.app_name, summary]
        if body:
            args.append(body)

        try:
            output, code = self.runner.run(args)
        except CaptureError:
            logger.warning(f"{self.binary} not found, notification skipped: {summary}")
            return

        if code != 0:
            logger.warning(f"Notification failed: {output.strip() or f'exit {code}'}")
