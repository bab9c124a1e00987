"""
Local runner - run collaborators on this machine.
"""

import os
import shutil
import subprocess
from typing import List, Optional, Tuple

from capmenu.core.errors import CaptureError
from capmenu.runner.base import Runner


class LocalRunner(Runner):
    """
    Runner backed by subprocess and os.kill.
    """

    def run(self, args: List[str], input: Optional[str] = None) -> Tuple[str, int]:
        """
        Run command and wait for it.

        stderr is not captured so interactive tools and ffmpeg errors
        stay visible on the terminal.

        Raises:
            CaptureError: If the executable does not exist
        """
        try:
            result = subprocess.run(
                args,
                input=input,
                stdout=subprocess.PIPE,
                text=True,
            )
        except FileNotFoundError as e:
            raise CaptureError(f"Command not found: {args[0]}") from e
        return result.stdout, result.returncode

    def spawn(self, args: List[str]) -> int:
        """Start command in its own session with output discarded."""
        try:
            proc = subprocess.Popen(
                args,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except FileNotFoundError as e:
            raise CaptureError(f"Command not found: {args[0]}") from e
        return proc.pid

    def send_signal(self, pid: int, sig: int) -> None:
        os.kill(pid, sig)

    def is_alive(self, pid: int) -> bool:
        try:
            os.kill(pid, 0)
        except ProcessLookupError:
            return False
        except PermissionError:
            return True
        return True

    def find_process(self, name: str) -> Optional[int]:
        """Find newest process with this exact name using pgrep."""
        try:
            output, code = self.run(["pgrep", "-n", "-x", name])
        except CaptureError:
            return None
        if code != 0:
            return None
        try:
            return int(output.split()[0])
        except (IndexError, ValueError):
            return None

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name)
