"""
Background video recorder (wf-recorder).

Started detached so it outlives the invocation that launched it, and
stopped later from another invocation with SIGINT, which makes it
finalize the container.
"""

import signal
from typing import Optional

from capmenu.runner.base import Runner


class Recorder:
    """Detached screen recorder."""

    binary = "wf-recorder"

    def __init__(self, runner: Runner):
        self.runner = runner

    def command(self, geometry: str, file: str, audio: bool = False,
                lossless: bool = False) -> list:
        args = [self.binary]
        if audio:
            args.append("-a")
        if lossless:
            args += ["-c", "libx264rgb", "-p", "crf=0"]
        args += ["-g", geometry, "-f", file]
        return args

    def start(self, geometry: str, file: str, audio: bool = False,
              lossless: bool = False) -> int:
        """
        Launch the recorder and return immediately.

        Args:
            geometry: Region as `X,Y WxH`
            file: Output container
            audio: Also record the default audio source
            lossless: Encode with lossless RGB h264, for later GIF conversion

        Returns:
            Recorder pid
        """
        return self.runner.spawn(self.command(geometry, file, audio, lossless))

    def stop(self, pid: int) -> None:
        """
        Interrupt the recorder.

        Raises:
            ProcessLookupError: If it already exited
        """
        self.runner.send_signal(pid, signal.SIGINT)

    def find(self) -> Optional[int]:
        """Locate a running recorder nobody is tracking."""
        return self.runner.find_process(self.binary)
