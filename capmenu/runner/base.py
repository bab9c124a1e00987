"""
Base runner interface.

Collaborator wrappers only talk to processes through this interface, so
tests can substitute a fake.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple


class Runner(ABC):
    """
    Abstract base class for running and signalling processes.

    Implementations:
    - LocalRunner: subprocesses on this machine
    """

    @abstractmethod
    def run(self, args: List[str], input: Optional[str] = None) -> Tuple[str, int]:
        """
        Run a command to completion.

        Args:
            args: Command and arguments as list
            input: Text fed to stdin

        Returns:
            Tuple of (stdout, exit_code)

        Raises:
            CaptureError: If the executable does not exist

        Example:
            output, code = runner.run(["slurp"])
        """
        pass

    @abstractmethod
    def spawn(self, args: List[str]) -> int:
        """
        Start a command detached from this process and return its pid.

        The child keeps running after the caller exits.
        """
        pass

    @abstractmethod
    def send_signal(self, pid: int, sig: int) -> None:
        """
        Send a signal to a process.

        Raises:
            ProcessLookupError: If no such process exists
            PermissionError: If the process belongs to someone else
        """
        pass

    @abstractmethod
    def is_alive(self, pid: int) -> bool:
        """Check if a process is still running."""
        pass

    @abstractmethod
    def find_process(self, name: str) -> Optional[int]:
        """Return the pid of a running process with this name, if any."""
        pass

    @abstractmethod
    def which(self, name: str) -> Optional[str]:
        """Locate an executable on PATH."""
        pass
