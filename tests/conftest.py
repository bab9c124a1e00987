"""
Shared fixtures: a fake process runner and an isolated Config.
"""

from typing import Dict, List, Optional, Set, Tuple

import pytest

from capmenu.config import Config
from capmenu.runner.base import Runner


class FakeRunner(Runner):
    """
    In-memory Runner.

    Canned responses are queued per binary; the last one repeats.
    Spawned pids are "alive" until signalled.
    """

    def __init__(self):
        self.calls: List[Tuple[List[str], Optional[str]]] = []
        self.responses: Dict[str, List[Tuple[str, int]]] = {}
        self.spawned: List[List[str]] = []
        self.signals: List[Tuple[int, int]] = []
        self.alive: Set[int] = set()
        self.running: Dict[str, int] = {}
        self.missing: Set[str] = set()
        self.next_pid = 4242

    def respond(self, binary: str, output: str = "", code: int = 0) -> None:
        self.responses.setdefault(binary, []).append((output, code))

    def commands(self, binary: str) -> List[List[str]]:
        return [args for args, _ in self.calls if args[0] == binary]

    def run(self, args, input=None):
        self.calls.append((list(args), input))
        queue = self.responses.get(args[0])
        if not queue:
            return "", 0
        if len(queue) > 1:
            return queue.pop(0)
        return queue[0]

    def spawn(self, args):
        pid = self.next_pid
        self.next_pid += 1
        self.spawned.append(list(args))
        self.alive.add(pid)
        return pid

    def send_signal(self, pid, sig):
        if pid not in self.alive:
            raise ProcessLookupError(pid)
        self.signals.append((pid, sig))
        self.alive.discard(pid)

    def is_alive(self, pid):
        return pid in self.alive

    def find_process(self, name):
        return self.running.get(name)

    def which(self, name):
        if name in self.missing:
            return None
        return f"/usr/bin/{name}"


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def config(tmp_path):
    return Config(
        session_file=str(tmp_path / "run" / "capmenu.session"),
        image_dir=str(tmp_path / "pictures"),
        video_dir=str(tmp_path / "videos"),
        tmp_dir=str(tmp_path / "tmp"),
        settle_seconds=0.5,
    )
