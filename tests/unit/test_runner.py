"""
Unit tests for LocalRunner.

These start real (short-lived) processes, so they run on POSIX only.
"""

import os
import signal
import sys
import time

import pytest

from capmenu.core.errors import CaptureError
from capmenu.runner.local import LocalRunner

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX process semantics")

# Restores default SIGINT handling (a background shell may have ignored it),
# then signals readiness by creating the file named in argv[1].
INTERRUPTIBLE_CHILD = (
    "import signal, sys, time\n"
    "signal.signal(signal.SIGINT, signal.SIG_DFL)\n"
    "open(sys.argv[1], 'w').close()\n"
    "time.sleep(30)\n"
)


def reap(pid: int, timeout: float = 5.0) -> bool:
    """Wait for a spawned child to exit and collect it. True once it is gone."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            done, _ = os.waitpid(pid, os.WNOHANG)
        except ChildProcessError:
            # Already collected by subprocess' own cleanup
            return True
        if done == pid:
            return True
        time.sleep(0.05)
    return False


def wait_for_file(path, timeout: float = 5.0) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if path.exists():
            return True
        time.sleep(0.05)
    return False


class TestRun:
    """Unit tests for awaited commands."""

    def test_stdout_and_exit_code(self):
        output, code = LocalRunner().run(["sh", "-c", "echo hi; exit 3"])

        assert output == "hi\n"
        assert code == 3

    def test_input_on_stdin(self):
        output, code = LocalRunner().run(["cat"], input="Video\n")

        assert output == "Video\n"
        assert code == 0

    def test_missing_binary(self):
        with pytest.raises(CaptureError):
            LocalRunner().run(["capmenu-no-such-binary"])

    def test_which(self):
        runner = LocalRunner()

        assert runner.which("sh")
        assert runner.which("capmenu-no-such-binary") is None


class TestSpawnAndSignal:
    """Unit tests for the detached recorder lifecycle."""

    def test_spawn_is_alive_and_detached(self):
        runner = LocalRunner()
        pid = runner.spawn(["sleep", "30"])

        try:
            assert runner.is_alive(pid)
            assert os.getsid(pid) == pid
        finally:
            os.kill(pid, signal.SIGKILL)
            reap(pid)

        assert not runner.is_alive(pid)

    def test_sigint_ends_process(self, tmp_path):
        runner = LocalRunner()
        ready = tmp_path / "ready"
        pid = runner.spawn([sys.executable, "-c", INTERRUPTIBLE_CHILD, str(ready)])

        try:
            assert wait_for_file(ready)
            runner.send_signal(pid, signal.SIGINT)
            # An exited but unreaped child still answers kill(pid, 0)
            assert reap(pid)
        finally:
            if runner.is_alive(pid):
                os.kill(pid, signal.SIGKILL)
                reap(pid)

        assert not runner.is_alive(pid)

    def test_signal_dead_process(self):
        runner = LocalRunner()
        pid = runner.spawn(["true"])
        assert reap(pid)

        with pytest.raises(ProcessLookupError):
            runner.send_signal(pid, signal.SIGINT)

    def test_spawn_missing_binary(self):
        with pytest.raises(CaptureError):
            LocalRunner().spawn(["capmenu-no-such-binary"])


class TestIsAlive:
    """Unit tests for is_alive error mapping."""

    def test_permission_error_means_alive(self, monkeypatch):
        def deny(pid, sig):
            raise PermissionError(pid)

        monkeypatch.setattr("capmenu.runner.local.os.kill", deny)
        assert LocalRunner().is_alive(1) is True

    def test_lookup_error_means_dead(self, monkeypatch):
        def gone(pid, sig):
            raise ProcessLookupError(pid)

        monkeypatch.setattr("capmenu.runner.local.os.kill", gone)
        assert LocalRunner().is_alive(424242) is False


class TestFindProcess:
    """Unit tests for the pgrep fallback."""

    def test_pgrep_command(self, monkeypatch):
        runner = LocalRunner()
        seen = []

        def fake_run(args, input=None):
            seen.append(args)
            return "1234\n", 0

        monkeypatch.setattr(runner, "run", fake_run)

        assert runner.find_process("wf-recorder") == 1234
        assert seen == [["pgrep", "-n", "-x", "wf-recorder"]]

    def test_no_match(self, monkeypatch):
        runner = LocalRunner()
        monkeypatch.setattr(runner, "run", lambda args, input=None: ("", 1))

        assert runner.find_process("wf-recorder") is None

    @pytest.mark.parametrize("output", ["", "not-a-pid\n"])
    def test_unparsable_output(self, monkeypatch, output):
        runner = LocalRunner()
        monkeypatch.setattr(runner, "run", lambda args, input=None: (output, 0))

        assert runner.find_process("wf-recorder") is None

    def test_pgrep_missing(self, monkeypatch):
        runner = LocalRunner()

        def missing(args, input=None):
            raise CaptureError("Command not found: pgrep")

        monkeypatch.setattr(runner, "run", missing)

        assert runner.find_process("wf-recorder") is None
