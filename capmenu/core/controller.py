"""
Session controller - the only stateful part of capmenu.

State machine:
    Idle       no session record
    Recording  session record present, recorder running

start_video()/start_gif() move Idle -> Recording, stop() moves back.
The record on disk is the sole signal of which state we are in.
"""

import os
import time
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from capmenu.config import Config
from capmenu.core.errors import RecordingActiveError, UploadError
from capmenu.core.geometry import parse_geometry
from capmenu.core.mode import (
    CAPTURE_MENU,
    RECORDING_MENU,
    SCREENSHOT_TARGETS,
    Mode,
    menu_labels,
    mode_for_label,
)
from capmenu.logging import get_capmenu_logger
from capmenu.runner.base import Runner
from capmenu.state.store import Kind, RecordingSession, SessionStore
from capmenu.tools import (
    Notifier,
    Picker,
    Recorder,
    Screenshotter,
    Selector,
    Transcoder,
    Uploader,
)

logger = get_capmenu_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d-%H%M%S"


class SessionController:
    """
    Sequences the capture collaborators for one invocation.

    Example:
        controller = SessionController(load_config(), LocalRunner())
        mode = controller.resolve_mode(None)
        controller.run(mode)
    """

    def __init__(
        self,
        config: Config,
        runner: Runner,
        store: Optional[SessionStore] = None,
        clock: Callable[[], datetime] = datetime.now,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self.runner = runner
        self.store = store or SessionStore(config.session_file)
        self.clock = clock
        self.sleep = sleep

        self.selector = Selector(runner)
        self.screenshotter = Screenshotter(runner)
        self.recorder = Recorder(runner)
        self.transcoder = Transcoder(runner, scale=config.gif_scale, fps=config.gif_fps)
        self.notifier = Notifier(runner)
        self.picker = Picker(runner, config.menu_cmd)
        self.uploader = Uploader(config.upload_url) if config.upload_url else None

    def required_tools(self) -> List[str]:
        tools = [
            Selector.binary,
            Screenshotter.binary,
            Recorder.binary,
            Transcoder.binary,
            Notifier.binary,
        ]
        menu = self.picker.command("")
        if menu:
            tools.append(menu[0])
        return tools

    def check_dependencies(self) -> List[str]:
        """
        Report missing collaborators, once each.

        Returns:
            Names of tools not found on PATH
        """
        missing = [tool for tool in self.required_tools() if not self.runner.which(tool)]
        for tool in missing:
            logger.warning(f"Missing dependency: {tool}")
        return missing

    def is_recording(self) -> bool:
        return self.store.exists()

    def resolve_mode(self, mode: Optional[Mode]) -> Mode:
        """
        Pick what to do.

        An explicit mode wins. Otherwise show the recording-control menu
        while a session record exists, else the capture menu. A dismissed
        menu resolves to Mode.EXIT.
        """
        if mode is not None:
            return mode

        if self.is_recording():
            menu, prompt = RECORDING_MENU, "Recording"
        else:
            menu, prompt = CAPTURE_MENU, "Capture"

        choice = self.picker.choose(prompt, menu_labels(menu))
        return mode_for_label(menu, choice)

    def run(self, mode: Mode) -> Optional[str]:
        """Dispatch a resolved mode. Returns the artifact path, if any."""
        if mode == Mode.SCREENSHOT:
            return self.start_screenshot()
        if mode == Mode.VIDEO:
            self.start_video()
            return None
        if mode == Mode.GIF:
            self.start_gif()
            return None
        if mode == Mode.STOP:
            return self.stop()
        return None

    def _timestamp(self) -> str:
        return self.clock().strftime(TIMESTAMP_FORMAT)

    def start_screenshot(self) -> Optional[str]:
        """
        Take a screenshot of a menu-selected target.

        Returns:
            Saved image path, or None if the target menu was dismissed
        """
        label = self.picker.choose("Screenshot", list(SCREENSHOT_TARGETS))
        target = SCREENSHOT_TARGETS.get(label.strip()) if label else None
        if target is None:
            logger.debug("Screenshot target menu dismissed")
            return None

        Path(self.config.image_dir).mkdir(parents=True, exist_ok=True)
        file = os.path.join(self.config.image_dir, f"screenshot-{self._timestamp()}.png")

        self.screenshotter.capture(target, file)
        logger.success("Screenshot saved")
        logger.artifact(file)
        self.upload(file)
        return file

    def _ensure_idle(self) -> None:
        """
        Refuse to start over a live recording.

        A record whose recorder has died is stale and gets removed.
        """
        session = self.store.load()
        if session is None:
            # A corrupt record is as good as none
            self.store.delete()
            return

        if self.runner.is_alive(session.pid):
            raise RecordingActiveError(session.pid)

        logger.warning(f"Removing stale recording record for dead pid {session.pid}")
        self.store.delete()

    def start_video(self) -> RecordingSession:
        """
        Select a region and start recording it in the background.

        Returns:
            The persisted session
        """
        self._ensure_idle()
        geometry = self.selector.select()

        Path(self.config.video_dir).mkdir(parents=True, exist_ok=True)
        file = os.path.join(self.config.video_dir, f"screencast-{self._timestamp()}.mkv")

        pid = self.recorder.start(geometry, file, audio=self.config.record_audio)
        session = RecordingSession(pid=pid, kind=Kind.VIDEO, file=file)
        self.store.save(session)

        logger.info(f"Recording {geometry} to {file} (pid {pid})")
        return session

    def start_gif(self) -> RecordingSession:
        """
        Select a region and start recording it for later GIF conversion.

        The capture goes to an intermediate mkv; encoding happens in stop().

        Returns:
            The persisted session
        """
        self._ensure_idle()
        geometry = parse_geometry(self.selector.select(gif=True))

        stamp = self._timestamp()
        Path(self.config.tmp_dir).mkdir(parents=True, exist_ok=True)
        Path(self.config.video_dir).mkdir(parents=True, exist_ok=True)
        temp_file = os.path.join(self.config.tmp_dir, f"gif-{stamp}-tmp.mkv")
        file = os.path.join(self.config.video_dir, f"gif-{stamp}.gif")

        # gif recordings never carry audio
        pid = self.recorder.start(geometry.recorder_arg(), temp_file, audio=False, lossless=True)
        session = RecordingSession(
            pid=pid,
            kind=Kind.GIF,
            file=file,
            temp_file=temp_file,
            orientation=geometry.orientation,
        )
        self.store.save(session)

        logger.info(f"Recording GIF {geometry} to {temp_file} (pid {pid})")
        return session

    def stop(self) -> Optional[str]:
        """
        Stop the active recording and finalize it.

        Returns:
            Final artifact path, or None if nothing was being tracked

        Raises:
            TranscodeError: If GIF conversion fails. The record is still gone.
        """
        session = self.store.load()

        if session is None:
            pid = self.recorder.find()
            if pid is None:
                logger.warning("No active recording found")
                self.store.delete()
                return None
            logger.warning(f"No session record, stopping untracked {Recorder.binary} (pid {pid})")
            self._interrupt(pid)
            self.store.delete()
            self.notifier.send("Recording stopped")
            return None

        self._interrupt(session.pid)
        self.store.delete()

        if session.kind == Kind.VIDEO:
            logger.success("Recording saved")
            logger.artifact(session.file)
            self.notifier.send("Recording saved", session.file)
            self.upload(session.file)
            return session.file

        # Let the recorder finish writing the container
        self.sleep(self.config.settle_seconds)

        self.transcoder.to_gif(session.temp_file, session.file, session.orientation)

        size = Path(session.file).stat().st_size if os.path.exists(session.file) else None
        logger.success("GIF saved")
        logger.artifact(session.file, size)
        self.notifier.send("GIF saved", session.file)
        self.upload(session.file)
        return session.file

    def _interrupt(self, pid: int) -> bool:
        try:
            self.recorder.stop(pid)
        except ProcessLookupError:
            logger.warning(f"Recorder (pid {pid}) is not running")
            return False
        except PermissionError:
            logger.warning(f"Not allowed to signal recorder (pid {pid})")
            return False
        return True

    def upload(self, path: str) -> Optional[str]:
        """
        Upload an artifact unless uploads are off.

        Upload failures are logged; the artifact stays on disk either way.
        """
        if self.uploader is None or not self.config.upload_enabled:
            return None

        try:
            link = self.uploader.upload(path)
        except UploadError as e:
            logger.warning(str(e))
            self.notifier.send("Upload failed", os.path.basename(path))
            return None

        logger.success(f"Uploaded: {link}")
        self.notifier.send("Uploaded", link)
        return link
