"""
Session store backed by a one-line text file.

The file exists if and only if a recording is active. Its line holds
whitespace-separated, shell-quoted fields:

    <pid> vid <file>
    <pid> gif <temp_file> <file> <wide|tall>
"""

import shlex
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from capmenu.core.geometry import Orientation
from capmenu.logging import get_logger

logger = get_logger(__name__)


class Kind(Enum):
    """What the running recorder is capturing."""
    VIDEO = "vid"
    GIF = "gif"


@dataclass
class RecordingSession:
    """The in-flight recording."""
    pid: int
    kind: Kind
    file: str
    temp_file: Optional[str] = None
    orientation: Optional[Orientation] = None

    def to_line(self) -> str:
        if self.kind == Kind.GIF:
            fields = [
                str(self.pid),
                self.kind.value,
                self.temp_file or "",
                self.file,
                (self.orientation or Orientation.WIDE).value,
            ]
        else:
            fields = [str(self.pid), self.kind.value, self.file]
        return shlex.join(fields)

    @classmethod
    def from_line(cls, line: str) -> "RecordingSession":
        """
        Parse a record line.

        Raises:
            ValueError: If the line is not a valid record
        """
        fields = shlex.split(line)
        if len(fields) < 3:
            raise ValueError(f"Truncated session record: {line!r}")

        pid = int(fields[0])
        kind = Kind(fields[1])

        if kind == Kind.VIDEO:
            return cls(pid=pid, kind=kind, file=fields[2])

        if len(fields) != 5:
            raise ValueError(f"Malformed gif session record: {line!r}")
        return cls(
            pid=pid,
            kind=kind,
            temp_file=fields[2],
            file=fields[3],
            orientation=Orientation(fields[4]),
        )


class SessionStore:
    """
    File-based store for the single RecordingSession.

    Example:
        store = SessionStore("/run/user/1000/capmenu.session")
        store.save(session)
        session = store.load()
        store.delete()
    """

    def __init__(self, path: str):
        self.path = Path(path)

    def exists(self) -> bool:
        """Check if a session record is present."""
        return self.path.is_file()

    def save(self, session: RecordingSession) -> None:
        """Write the record, replacing any previous one."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(session.to_line() + "\n")

    def load(self) -> Optional[RecordingSession]:
        """
        Read the record.

        Returns:
            RecordingSession, or None when no record exists or it is unreadable
        """
        try:
            text = self.path.read_text().strip()
        except FileNotFoundError:
            return None

        try:
            return RecordingSession.from_line(text)
        except ValueError as e:
            logger.warning(f"Ignoring corrupt session record {self.path}: {e}")
            return None

    def delete(self) -> None:
        """Remove the record. Missing records are fine."""
        self.path.unlink(missing_ok=True)
