"""
Artifact upload.

POSTs the file as multipart form data to a paste-style host (0x0.st and
friends) and expects the public URL back as the response body.
"""

from pathlib import Path

import requests

from capmenu.core.errors import UploadError
from capmenu.logging import get_logger

logger = get_logger(__name__)


class Uploader:
    def __init__(self, url: str, timeout: float = 60.0, field: str = "file"):
        self.url = url
        self.timeout = timeout
        self.field = field

    def upload(self, path: str) -> str:
        """
        Upload a file.

        Returns:
            URL reported by the server

        Raises:
            UploadError: On network failure or a non-2xx response
        """
        p = Path(path)
        logger.info(f"Uploading {p.name} to {self.url}")

        try:
            with p.open("rb") as f:
                response = requests.post(
                    self.url,
                    files={self.field: (p.name, f)},
                    timeout=self.timeout,
                )
            response.raise_for_status()
        except (OSError, requests.RequestException) as e:
            raise UploadError(f"Upload failed: {e}") from e

        link = response.text.strip()
        if not link:
            raise UploadError("Upload failed: empty response")
        return link
