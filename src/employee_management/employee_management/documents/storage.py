from __future__ import annotations

import logging
from pathlib import Path

from werkzeug.utils import secure_filename

from ..core.exceptions import IOFailure, ValidationError

logger = logging.getLogger(__name__)


class LocalFileStorage:
    """Writes uploaded bytes under one server-local directory.

    Note: A second upload with the same name replaces the first file. There is
    no locking between concurrent writers.
    """

    def __init__(self, upload_dir: str | Path):
        self._upload_dir = Path(upload_dir)

    def path_for(self, file_name: str) -> Path:
        safe_name = secure_filename(file_name or "")
        if not safe_name:
            raise ValidationError(f"Invalid file name: {file_name!r}")
        return self._upload_dir / safe_name

    def write(self, file_name: str, data: bytes) -> Path:
        target = self.path_for(file_name)
        try:
            self._upload_dir.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as e:
            logger.error("Failed to write %s: %s", target, e)
            raise IOFailure(str(e)) from e

        logger.info("Stored %d bytes at %s", len(data), target)
        return target
