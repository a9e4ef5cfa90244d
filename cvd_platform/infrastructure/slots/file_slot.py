"""
Local file durable slot.

One file per key inside a directory. The file modification time is the last
write; entries older than the retention window are treated as absent and
removed on read.
"""

from __future__ import annotations

import os
import re
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional

import structlog

from cvd_platform.domain.entities.errors import HistoryReadError, HistoryWriteError
from cvd_platform.infrastructure.slots.base import BoundedSlot, Clock

logger = structlog.get_logger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileKeyValueSlot(BoundedSlot):
    """Durable slot backed by files in a local directory."""

    def __init__(
        self,
        directory: str,
        retention: timedelta,
        max_bytes: int,
        clock: Optional[Clock] = None,
    ):
        super().__init__(retention, max_bytes, clock)
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise ValueError(f"Invalid slot key: {key!r}")
        return self.directory / f"{key}.json"

    async def load(self, key: str) -> Optional[bytes]:
        path = self._path(key)
        try:
            written_at = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
            if self._is_expired(written_at):
                logger.info("slot.file.expired", path=str(path))
                path.unlink(missing_ok=True)
                return None
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise HistoryReadError(
                f"Unable to read slot file {path}: {exc}", {"path": str(path)}
            ) from exc

    async def save(self, key: str, data: bytes) -> None:
        self._check_capacity(data)
        path = self._path(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.directory, suffix=".tmp")
            try:
                with os.fdopen(fd, "wb") as handle:
                    handle.write(data)
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
            # Retention is measured on the injected clock, not the filesystem's.
            timestamp = self._now().timestamp()
            os.utime(path, (timestamp, timestamp))
        except OSError as exc:
            raise HistoryWriteError(
                f"Unable to write slot file {path}: {exc}", {"path": str(path)}
            ) from exc

    async def clear(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    async def ping(self) -> None:
        # The directory is created on first save; check its nearest ancestor.
        target = self.directory
        while not target.exists() and target != target.parent:
            target = target.parent
        if not target.is_dir() or not os.access(target, os.R_OK | os.W_OK):
            raise HistoryReadError(
                f"Slot directory {self.directory} is not accessible",
                {"path": str(target)},
            )
