from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Optional

from .model import OutputMode

logger = logging.getLogger(__name__)


class Output:
    """Routes serialized workbook bytes. Side-effect failures never propagate."""

    def save(
        self,
        data: bytes,
        mode: OutputMode,
        file_name: str,
        backup_path: Optional[str] = None,
        stream: Optional[BinaryIO] = None,
    ) -> bytes:
        if mode in (OutputMode.DOWNLOAD, OutputMode.BOTH):
            self._download(data, file_name, stream)
        if mode in (OutputMode.BACKUP, OutputMode.BOTH):
            self._backup(data, file_name, backup_path)
        return data

    def _download(self, data: bytes, file_name: str, stream: Optional[BinaryIO]) -> None:
        if stream is None:
            return
        try:
            stream.write(data)
            logger.info("sent '%s' (%d bytes) to download stream", file_name, len(data))
        except (OSError, ValueError):
            # closed stream raises ValueError
            logger.warning("download of '%s' failed", file_name, exc_info=True)

    def _backup(self, data: bytes, file_name: str, backup_path: Optional[str]) -> None:
        if not backup_path:
            return
        target = Path(backup_path) / file_name
        try:
            target.write_bytes(data)
            logger.info("backup written to %s", target)
        except (OSError, ValueError):
            # ValueError: NUL byte in the path
            logger.warning("backup to %s failed", target, exc_info=True)
