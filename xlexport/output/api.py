from __future__ import annotations

from typing import BinaryIO, Optional

from .model import OutputMode
from .output import Output


def save_output(
    data: bytes,
    mode: OutputMode,
    file_name: str,
    backup_path: Optional[str] = None,
    stream: Optional[BinaryIO] = None,
) -> bytes:
    """Public API (Output)

    Contract:
    - DOWNLOAD: write data to stream (if any). BACKUP: write <backup_path>/<file_name>
      (if backup_path). BOTH: both.
    - OSError in either side effect is logged and swallowed.
    - Always returns data unchanged.
    """
    return Output().save(data, mode, file_name, backup_path, stream)
