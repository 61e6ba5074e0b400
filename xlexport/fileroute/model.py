from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, Optional

from xlexport.output.model import OutputMode
from xlexport.source.api import Source


@dataclass(frozen=True)
class FileRoute:
    file_name: str
    backup_path: Optional[str] = None
    source: Optional[Source] = None
    output: OutputMode = OutputMode.BOTH
    stream: Optional[BinaryIO] = field(default=None, compare=False, repr=False)
