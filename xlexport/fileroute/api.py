from __future__ import annotations

from typing import BinaryIO, Optional

from xlexport.config.model import Settings
from xlexport.output.model import OutputMode
from .fileroute import BackupDirectoryNotFoundError, FileRouteFactory
from .model import FileRoute


def file_route(
    file_name: str,
    template: Optional[str] = None,
    backup: Optional[str] = None,
    output: OutputMode = OutputMode.BOTH,
    stream: Optional[BinaryIO] = None,
    settings: Optional[Settings] = None,
) -> FileRoute:
    """Public API (FileRoute)

    Contract:
    - Empty file_name -> ConfigurationError.
    - backup given but not resolvable to a directory -> BackupDirectoryNotFoundError,
      before any workbook work.
    - template given -> TemplateSource (may be invalid; exporter falls back to blank).
    - No template -> source None (blank synthesis).
    """
    return FileRouteFactory().create(file_name, template, backup, output, stream, settings)
