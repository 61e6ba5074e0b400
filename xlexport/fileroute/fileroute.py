from __future__ import annotations

import logging
from typing import BinaryIO, Optional

from xlexport.config.api import resolve_dir
from xlexport.config.config import ConfigurationError
from xlexport.config.model import Settings
from xlexport.output.model import OutputMode
from xlexport.source.source import TemplateSource
from .model import FileRoute

logger = logging.getLogger(__name__)


class BackupDirectoryNotFoundError(ConfigurationError):
    pass


class FileRouteFactory:
    def create(
        self,
        file_name: str,
        template: Optional[str] = None,
        backup: Optional[str] = None,
        output: OutputMode = OutputMode.BOTH,
        stream: Optional[BinaryIO] = None,
        settings: Optional[Settings] = None,
    ) -> FileRoute:
        settings = settings or Settings()
        if not file_name or not file_name.strip():
            raise ConfigurationError("file_name must not be empty")

        backup_path: Optional[str] = None
        if backup:
            found = resolve_dir(backup, settings)
            if found is None:
                raise BackupDirectoryNotFoundError(
                    f"No backup directory could be found using '{backup}' "
                    "(checked settings paths, base_dir relative path and the path as given)"
                )
            backup_path = str(found)
            logger.debug("backup directory resolved: %s", backup_path)

        source = TemplateSource(template, settings) if template else None
        return FileRoute(
            file_name=file_name,
            backup_path=backup_path,
            source=source,
            output=output,
            stream=stream,
        )
