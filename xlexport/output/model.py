from enum import Enum


class OutputMode(Enum):
    DOWNLOAD = "download"
    BACKUP = "backup"
    BOTH = "both"
