from dataclasses import dataclass, field
from typing import Dict

DEFAULT_DATE_FORMAT = "mm/dd/yyyy"
DEFAULT_DATETIME_FORMAT = "mm/dd/yyyy hh:mm"
DEFAULT_TIME_FORMAT = "hh:mm"
DEFAULT_MAX_COLUMN_WIDTH = 50


@dataclass(frozen=True)
class Settings:
    paths: Dict[str, str] = field(default_factory=dict)
    base_dir: str = "."
    date_format: str = DEFAULT_DATE_FORMAT
    datetime_format: str = DEFAULT_DATETIME_FORMAT
    time_format: str = DEFAULT_TIME_FORMAT
    max_column_width: int = DEFAULT_MAX_COLUMN_WIDTH
