from enum import Enum


class SourceKind(Enum):
    BLANK = "blank"
    TEMPLATE = "template"
