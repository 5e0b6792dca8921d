# File: json_walker/core/common/enums.py

from enum import Enum, unique

@unique
class NodeKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"
