from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from json_walker.core.common.enums import NodeKind

@dataclass(frozen=True)
class CandidateEntry:
    """
    One filesystem node visited during a walk.
    Either a resolved node (kind set) or a traversal error in its place.
    """
    path: Path
    kind: Optional[NodeKind] = None
    error: Optional[OSError] = None

    def __post_init__(self):
        if (self.kind is None) == (self.error is None):
            raise ValueError(f"Entry must carry exactly one of kind or error: {self.path}")

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def is_regular_file(self) -> bool:
        return self.kind == NodeKind.FILE

@dataclass
class WalkStats:
    """
    Running counters for a single walker, reported when it is exhausted.
    """
    yielded: int = 0
    skipped: int = 0
    errors: int = 0
