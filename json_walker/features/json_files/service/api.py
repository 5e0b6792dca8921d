import os
import logging
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from ..domain.interfaces import IDirectoryTraversal
from ..domain.models import CandidateEntry, WalkStats
from ..data.local_traversal import LocalDirectoryTraversal
from ..data.json_rules import JsonFileRules

logger = logging.getLogger(__name__)

PathLike = Union[str, bytes, os.PathLike]
ErrorSink = Callable[[CandidateEntry], None]

class JsonFileWalker:
    """
    Lazy, single-pass iterator over the .json files under a root directory.

    The root is not checked up front. Anything the traversal cannot read
    (missing root, unreadable directory, dangling link) is dropped and the
    walk carries on; pass `on_error` to observe those entries.
    """

    def __init__(
        self,
        root: PathLike,
        traversal: Optional[IDirectoryTraversal] = None,
        on_error: Optional[ErrorSink] = None,
    ):
        self.root = Path(os.fsdecode(root))
        self.traversal = traversal or LocalDirectoryTraversal()
        self.rules = JsonFileRules()
        self.on_error = on_error
        self.stats = WalkStats()

        # Cursor is started on the first pull
        self._entries: Optional[Iterator[CandidateEntry]] = None
        self._exhausted = False

    def __iter__(self) -> "JsonFileWalker":
        return self

    def __next__(self) -> Path:
        if self._exhausted:
            raise StopIteration

        if self._entries is None:
            logger.debug(f"Starting walk of: {self.root}")
            self._entries = iter(self.traversal.walk(self.root))

        # Keep pulling until an entry is accepted or the traversal runs dry
        for entry in self._entries:
            if entry.is_error:
                self._absorb(entry)
                continue

            if not self.rules.accepts(entry):
                self.stats.skipped += 1
                continue

            self.stats.yielded += 1
            return entry.path

        self._finish()
        raise StopIteration

    def close(self) -> None:
        """
        Stops the walk early and releases any directory handles still open.
        Further pulls report exhaustion.
        """
        if self._entries is not None and hasattr(self._entries, "close"):
            self._entries.close()
        self._finish()

    def _absorb(self, entry: CandidateEntry) -> None:
        self.stats.errors += 1
        logger.debug(f"Skipping unreadable entry {entry.path}: {entry.error}")
        if self.on_error is not None:
            self.on_error(entry)

    def _finish(self) -> None:
        if self._exhausted:
            return
        self._exhausted = True
        logger.debug(
            f"Walk of {self.root} complete. Yielded: {self.stats.yielded}, "
            f"skipped: {self.stats.skipped}, errors: {self.stats.errors}"
        )


def walk_json_files(root: PathLike) -> JsonFileWalker:
    """
    Returns an iterator of the paths of all .json files under root,
    including those in nested sub-directories.
    """
    return JsonFileWalker(root)
