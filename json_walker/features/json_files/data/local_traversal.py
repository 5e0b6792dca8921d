import os
import stat
from pathlib import Path
from collections import deque
from typing import Deque, Iterator
from json_walker.core.common.enums import NodeKind
from ..domain.interfaces import IDirectoryTraversal
from ..domain.models import CandidateEntry

class LocalDirectoryTraversal(IDirectoryTraversal):
    """
    Concrete implementation using standard os.walk.
    os.walk owns the directory handles and closes them as it ascends
    or when this generator is closed.
    """

    def walk(self, root: Path) -> Iterator[CandidateEntry]:
        # os.walk reports listing failures through onerror and carries on
        pending_errors: Deque[OSError] = deque()

        for dirpath, dirnames, filenames in os.walk(root, onerror=pending_errors.append):
            yield from self._drain(pending_errors, root)

            current_dir = Path(dirpath)
            yield CandidateEntry(path=current_dir, kind=NodeKind.DIRECTORY)

            for filename in filenames:
                yield self._resolve(current_dir / filename)

        # Errors raised after the last directory was yielded (or for a missing root)
        yield from self._drain(pending_errors, root)

    def _drain(self, pending_errors: Deque[OSError], root: Path) -> Iterator[CandidateEntry]:
        while pending_errors:
            error = pending_errors.popleft()
            error_path = Path(error.filename) if error.filename else Path(root)
            yield CandidateEntry(path=error_path, error=error)

    def _resolve(self, path: Path) -> CandidateEntry:
        """
        Stats through symlinks, so a link to a regular file counts as a file
        and a dangling link becomes an error entry.
        """
        try:
            mode = os.stat(path).st_mode
        except OSError as e:
            return CandidateEntry(path=path, error=e)

        if stat.S_ISREG(mode):
            return CandidateEntry(path=path, kind=NodeKind.FILE)
        if stat.S_ISDIR(mode):
            return CandidateEntry(path=path, kind=NodeKind.DIRECTORY)
        return CandidateEntry(path=path, kind=NodeKind.OTHER)
