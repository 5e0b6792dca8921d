from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator
from .models import CandidateEntry

class IDirectoryTraversal(ABC):
    """
    Contract for recursive directory enumeration.
    Abstracts os.walk vs any other tree source.
    """
    @abstractmethod
    def walk(self, root: Path) -> Iterator[CandidateEntry]:
        """
        Yields every node under root, depth-first, parents before children.
        Failures are yielded as error entries, never raised.
        """
        pass

class IEntryFilter(ABC):
    @abstractmethod
    def accepts(self, entry: CandidateEntry) -> bool:
        """Returns True if the entry's path should be handed to the caller."""
        pass
