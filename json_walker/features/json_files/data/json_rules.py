from pathlib import Path
from json_walker.core.config.settings import settings
from ..domain.interfaces import IEntryFilter
from ..domain.models import CandidateEntry

class JsonFileRules(IEntryFilter):
    """
    Central logic for which entries the walker hands back.
    """

    def accepts(self, entry: CandidateEntry) -> bool:
        # 1. Errors and anything that is not a regular file
        if not entry.is_regular_file:
            return False

        # 2. Exact, case-sensitive extension match
        return self.has_json_extension(entry.path)

    @staticmethod
    def has_json_extension(path: Path) -> bool:
        # Path.suffix is empty for "json" and for the dotfile ".json"
        return path.suffix == settings.JSON_SUFFIX
