# File: json_walker/core/config/settings.py

import logging


class Settings:
    # --- Program ---
    PROGRAM_NAME: str = "json-file-walker"
    USAGE: str = f"Usage: {PROGRAM_NAME} root_dir"

    # --- Filtering ---
    # Compared against Path.suffix without the leading dot, case-sensitive.
    JSON_EXTENSION: str = "json"

    # --- Logging ---
    # The CLI prints paths on stdout only; anything below WARNING stays quiet.
    LOG_LEVEL: int = logging.WARNING
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    @property
    def JSON_SUFFIX(self) -> str:
        return f".{self.JSON_EXTENSION}"


settings = Settings()
