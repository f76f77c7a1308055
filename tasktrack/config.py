import logging
import os
from typing import Optional

from .exceptions import ConfigurationError

class Config:
    LOG_LEVEL: str = os.getenv('TASKTRACK_LOG_LEVEL', 'WARNING')
    NO_COLOR: bool = os.getenv('TASKTRACK_NO_COLOR', 'false').lower() == 'true'

    def log_level(self, name: Optional[str] = None) -> int:
        """Numeric logging level for ``name``, defaulting to LOG_LEVEL."""
        name = name or self.LOG_LEVEL
        level = logging.getLevelName(name.upper())
        if not isinstance(level, int):
            raise ConfigurationError(f"Unknown log level: {name!r}")
        return level

config = Config()
