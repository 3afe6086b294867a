"""
Configuration for the campus library system.

Values default to the standard lending setup and can be overridden from the
environment (``LIBRARY_*`` variables).
"""

import logging
import os
from dataclasses import dataclass

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class LibraryConfig:
    """Tunable settings for a LibrarySystem"""
    transaction_prefix: str = "TRX"
    transaction_id_width: int = 6
    reminder_min_days: int = 1
    reminder_max_days: int = 3
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "LibraryConfig":
        """Build a config from LIBRARY_* environment variables"""
        defaults = cls()
        return cls(
            transaction_prefix=os.environ.get('LIBRARY_TRANSACTION_PREFIX', defaults.transaction_prefix),
            transaction_id_width=_env_int('LIBRARY_TRANSACTION_ID_WIDTH', defaults.transaction_id_width),
            reminder_min_days=_env_int('LIBRARY_REMINDER_MIN_DAYS', defaults.reminder_min_days),
            reminder_max_days=_env_int('LIBRARY_REMINDER_MAX_DAYS', defaults.reminder_max_days),
            log_level=os.environ.get('LIBRARY_LOG_LEVEL', defaults.log_level).upper(),
        )

    def in_reminder_window(self, days_remaining: int) -> bool:
        return self.reminder_min_days <= days_remaining <= self.reminder_max_days


def configure_logging(config: LibraryConfig) -> None:
    """Install a root handler at the configured level"""
    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO),
                        format=LOG_FORMAT)
