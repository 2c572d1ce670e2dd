"""
Per-day annotation files.

Holiday and appointment text lives in files named after the day they
belong to, e.g. ``h-2024-12-25`` and ``a-2024-12-27``. They are owned by
whoever keeps the calendar data; this module only reads them.
"""

import datetime
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class SidecarStore:
    """Looks up holiday and appointment files for a day in one directory."""

    def __init__(self, directory: Path = Path("."), holiday_prefix: str = "h-", appointment_prefix: str = "a-"):
        self.directory = Path(directory)
        self.holiday_prefix = holiday_prefix
        self.appointment_prefix = appointment_prefix

    def path_for(self, prefix: str, day: datetime.date) -> Path:
        return self.directory / f"{prefix}{day.isoformat()}"

    def _read(self, prefix: str, day: datetime.date) -> Optional[str]:
        path = self.path_for(prefix, day)
        if not path.exists():
            return None
        logger.debug("Embedding %s", path)
        # undecodable bytes become U+FFFD
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read().rstrip()

    def holiday(self, day: datetime.date) -> Optional[str]:
        """Returns the holiday text for the day, or None when there is no file."""
        return self._read(self.holiday_prefix, day)

    def appointment(self, day: datetime.date) -> Optional[str]:
        """Returns the appointment text for the day, or None when there is no file."""
        return self._read(self.appointment_prefix, day)
