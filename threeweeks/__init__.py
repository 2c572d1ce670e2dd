"""Three-week calendar pages as LaTeX source."""

from .generator import CalendarGenerator
from .models import Settings

__version__ = "0.1.0"
