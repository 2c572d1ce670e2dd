import datetime
import logging
from typing import Optional, TextIO

from .layout import GridLayout
from .models import Settings
from .renderer import TexRenderer
from .sidecar import SidecarStore
from .walker import count_pages, iter_pages

logger = logging.getLogger(__name__)


class CalendarGenerator:
    def __init__(self, settings: Optional[Settings] = None, renderer: Optional[TexRenderer] = None):
        self.settings = settings or Settings()
        self.renderer = renderer or TexRenderer()
        self.layout = GridLayout(self.settings.page)
        self.sidecars = SidecarStore(
            self.settings.data_dir,
            holiday_prefix=self.settings.holiday_prefix,
            appointment_prefix=self.settings.appointment_prefix,
        )

    def preamble(self) -> str:
        shading = self.settings.shading
        return self.renderer.preamble(self.layout.context(), saturday=shading.saturday, sunday=shading.sunday)

    def generate(self, start: datetime.date, end: datetime.date, out: TextIO) -> int:
        """
        Writes the LaTeX document for start..end (inclusive) to out.

        Pages are rendered and written one at a time. Returns the number
        of grids written.
        """
        if end < start:
            raise ValueError(f"End date {end} is before start date {start}")

        logger.info("Generating calendar for %s to %s", start.isoformat(), end.isoformat())
        logger.info("Sidecar directory: %s", self.settings.data_dir)
        logger.info("Paper: %smm x %smm, %d page(s)", self.settings.page.width_mm, self.settings.page.height_mm, count_pages(start, end))

        out.write(self.preamble())
        pages = 0
        for page in iter_pages(start, end, self.sidecars):
            out.write(self.renderer.grid(page))
            pages += 1
        out.write(self.renderer.trailer())
        return pages
