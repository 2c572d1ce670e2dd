import calendar
from typing import List, NamedTuple

from .models import PageConfig
from .walker import DAYS_PER_WEEK, WEEKS_PER_PAGE


class CellBox(NamedTuple):
    index: int  # 1..21, row by row
    x: float    # lower left corner, mm from the grid origin
    y: float
    top: float
    right: float


class GridLayout:
    """
    Geometry of one three-week page.

    All values are in mm. The grid origin (0, 0) is the lower left
    corner of the bottom week; the weekday-name row sits on top of the
    first week and the heading above that.
    """

    def __init__(self, page: PageConfig):
        self.page = page
        m = page.margins
        self.text_w = page.width_mm - m.left - m.right
        self.text_h = page.height_mm - m.top - m.bottom
        self.grid_h = self.text_h - page.heading_h - page.weekday_h
        if self.text_w <= 0 or self.grid_h <= 0:
            raise ValueError("Margins leave no room for the grid")

        self.cell_w = round(self.text_w / DAYS_PER_WEEK, 2)
        self.cell_h = round(self.grid_h / WEEKS_PER_PAGE, 2)
        self.width = round(self.cell_w * DAYS_PER_WEEK, 2)
        self.height = round(self.cell_h * WEEKS_PER_PAGE, 2)

    def cells(self) -> List[CellBox]:
        boxes = []
        for row in range(WEEKS_PER_PAGE):
            y = round((WEEKS_PER_PAGE - 1 - row) * self.cell_h, 2)
            for col in range(DAYS_PER_WEEK):
                x = round(col * self.cell_w, 2)
                boxes.append(CellBox(
                    index=row * DAYS_PER_WEEK + col + 1,
                    x=x,
                    y=y,
                    top=round(y + self.cell_h, 2),
                    right=round(x + self.cell_w, 2),
                ))
        return boxes

    def weekday_names(self) -> List[str]:
        # calendar.day_abbr follows LC_TIME and starts on Monday
        return [calendar.day_abbr[i] for i in range(DAYS_PER_WEEK)]

    def context(self) -> dict:
        """Template variables for the preamble."""
        m = self.page.margins
        return {
            "paper_w": self.page.width_mm,
            "paper_h": self.page.height_mm,
            "margin_left": m.left,
            "margin_right": m.right,
            "margin_top": m.top,
            "margin_bottom": m.bottom,
            "heading_h": self.page.heading_h,
            "weekday_h": self.page.weekday_h,
            "cell_w": self.cell_w,
            "cell_h": self.cell_h,
            "grid_w": self.width,
            "grid_h": self.height,
            "cells": self.cells(),
            # room left of the holiday text for the date label
            "holiday_w": round(max(self.cell_w - 14, 1), 2),
            "appointment_w": round(max(self.cell_w - 3, 1), 2),
            # appointments start below the date label
            "appointment_drop": 8,
            "weekday_y": round(self.height + self.page.weekday_h / 2, 2),
            "weekdays": [
                {"name": name, "x": round((i + 0.5) * self.cell_w, 2)}
                for i, name in enumerate(self.weekday_names())
            ],
        }
