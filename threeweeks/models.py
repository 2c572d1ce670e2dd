import datetime
from pathlib import Path
from pydantic import BaseModel, Field
from typing import List, Optional

class MarginConfig(BaseModel):
    left: float = Field(10.0, ge=0)
    right: float = Field(10.0, ge=0)
    top: float = Field(10.0, ge=0)
    bottom: float = Field(10.0, ge=0)

class PageConfig(BaseModel):
    # A4 landscape
    width_mm: float = Field(297.0, gt=0)
    height_mm: float = Field(210.0, gt=0)
    margins: MarginConfig = MarginConfig()
    heading_h: float = Field(12.0, ge=0) # mm above the grid for the page heading
    weekday_h: float = Field(6.0, ge=0)  # mm for the weekday-name row

class ShadingConfig(BaseModel):
    # xcolor expressions, e.g. "gray!15" or "red!15"
    saturday: str = Field("gray!15", min_length=1)
    sunday: str = Field("red!15", min_length=1)

class Settings(BaseModel):
    locale: Optional[str] = None # LC_TIME locale used for weekday and month names
    data_dir: Path = Path(".")
    holiday_prefix: str = Field("h-", min_length=1)
    appointment_prefix: str = Field("a-", min_length=1)
    page: PageConfig = PageConfig()
    shading: ShadingConfig = ShadingConfig()

class DayCell(BaseModel):
    cell: int = Field(ge=1, le=21)
    day: datetime.date
    label: str
    shade: Optional[str] = None # colour name defined in the preamble
    holiday: Optional[str] = None
    appointment: Optional[str] = None

class Page(BaseModel):
    number: int
    heading: str
    days: List[DayCell]
