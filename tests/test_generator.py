"""
tests/test_generator.py

Covers:
  - Document structure (preamble, grids, trailer)
  - Grid open/close counts for 21 and 22 day ranges
  - Per-day label updates, emphasis and shading
  - Holiday and appointment embedding
  - Settings flowing into the preamble
"""

import datetime
import io
import re

import pytest

from threeweeks.generator import CalendarGenerator
from threeweeks.models import Settings, ShadingConfig

D = datetime.date


def render(generator, start, end):
    out = io.StringIO()
    generator.generate(start, end, out)
    return out.getvalue()


def date_updates(tex):
    return re.findall(r"^\\setdate\{(\d+)\}\{(.*)\}$", tex, re.MULTILINE)


# ── Document structure ────────────────────────────────────────────────────────

class TestStructure:

    def test_preamble_and_trailer(self, generator):
        tex = render(generator, D(2024, 1, 1), D(2024, 1, 21))
        assert tex.startswith(r"\documentclass")
        assert tex.count(r"\begin{document}") == 1
        assert tex.rstrip().endswith(r"\end{document}")

    def test_three_weeks_one_grid(self, generator):
        tex = render(generator, D(2024, 1, 1), D(2024, 1, 21))
        assert tex.count(r"\begin{threeweeks}") == 1
        assert tex.count(r"\end{threeweeks}") == 1
        assert len(date_updates(tex)) == 21
        assert tex.count(r"\setdate{") == 21
        assert tex.count(r"\setshade{") == 6

    def test_22_days_two_grids(self, generator):
        tex = render(generator, D(2024, 1, 1), D(2024, 1, 22))
        assert tex.count(r"\begin{threeweeks}") == 2
        assert tex.count(r"\end{threeweeks}") == 2
        assert len(date_updates(tex)) == 22

    def test_grids_do_not_nest(self, generator):
        tex = render(generator, D(2024, 1, 1), D(2024, 3, 31))
        markers = re.findall(r"\\(begin|end)\{threeweeks\}", tex)
        assert markers == ["begin", "end"] * (len(markers) // 2)

    def test_returns_page_count(self, generator):
        assert generator.generate(D(2024, 1, 1), D(2024, 1, 22), io.StringIO()) == 2

    def test_single_day(self, generator):
        tex = render(generator, D(2024, 6, 5), D(2024, 6, 5))
        assert date_updates(tex) == [("3", "5")]

    def test_end_before_start(self, generator):
        with pytest.raises(ValueError):
            generator.generate(D(2024, 1, 2), D(2024, 1, 1), io.StringIO())

    def test_heading(self, generator):
        tex = render(generator, D(2024, 1, 22), D(2024, 2, 11))
        assert r"\begin{threeweeks}{January -- February 2024}" in tex


# ── Day labels ────────────────────────────────────────────────────────────────

class TestDayLabels:

    def test_monday_start_in_first_cell(self, generator):
        tex = render(generator, D(2024, 1, 1), D(2024, 1, 21))
        assert date_updates(tex)[0] == ("1", r"\textbf{1 Jan}")

    def test_offset_start(self, generator):
        # 2024-01-03 is a Wednesday
        tex = render(generator, D(2024, 1, 3), D(2024, 1, 5))
        assert date_updates(tex) == [("3", "3"), ("4", "4"), ("5", "5")]

    def test_month_change_emphasis(self, generator):
        tex = render(generator, D(2024, 1, 29), D(2024, 2, 2))
        labels = [label for _, label in date_updates(tex)]
        assert labels == ["29", "30", "31", r"\textbf{1 Feb}", "2"]

    def test_new_page_restarts_at_cell_one(self, generator):
        tex = render(generator, D(2024, 1, 1), D(2024, 1, 22))
        assert date_updates(tex)[-1] == ("1", "22")


# ── Shading and annotations ───────────────────────────────────────────────────

class TestAnnotations:

    def test_weekend_shading(self, generator):
        tex = render(generator, D(2024, 1, 1), D(2024, 1, 7))
        assert r"\setshade{6}{saturdayshade}" in tex
        assert r"\setshade{7}{sundayshade}" in tex
        assert tex.count(r"\setshade{") == 2

    def test_holiday_shaded_like_sunday(self, generator, sidecar):
        sidecar("h-", D(2024, 1, 3), "Company day")
        tex = render(generator, D(2024, 1, 1), D(2024, 1, 7))
        assert r"\setshade{3}{sundayshade}" in tex
        assert r"\setholiday{3}{Company day}" in tex

    def test_holiday_on_saturday(self, generator, sidecar):
        sidecar("h-", D(2024, 1, 6), "Epiphany")
        tex = render(generator, D(2024, 1, 1), D(2024, 1, 7))
        assert r"\setshade{6}{sundayshade}" in tex
        assert "saturdayshade}" not in tex.split(r"\begin{document}")[1]

    def test_appointment(self, generator, sidecar):
        sidecar("a-", D(2024, 1, 4), "Dentist 9:00")
        tex = render(generator, D(2024, 1, 1), D(2024, 1, 7))
        assert r"\setappointment{4}{Dentist 9:00}" in tex
        assert r"\setshade{4}" not in tex

    def test_no_sidecars_no_annotations(self, generator):
        tex = render(generator, D(2024, 1, 1), D(2024, 1, 21))
        assert r"\setholiday{" not in tex
        assert r"\setappointment{" not in tex

    def test_contents_embedded_verbatim(self, generator, sidecar):
        sidecar("h-", D(2024, 1, 1), r"\textit{New Year}")
        tex = render(generator, D(2024, 1, 1), D(2024, 1, 1))
        assert r"\setholiday{1}{\textit{New Year}}" in tex

    def test_annotation_order(self, generator, sidecar):
        sidecar("h-", D(2024, 1, 2), "H")
        sidecar("a-", D(2024, 1, 2), "A")
        tex = render(generator, D(2024, 1, 2), D(2024, 1, 2))
        body = tex.split(r"\begin{threeweeks}")[1]
        assert body.index(r"\setdate{2}") < body.index(r"\setshade{2}")
        assert body.index(r"\setshade{2}") < body.index(r"\setholiday{2}")
        assert body.index(r"\setholiday{2}") < body.index(r"\setappointment{2}")


# ── Preamble ──────────────────────────────────────────────────────────────────

class TestPreamble:

    def test_21_cell_template(self, generator):
        preamble = generator.preamble()
        for field in ("date", "holiday", "appointment"):
            assert preamble.count(rf"\cellfield{{{field}}}{{") == 21
        assert preamble.count(r"\cellshade{") == 21

    def test_weekday_names(self, generator):
        preamble = generator.preamble()
        for name in ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"):
            assert f"{{{name}}};" in preamble

    def test_shading_colours(self, data_dir):
        settings = Settings(data_dir=data_dir, shading=ShadingConfig(saturday="blue!10", sunday="orange!20"))
        preamble = CalendarGenerator(settings).preamble()
        assert r"\colorlet{saturdayshade}{blue!10}" in preamble
        assert r"\colorlet{sundayshade}{orange!20}" in preamble

    def test_paper_size(self, generator):
        assert "paperwidth=297.0mm, paperheight=210.0mm" in generator.preamble()

    def test_no_template_markers_left(self, generator):
        tex = render(generator, D(2024, 1, 1), D(2024, 2, 1))
        for marker in ("<<", ">>", "<%", "%>"):
            assert marker not in tex
