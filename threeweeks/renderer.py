from typing import Any, Dict

from jinja2 import Environment, PackageLoader, select_autoescape

from .models import Page

PREAMBLE_TEMPLATE = "preamble.tex"
GRID_TEMPLATE = "grid.tex"
TRAILER_TEMPLATE = "trailer.tex"


def mm(value: float) -> float:
    """Template filter for computed TikZ coordinates, kept to 0.01mm."""
    return round(float(value), 2)


class TexRenderer:
    """
    Renders the calendar document from the templates bundled with the package.

    The document is produced in three kinds of pieces: the preamble once,
    one grid per three-week page, and the trailer, so a caller can stream
    them out as they are rendered.
    """

    def __init__(self, package: str = "threeweeks", template_dir: str = "templates"):
        self.env = Environment(
            loader=PackageLoader(package, template_dir),
            autoescape=select_autoescape(),
            block_start_string='<%',
            block_end_string='%>',
            variable_start_string='<<',
            variable_end_string='>>',
            comment_start_string='<#',
            comment_end_string='#>',
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        # using alternate delimiters to avoid conflict with latex {}
        self.env.filters["mm"] = mm

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        template = self.env.get_template(template_name)
        return template.render(**context)

    def preamble(self, layout: Dict[str, Any], saturday: str, sunday: str) -> str:
        """Document class, macros, colours and the 21-cell grid template."""
        return self.render(PREAMBLE_TEMPLATE, dict(layout, saturday=saturday, sunday=sunday))

    def grid(self, page: Page) -> str:
        """One threeweeks environment with the label updates for its days."""
        return self.render(GRID_TEMPLATE, {"page": page})

    def trailer(self) -> str:
        return self.render(TRAILER_TEMPLATE, {})
