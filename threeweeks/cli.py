import datetime
import logging
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import typer

from .generator import CalendarGenerator
from .pdf import compile_pdf
from .utils import DEFAULT_CONFIG, apply_locale, load_settings

app = typer.Typer(add_completion=False)

DATE_FORMATS = ["%Y-%m-%d"]

CLICK_USAGE_ERROR = 2
USAGE_ERROR = 1


@app.command()
def generate(
    begin: Optional[datetime.datetime] = typer.Option(None, "-b", "--begin", formats=DATE_FORMATS, help="First day (default: today)"),
    end: Optional[datetime.datetime] = typer.Option(None, "-e", "--end", formats=DATE_FORMATS, help="Last day, inclusive (default: Dec 31 of the start year)"),
    config: Optional[Path] = typer.Option(None, "-c", "--config", help=f"Settings file (default: {DEFAULT_CONFIG} if present)"),
    data_dir: Optional[Path] = typer.Option(None, "-d", "--data-dir", help="Directory holding the h-YYYY-MM-DD and a-YYYY-MM-DD files"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write the LaTeX source here instead of stdout"),
    compile_pdf_: bool = typer.Option(False, "--compile", help="Run pdflatex on the --output file"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log progress to stderr"),
):
    """
    Generate a three-week calendar as LaTeX source.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s: %(message)s",
    )

    start = begin.date() if begin else datetime.date.today()
    last = end.date() if end else datetime.date(start.year, 12, 31)
    if last < start:
        raise typer.BadParameter(f"{last} is before the start date {start}", param_hint="'-e' / '--end'")
    if compile_pdf_ and output is None:
        raise typer.BadParameter("needs --output", param_hint="'--compile'")

    try:
        settings = load_settings(config)
        if data_dir is not None:
            settings.data_dir = data_dir
        apply_locale(settings.locale)
        gen = CalendarGenerator(settings)

        if output is None:
            gen.generate(start, last, sys.stdout)
        else:
            with open(output, "w", encoding="utf-8") as f:
                pages = gen.generate(start, last, f)
            typer.echo(f"Generated: {output} ({pages} pages)", err=True)

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if compile_pdf_:
        try:
            pdf_path = compile_pdf(output)
        except subprocess.CalledProcessError as e:
            typer.echo(f"Error during PDF compilation: {e}", err=True)
            raise typer.Exit(code=1)
        if pdf_path is None:
            typer.echo("[NOTICE] pdflatex not found in PATH.", err=True)
            typer.echo(f"To compile manually: pdflatex -output-directory {output.parent} {output}", err=True)
        else:
            typer.echo(f"Success! PDF generated at: {pdf_path}", err=True)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Runs the command line and returns the exit status.

    Usage errors (unknown flags, missing values, stray arguments, bad
    dates) exit with 1 rather than the usual 2.
    """
    try:
        app(args=argv, prog_name="threeweeks")
    except SystemExit as e:
        if e.code is None:
            return 0
        if not isinstance(e.code, int):
            typer.echo(e.code, err=True)
            return 1
        return USAGE_ERROR if e.code == CLICK_USAGE_ERROR else e.code
    return 0


if __name__ == "__main__":
    sys.exit(main())
