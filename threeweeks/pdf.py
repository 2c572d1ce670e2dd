import logging
import shutil
import subprocess
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def compile_pdf(tex_path: Path) -> Optional[Path]:
    """
    Runs pdflatex on a written .tex file, next to it.

    Returns the PDF path, or None when pdflatex is not installed.
    Raises subprocess.CalledProcessError when the LaTeX run fails.
    """
    pdflatex_path = shutil.which("pdflatex")
    if not pdflatex_path:
        return None

    output_dir = tex_path.parent
    logger.info("Found pdflatex at: %s", pdflatex_path)
    cmd = [
        pdflatex_path,
        f"-output-directory={output_dir}",
        "-interaction=nonstopmode", # Don't hang on errors
        str(tex_path),
    ]
    # No cross references, one pass is enough
    subprocess.run(cmd, check=True, stdout=subprocess.DEVNULL)
    return output_dir / (tex_path.stem + ".pdf")
