import pytest

from threeweeks.generator import CalendarGenerator
from threeweeks.models import Settings
from threeweeks.sidecar import SidecarStore


@pytest.fixture
def data_dir(tmp_path):
    """Empty sidecar directory."""
    d = tmp_path / "data"
    d.mkdir()
    return d


@pytest.fixture
def store(data_dir):
    return SidecarStore(data_dir)


@pytest.fixture
def generator(data_dir):
    return CalendarGenerator(Settings(data_dir=data_dir))


@pytest.fixture
def sidecar(data_dir):
    """Writes a sidecar file: sidecar("h-", date(2024, 1, 1), "New Year")."""
    def write(prefix, day, text):
        path = data_dir / f"{prefix}{day.isoformat()}"
        path.write_text(text, encoding="utf-8")
        return path
    return write
