from pathlib import Path

import pytest
from PIL import Image

from geomfit.geometry import Dimension


@pytest.fixture
def landscape() -> Dimension:
    """3000x2000 landscape size (ratio 1.5)."""
    return Dimension.of(3000, 2000)


@pytest.fixture
def portrait() -> Dimension:
    """2000x3000 portrait size (ratio 0.667)."""
    return Dimension.of(2000, 3000)


@pytest.fixture
def sample_image(tmp_path: Path) -> Path:
    """A small 300x200 PNG on disk."""
    path = tmp_path / "sample.png"
    Image.new("RGB", (300, 200), color="white").save(path)
    return path


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep tests away from config files on the host."""
    monkeypatch.delenv("GEOMFIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    from geomfit.settings import UserSettings

    monkeypatch.setattr(UserSettings, "DEFAULT_CONFIG_PATHS", [tmp_path / "config.yaml"])
