from pathlib import Path

import pytest

from geomfit.errors import ImageReadError
from geomfit.geometry import Dimension
from geomfit.utils.image import fit_image, image_dimension


def test_image_dimension(sample_image: Path) -> None:
    assert image_dimension(sample_image) == Dimension.of(300, 200)


def test_fit_image(sample_image: Path) -> None:
    original, fitted = fit_image(sample_image, 150, 150)
    assert original == Dimension.of(300, 200)
    assert fitted == Dimension.of(150, 100)


def test_fit_image_already_fits(sample_image: Path) -> None:
    original, fitted = fit_image(sample_image, 1000, 1000)
    assert fitted is original


def test_missing_image(tmp_path: Path) -> None:
    with pytest.raises(ImageReadError) as exc_info:
        image_dimension(tmp_path / "missing.png")
    assert isinstance(exc_info.value.original_error, OSError)


def test_not_an_image(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_text("not an image")
    with pytest.raises(ImageReadError, match="Unable to read image"):
        image_dimension(path)
