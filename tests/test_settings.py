from pathlib import Path

import pytest
from pydantic import ValidationError

from geomfit.geometry import Dimension
from geomfit.settings import UserSettings

GOOD_YAML = """
targets:
  banner:
    width: 1200
    height: 300
  square:
    width: 512
    height: 512
default_target: banner
precision: 1
"""

BAD_YAML = """
targets:
  square:
    width: 512
    height: 512
default_target: banner
"""


def test_defaults() -> None:
    settings = UserSettings()
    assert settings.default_target == "display"
    assert settings.target() == Dimension.of(1872, 1404)
    assert settings.target("thumbnail") == Dimension.of(320, 240)
    assert settings.precision == 3


def test_valid_config(tmp_path: Path) -> None:
    cfg_file = tmp_path / "good.yaml"
    cfg_file.write_text(GOOD_YAML)
    settings = UserSettings.load(cfg_file)
    assert settings.target() == Dimension.of(1200, 300)
    assert settings.target("square") == Dimension.of(512, 512)
    assert settings.precision == 1


def test_invalid_config(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yaml"
    cfg_file.write_text(BAD_YAML)
    with pytest.raises(RuntimeError, match="default_target"):
        UserSettings.load(cfg_file)


def test_negative_target_rejected() -> None:
    with pytest.raises(ValidationError):
        UserSettings(targets={"oops": {"width": -1, "height": 5}}, default_target="oops")


def test_precision_range() -> None:
    with pytest.raises(ValidationError):
        UserSettings(precision=11)


def test_malformed_yaml(tmp_path: Path) -> None:
    cfg_file = tmp_path / "broken.yaml"
    cfg_file.write_text("targets: [unclosed\n")
    with pytest.raises(RuntimeError, match="Unable to read config YAML"):
        UserSettings.load(cfg_file)


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    cfg_file = tmp_path / "empty.yaml"
    cfg_file.write_text("")
    assert UserSettings.load(cfg_file) == UserSettings()


def test_env_interpolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GEOMFIT_TEST_PRECISION", "5")
    cfg_file = tmp_path / "env.yaml"
    cfg_file.write_text("precision: ${GEOMFIT_TEST_PRECISION}\n")
    assert UserSettings.load(cfg_file).precision == 5


def test_unknown_target() -> None:
    with pytest.raises(KeyError, match="known targets"):
        UserSettings().target("poster")


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        UserSettings.load(tmp_path / "nope.yaml")


def test_load_searches_default_paths(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="No configuration file found"):
        UserSettings.load()

    (tmp_path / "config.yaml").write_text("precision: 2\n")
    assert UserSettings.load().precision == 2


def test_load_from_env_var(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg_file = tmp_path / "from_env.yaml"
    cfg_file.write_text(GOOD_YAML)
    monkeypatch.setenv("GEOMFIT_CONFIG", str(cfg_file))
    assert UserSettings.load().default_target == "banner"

    monkeypatch.setenv("GEOMFIT_CONFIG", str(tmp_path / "missing.yaml"))
    with pytest.raises(FileNotFoundError, match="GEOMFIT_CONFIG"):
        UserSettings.load()
