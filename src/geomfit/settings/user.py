"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, model_validator

from geomfit.geometry.dimension import Dimension

# Load environment variables from .env file(s)
load_dotenv()

CONFIG_ENV_VAR = "GEOMFIT_CONFIG"


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


def _default_targets() -> dict[str, Dimension]:
    return {
        # typical 10.3" e-ink panel
        "display": Dimension.of(1872, 1404),
        "thumbnail": Dimension.of(320, 240),
    }


class UserSettings(BaseModel):
    """Named bounding boxes and output preferences for the geomfit CLI.

    Every value has a default, so an empty or missing config file is valid.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/geomfit/config.yaml").expanduser(),
        Path("/etc/geomfit/config.yaml"),
    ]

    targets: dict[str, Dimension] = Field(
        default_factory=_default_targets,
        description="Named bounding boxes, e.g. {display: {width: 1872, height: 1404}}",
    )
    default_target: str = Field(
        "display", description="Target used when no bounds are given on the command line"
    )
    precision: int = Field(3, ge=0, le=10, description="Decimal places in CLI output")

    @model_validator(mode="after")
    def check_default_target_exists(self) -> UserSettings:
        if self.default_target not in self.targets:
            raise ValueError(
                f"default_target {self.default_target!r} is not one of the configured "
                f"targets: {', '.join(sorted(self.targets)) or '(none)'}"
            )
        return self

    def target(self, name: str | None = None) -> Dimension:
        """Look up a named bounding box.

        Args:
            name: Target name (default: ``default_target``)

        Returns:
            The target's Dimension

        Raises:
            KeyError: If no target has that name
        """
        key = name or self.default_target
        try:
            return self.targets[key]
        except KeyError:
            raise KeyError(
                f"Unknown target {key!r}; known targets: {', '.join(sorted(self.targets))}"
            ) from None

    @classmethod
    def find_config(cls) -> Path:
        """Locate the config file from the environment or the default paths.

        Raises:
            FileNotFoundError: If no config file exists
        """
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)
            if not path.exists():
                raise FileNotFoundError(f"Config file from {CONFIG_ENV_VAR} not found: {path}")
            return path

        for default_path in cls.DEFAULT_CONFIG_PATHS:
            if default_path.exists():
                return default_path
        raise FileNotFoundError(
            f"No configuration file found. Create config.yaml or set {CONFIG_ENV_VAR}."
        )

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated UserSettings object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            path = cls.find_config()
        elif not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        import yaml  # local import to avoid hard dep for callers

        try:
            raw = _interpolate_env(path.read_text(encoding="utf-8"))
            data = yaml.safe_load(raw) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
