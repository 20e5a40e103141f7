"""geomfit command line interface.

This module provides commands to constrain a size to a bounding box, to
compute the center of a bounding area, to report how an image file would be
fitted, and to inspect the configuration.
"""

from __future__ import annotations

import logging
import math
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from types import SimpleNamespace
from typing import Final, NoReturn

import typer

from geomfit.errors import GeometryError
from geomfit.geometry import center, constrain
from geomfit.settings import CONFIG_ENV_VAR, UserSettings
from geomfit.utils import fit_image, format_dimension, format_point

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Aspect-ratio-preserving geometry helpers", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "geomfit.cli"

CONFIG_OPTION = typer.Option(
    None, "--config", "-c", exists=True, dir_okay=False, help="Path to config.yaml"
)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
MAX_WIDTH_OPTION = typer.Option(None, "--max-width", "-W", help="Maximum width")
MAX_HEIGHT_OPTION = typer.Option(None, "--max-height", "-H", help="Maximum height")
TARGET_OPTION = typer.Option(None, "--target", "-t", help="Named bounding box from config")
IMAGE_ARGUMENT = typer.Argument(..., exists=True, dir_okay=False, help="Image file")


@dataclass
class CliState:
    """Options shared by every command, settings loaded on first use."""

    config: Path | None = None
    _settings: UserSettings | None = None

    @property
    def settings(self) -> UserSettings:
        if self._settings is None:
            self._settings = _load_settings(self.config)
        return self._settings


def _fail(message: str) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _load_settings(config: Path | None) -> UserSettings:
    try:
        return UserSettings.load(config)
    except FileNotFoundError as exc:
        # an explicit path or GEOMFIT_CONFIG must exist
        if config is not None or os.environ.get(CONFIG_ENV_VAR):
            _fail(str(exc))
        logger.debug("No config file found, using default settings")
        return UserSettings()
    except RuntimeError as exc:
        _fail(str(exc))


def _resolve_bounds(
    settings: UserSettings,
    max_width: float | None,
    max_height: float | None,
    target: str | None,
) -> tuple[float, float]:
    """Pick the bounding box from explicit limits or a named target.

    A single explicit limit leaves the other axis unbounded.
    """
    if max_width is None and max_height is None:
        try:
            bounds = settings.target(target)
        except KeyError as exc:
            _fail(exc.args[0])
        logger.debug("Using target %s: %s", target or settings.default_target, bounds)
        return bounds.width, bounds.height

    if target is not None:
        raise typer.BadParameter("--target cannot be combined with --max-width/--max-height")
    return (
        math.inf if max_width is None else max_width,
        math.inf if max_height is None else max_height,
    )


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Aspect-ratio-preserving geometry helpers."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    ctx.obj = CliState(config=config)


@app.command("constrain")
def constrain_command(
    ctx: typer.Context,
    width: float = typer.Argument(..., help="Width to constrain"),
    height: float = typer.Argument(..., help="Height to constrain"),
    max_width: float | None = MAX_WIDTH_OPTION,
    max_height: float | None = MAX_HEIGHT_OPTION,
    target: str | None = TARGET_OPTION,
) -> None:
    """Scale WIDTH x HEIGHT down to fit the bounds, keeping its aspect ratio."""
    state: CliState = ctx.obj
    settings = state.settings
    bound_width, bound_height = _resolve_bounds(settings, max_width, max_height, target)
    try:
        # raw values, so non-positive sizes get constrain's own error
        result = constrain(SimpleNamespace(width=width, height=height), bound_width, bound_height)
    except GeometryError as exc:
        _fail(str(exc))
    typer.echo(format_dimension(result, settings.precision))


@app.command("center")
def center_command(
    ctx: typer.Context,
    x: float = typer.Argument(..., help="Horizontal location of the bounding area"),
    y: float = typer.Argument(..., help="Vertical location of the bounding area"),
    width: float = typer.Argument(..., help="Width of the bounding area"),
    height: float = typer.Argument(..., help="Height of the bounding area"),
) -> None:
    """Print the center point of a bounding area."""
    state: CliState = ctx.obj
    typer.echo(format_point(center(x, y, width, height), state.settings.precision))


@app.command("fit")
def fit_command(
    ctx: typer.Context,
    image: Path = IMAGE_ARGUMENT,
    max_width: float | None = MAX_WIDTH_OPTION,
    max_height: float | None = MAX_HEIGHT_OPTION,
    target: str | None = TARGET_OPTION,
) -> None:
    """Report the size IMAGE would have when fitted into the bounds."""
    state: CliState = ctx.obj
    settings = state.settings
    bound_width, bound_height = _resolve_bounds(settings, max_width, max_height, target)
    try:
        original, fitted = fit_image(image, bound_width, bound_height)
    except GeometryError as exc:
        _fail(str(exc))
    typer.echo(
        f"{image.name}: {format_dimension(original, settings.precision)}"
        f" -> {format_dimension(fitted, settings.precision)}"
    )


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("show")
def show_config(ctx: typer.Context):
    """Print the configured targets."""
    state: CliState = ctx.obj
    settings = state.settings
    for name in sorted(settings.targets):
        marker = " (default)" if name == settings.default_target else ""
        typer.echo(f"{name}: {format_dimension(settings.targets[name], settings.precision)}{marker}")
    typer.echo(f"precision: {settings.precision}")


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
