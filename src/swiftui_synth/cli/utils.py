"""
swiftui-synth CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import platform
from pathlib import Path

import typer

from swiftui_synth._version import get_version
from swiftui_synth.core.config import SynthConfig, load_config
from swiftui_synth.core.errors import ConfigError


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        typer.echo(f"swiftui-synth version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Architecture:  {platform.machine()}")
        raise typer.Exit()


def read_examples(examples: str | None, examples_file: Path | None) -> tuple[str, Path | None]:
    """
    Resolve example text from exactly one of the inline or file options.

    Returns:
        Tuple of (example text, source file or None)

    Raises:
        typer.Exit: If neither or both options are given, or the file can't be read
    """
    if examples_file is None and examples is not None:
        return examples, None

    if examples_file is None or examples is not None:
        typer.echo("Please provide either --examples or --examples-file", err=True)
        raise typer.Exit(code=1)

    try:
        return examples_file.read_text(encoding="utf-8"), examples_file
    except OSError as e:
        typer.echo(f"Failed to read examples file '{examples_file}': {e}", err=True)
        raise typer.Exit(code=1)


def resolve_config(config: Path | None) -> SynthConfig:
    """Load configuration, exiting with code 1 on errors."""
    try:
        return load_config(config)
    except ConfigError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(code=1)


def setup_logging(config: SynthConfig, verbose: bool = False) -> None:
    """Configure root logging from config, or DEBUG when verbose."""
    level = logging.DEBUG if verbose else config.logging.level_number
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("swiftui_synth").setLevel(level)
