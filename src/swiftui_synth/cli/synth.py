"""
Synthesis commands for the swiftui-synth CLI.

Commands:
- synth: parse, synthesize and render an example to SwiftUI source
- validate: parse an example and report whether it is well-formed
- inspect: show the parsed example and synthesized layout tree
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from swiftui_synth.cli.utils import read_examples, resolve_config, setup_logging
from swiftui_synth.cli_ui import console, layout_tree, print_error, print_info, print_success
from swiftui_synth.core.errors import ParseError, SynthError
from swiftui_synth.core.pipeline import process_example, synthesize_example
from swiftui_synth.core.scanner import parse_example

EXAMPLES_HELP = 'Examples in the format {(width:390,height:844):{title:"Hello",button:"Click"}}'


def synth_command(
    examples: str | None = typer.Option(None, "--examples", "-e", help=EXAMPLES_HELP),
    examples_file: Path | None = typer.Option(  # noqa: B008
        None, "--examples-file", "-f", help="File containing the examples"
    ),
    output: Path | None = typer.Option(  # noqa: B008
        None, "--output", "-o", help="Optional output file to save the synthesized SwiftUI code"
    ),
    config: Path | None = typer.Option(  # noqa: B008
        None, "--config", "-c", help="Path to swiftui-synth.toml"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """
    Synthesize a SwiftUI layout from an example.
    """
    cfg = resolve_config(config)
    setup_logging(cfg, verbose)
    text, source = read_examples(examples, examples_file)

    try:
        result = process_example(text, indent=cfg.render.indent, file=source)
    except ParseError as e:
        typer.echo(f"Failed to parse examples: {e}", err=True)
        raise typer.Exit(code=1)
    except SynthError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if cfg.output.timing:
        typer.echo(f"Synthesized SwiftUI layout in {result.elapsed_display}:")
    typer.echo(result.code, nl=False)

    output_path = output or cfg.output.path
    if output_path is not None:
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            typer.echo(f"Failed to create output file '{output_path}': {e}", err=True)
            raise typer.Exit(code=1)
        print_info(f"Saved SwiftUI layout to {output_path}")


def validate_command(
    examples: str | None = typer.Option(None, "--examples", "-e", help=EXAMPLES_HELP),
    examples_file: Path | None = typer.Option(  # noqa: B008
        None, "--examples-file", "-f", help="File containing the examples"
    ),
) -> None:
    """
    Parse an example and report whether it is well-formed.
    """
    text, source = read_examples(examples, examples_file)

    try:
        example = parse_example(text, source)
    except ParseError as e:
        print_error(f"{e.kind}: {e.message}")
        if e.context:
            typer.echo(e.context.format(), err=True)
        raise typer.Exit(code=1)

    print_success(
        f"Example is valid ({example.width}×{example.height}, "
        f"elements: {', '.join(example.elements.keys()) or 'none'})"
    )


def inspect_command(
    examples: str | None = typer.Option(None, "--examples", "-e", help=EXAMPLES_HELP),
    examples_file: Path | None = typer.Option(  # noqa: B008
        None, "--examples-file", "-f", help="File containing the examples"
    ),
    format: str = typer.Option("tree", "--format", help="Output format: 'tree' or 'json'"),
) -> None:
    """
    Show the parsed example and its synthesized layout tree.
    """
    if format not in ("tree", "json"):
        typer.echo(f"Unknown format: {format}", err=True)
        raise typer.Exit(code=1)

    text, source = read_examples(examples, examples_file)

    try:
        example, layout = synthesize_example(text, source)
    except SynthError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if format == "json":
        payload = {"example": example.model_dump(), "layout": layout.model_dump()}
        typer.echo(json.dumps(payload, indent=2))
    else:
        console.print(layout_tree(example, layout))
