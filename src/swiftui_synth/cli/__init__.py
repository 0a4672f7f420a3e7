"""
swiftui-synth CLI Package.

- synth.py: synth / validate / inspect commands
- utils.py: Shared utilities (version, input resolution, logging)
"""

import sys

import typer

from swiftui_synth.cli.synth import inspect_command, synth_command, validate_command
from swiftui_synth.cli.utils import get_version, version_callback

app = typer.Typer(
    help="""swiftui-synth – SwiftUI layout synthesis from examples

Example format:
  {(width:390,height:844):{title:"Hello",button:"Click"}}
  {(width:390,height:844):HStack:{"A","Spacer","B"}}
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """swiftui-synth CLI main callback for global options."""
    pass


app.command(name="synth")(synth_command)
app.command(name="validate")(validate_command)
app.command(name="inspect")(inspect_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = [
    "app",
    "main",
    "get_version",
    "version_callback",
]


if __name__ == "__main__":
    main(sys.argv[1:])
