"""Typer CLI application."""

from typing import Annotated, Any, Optional

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from color_engine.codec.spec_parser import parse
from color_engine.core.color import Color
from color_engine.core.config import ProtectionLevel


def parse_cli_spec(text: str, protection: Optional[ProtectionLevel] = None) -> Color:
    """
    Parse a spec given on the command line.

    ``key=value`` pairs separated by commas (``r=10,g=20,b=30,a=0.5``)
    become a structured spec; anything else is parsed as a color string.
    """
    if "=" not in text:
        return parse(text, protection)

    fields: dict[str, Any] = {}
    for pair in text.split(","):
        key, _, raw_value = pair.partition("=")
        key = key.strip().lower()
        if not key:
            continue
        try:
            fields[key] = float(raw_value)
        except ValueError:
            fields[key] = raw_value.strip()
    return parse(fields, protection)


def describe(color: Color) -> dict[str, str]:
    """Every text rendering of a color, keyed by format name."""
    return {
        "hex": color.hex(),
        "rgb": color.rgb(),
        "rgba": color.rgba(),
        "hsl": color.hsl(),
        "hsla": color.hsla(),
        "css": color.css(),
        "ansi256": str(color.ansi256_index()),
    }


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: uv pip install color-engine[cli]")

    app = typer.Typer(
        name="color-engine",
        help="Parse colors and render them as CSS strings or terminal escapes.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def load(spec: str, strict: bool) -> Color:
        from color_engine.core.errors import InvalidColorSpec

        try:
            return parse_cli_spec(spec, ProtectionLevel.HARDENED if strict else None)
        except InvalidColorSpec as e:
            console.print(f"[red]{escape(str(e))}[/]")
            raise typer.Exit(1)

    @app.command()
    def show(
        spec: Annotated[str, typer.Argument(help="Color string or r=..,g=..,b=.. pairs")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
        strict: Annotated[bool, typer.Option("--strict", help="Fail on invalid specs instead of using black")] = False,
    ) -> None:
        """Show a color in every supported format."""
        import json

        color = load(spec, strict)
        formats = describe(color)

        if json_output:
            print(json.dumps(formats, indent=2))
            return

        console.print(f"[bold]Color:[/] {escape(spec)}  [on {color.hex()}]      [/]")
        for name, value in formats.items():
            console.print(f"  [bold]{name + ':':<8}[/] {value}")

    @app.command()
    def wrap(
        spec: Annotated[str, typer.Argument(help="Color string or r=..,g=..,b=.. pairs")],
        text: Annotated[str, typer.Argument(help="Text to colorize")],
        background: Annotated[bool, typer.Option("--background", "-b", help="Color the background")] = False,
        use256: Annotated[bool, typer.Option("--use256", help="Use the 256-color palette")] = False,
        bold: Annotated[bool, typer.Option("--bold", help="Bold text")] = False,
        underline: Annotated[bool, typer.Option("--underline", "-u", help="Underline text")] = False,
        strict: Annotated[bool, typer.Option("--strict", help="Fail on invalid specs instead of using black")] = False,
    ) -> None:
        """Print TEXT wrapped in the color's escape sequence."""
        color = load(spec, strict)
        print(color.wrap_ansi(text, background=background, use256=use256, bold=bold, underline=underline))

    @app.command()
    def index(
        spec: Annotated[str, typer.Argument(help="Color string or r=..,g=..,b=.. pairs")],
        strict: Annotated[bool, typer.Option("--strict", help="Fail on invalid specs instead of using black")] = False,
    ) -> None:
        """Print the nearest 256-color palette index."""
        color = load(spec, strict)
        print(color.ansi256_index())

    return app
