"""Main CLI entry point with command routing."""

import sys


def main() -> None:
    """Main CLI entry point."""
    # Check for CLI dependencies
    try:
        from color_engine.cli.app import create_app
        app = create_app()
    except ImportError:
        # Minimal fallback without typer
        _fallback_main()
        return
    app()


def _fallback_main() -> None:
    """Minimal CLI when typer is not installed."""
    args = sys.argv[1:]

    if not args or args[0] in ("-h", "--help"):
        print("color-engine - parse, convert and render colors")
        print()
        print("Install CLI extras for full functionality:")
        print("  uv pip install color-engine[cli]")
        print()
        print("Basic usage:")
        print("  color-engine show SPEC")
        return

    if args[0] == "show" and len(args) > 1:
        from color_engine.cli.app import parse_cli_spec, describe
        color = parse_cli_spec(args[1])
        for name, value in describe(color).items():
            print(f"{name:>6}: {value}")
        return

    print(f"Unknown command: {args[0]}")
    print("Install CLI extras: uv pip install color-engine[cli]")
    sys.exit(1)


if __name__ == "__main__":
    main()
