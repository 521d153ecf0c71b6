"""Command-line interface for html2adoc."""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Check if --doctor flag is present before checking dependencies
if "--doctor" in sys.argv:
    from .doctor import run_doctor

    sys.exit(run_doctor())

# Verify core dependencies
try:
    import bs4  # noqa: F401
    import html5lib  # noqa: F401
    import pydantic  # noqa: F401
    import rich  # noqa: F401
    import yaml  # noqa: F401
except ImportError as e:
    print(f"\nERROR: Missing required dependency: {e.name}", file=sys.stderr)
    print("\nhtml2adoc requires all core dependencies to be installed.", file=sys.stderr)
    print("\nRecommended fixes:", file=sys.stderr)
    print("  1. For pip users: pip install --upgrade --force-reinstall html2adoc", file=sys.stderr)
    print("  2. For development: pip install -e .[dev]", file=sys.stderr)
    print("\nTo diagnose issues, run: html2adoc --doctor", file=sys.stderr)
    sys.exit(1)

from rich.console import Console
from rich.markup import escape

from . import __version__
from .conversion import HtmlToAsciiDoc
from .logging_config import configure_logging
from .models.config import AsciiDocConfig, Html2AdocConfig

STDIN_MARKER = "-"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="html2adoc",
        description="Convert HTML fragments from documentation comments to AsciiDoc",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert a file and print the AsciiDoc
  html2adoc description.html

  # Read from stdin
  echo '<p>Hello <b>world</b></p>' | html2adoc

  # Write several fragments to one file
  html2adoc intro.html usage.html -o goals.adoc

  # Unconstrained emphasis and plain line breaks
  html2adoc notes.html --bold '**' --italic '__' --no-hard-breaks
        """,
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="FILE",
        help="HTML files to convert ('-' or none reads stdin)",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--doctor",
        action="store_true",
        help="Run diagnostic checks",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="YAML",
        help="Configuration file",
    )

    # Formatting
    format_group = parser.add_argument_group("formatting")
    format_group.add_argument(
        "--parser",
        choices=["html5lib", "lxml", "html.parser"],
        default=None,
        help="HTML parser backend (default: html5lib)",
    )
    format_group.add_argument(
        "--bold",
        default=None,
        metavar="DELIM",
        help="Delimiter for bold text (default: *)",
    )
    format_group.add_argument(
        "--italic",
        default=None,
        metavar="DELIM",
        help="Delimiter for italic text (default: _)",
    )
    format_group.add_argument(
        "--no-hard-breaks",
        action="store_true",
        help="Render <br> as a plain newline",
    )

    # Output control
    output_group = parser.add_argument_group("output control")
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Verbose output",
    )
    output_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress output",
    )

    return parser


def build_config(args: argparse.Namespace) -> Html2AdocConfig:
    """
    Build the configuration from an optional YAML file and CLI overrides.

    Raises:
        OSError: If the config file cannot be read
        ValueError: If a setting is invalid
    """
    config = Html2AdocConfig.from_yaml_file(args.config) if args.config else Html2AdocConfig()

    asciidoc_kwargs: dict = {}
    if args.parser:
        asciidoc_kwargs["parser"] = args.parser
    if args.bold is not None:
        asciidoc_kwargs["bold_delimiter"] = args.bold
    if args.italic is not None:
        asciidoc_kwargs["italic_delimiter"] = args.italic
    if args.no_hard_breaks:
        asciidoc_kwargs["hard_line_breaks"] = False

    update: dict = {}
    if asciidoc_kwargs:
        update["asciidoc"] = AsciiDocConfig(**{**config.asciidoc.model_dump(), **asciidoc_kwargs})

    # Log level
    if args.verbose:
        update["log_level"] = "DEBUG"
    elif args.quiet:
        update["log_level"] = "ERROR"

    return config.model_copy(update=update) if update else config


def read_source(source: str) -> str:
    """Read HTML from a file path, or stdin for '-'."""
    if source == STDIN_MARKER:
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def run_converter(args: argparse.Namespace) -> int:
    """Run the converter with given arguments."""
    # Status goes to stderr; stdout carries the AsciiDoc
    console = Console(stderr=True)

    try:
        config = build_config(args)
    except Exception as e:
        console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        return 1

    configure_logging(config)

    converter = HtmlToAsciiDoc(config.asciidoc)
    sources = args.inputs or [STDIN_MARKER]

    results = []
    for source in sources:
        try:
            text = read_source(source)
        except OSError as e:
            console.print(f"[red]Error:[/red] Cannot read {escape(source)}: {escape(str(e))}")
            return 1

        try:
            results.append(converter.convert(text))
        except Exception as e:
            console.print(f"[red]Error:[/red] Failed to convert {escape(source)}: {escape(str(e))}")
            if args.verbose:
                import traceback

                traceback.print_exc()
            return 1

    output = "\n".join(results)

    if args.output is None:
        sys.stdout.write(output)
        return 0

    try:
        args.output.write_text(output, encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Error:[/red] Cannot write {escape(str(args.output))}: {escape(str(e))}")
        return 1

    if not args.quiet:
        console.print(f"[green]Converted[/green] {len(sources)} input(s) to {args.output}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.doctor:
        from .doctor import run_doctor

        return run_doctor()

    return run_converter(args)


if __name__ == "__main__":
    sys.exit(main())
