"""Diagnostic tool for verifying html2adoc installation and dependencies."""

import sys
from importlib import import_module
from typing import Optional

from rich.console import Console
from rich.table import Table

SMOKE_INPUT = "<p><b>bold</b> <i>italic</i></p><ul><li>item</li></ul>"
SMOKE_EXPECTED = ("*bold*", "_italic_", "* item")


def check_dependency(
    module_name: str, package_name: Optional[str] = None, optional: bool = False
) -> tuple[bool, str]:
    """
    Check if a Python module is importable.

    Args:
        module_name: Name of the module to import
        package_name: Display name of the package (defaults to module_name)
        optional: Whether this is an optional dependency

    Returns:
        Tuple of (success: bool, message: str)
    """
    display_name = package_name or module_name

    try:
        import_module(module_name)
        return True, f"[OK] {display_name}"
    except ImportError:
        if optional:
            return False, f"[WARN] {display_name} (optional - not installed)"
        else:
            return False, f"[MISSING] {display_name}"


def check_conversion() -> tuple[bool, str]:
    """
    Run a small conversion with the default settings.

    Returns:
        Tuple of (success: bool, message: str)
    """
    try:
        from .conversion import convert

        result = convert(SMOKE_INPUT)
    except Exception as e:
        return False, f"[FAIL] Sample conversion - {e}"

    missing = [fragment for fragment in SMOKE_EXPECTED if fragment not in result]
    if missing:
        return False, f"[FAIL] Sample conversion - missing {', '.join(missing)}"
    return True, "[OK] Sample conversion"


def run_doctor(console: Optional[Console] = None) -> int:
    """
    Run diagnostic checks and display results.

    Args:
        console: Console to print to (stdout if None)

    Returns:
        Exit code (0 if all core checks pass, 1 otherwise)
    """
    console = console or Console()
    console.print("Running html2adoc diagnostics...\n")

    core_checks = [
        ("bs4", "beautifulsoup4"),
        ("html5lib", "html5lib"),
        ("pydantic", "pydantic"),
        ("yaml", "pyyaml"),
        ("rich", "rich"),
    ]

    # Alternative BeautifulSoup tree builders
    optional_checks = [
        ("lxml", "lxml", True),
    ]

    core_results = [check_dependency(mod, pkg) for mod, pkg in core_checks]
    optional_results = [check_dependency(mod, pkg, opt) for mod, pkg, opt in optional_checks]
    system_results = [check_conversion()]

    all_checks = {
        "Core Dependencies": core_results,
        "Optional Parsers": optional_results,
        "System": system_results,
    }

    for category, results in all_checks.items():
        table = Table(title=category, show_header=False, box=None)
        table.add_column("Status", style="bold")

        for success, message in results:
            style = "green" if success else ("yellow" if "optional" in message else "red")
            table.add_row(message, style=style)

        console.print(table)
        console.print()

    core_failed = any(not success for success, _ in core_results + system_results)

    if core_failed:
        console.print("WARNING: Some core checks failed!")
        console.print("\nRecommended fixes:")
        console.print("  1. For pip users: pip install --upgrade --force-reinstall html2adoc")
        console.print("  2. For development: pip install -e .[dev]", markup=False)
        return 1

    console.print("All core dependencies installed correctly!")

    optional_missing = [msg for success, msg in optional_results if not success]
    if optional_missing:
        console.print("\nOptional features available:")
        console.print("  - lxml parser: pip install html2adoc[parsers]", markup=False)

    return 0


if __name__ == "__main__":
    sys.exit(run_doctor())
