"""
html2adoc - Convert HTML fragments from documentation comments to AsciiDoc.

Usage:
    from html2adoc import HtmlToAsciiDoc, AsciiDocConfig

    converter = HtmlToAsciiDoc(AsciiDocConfig(bold_delimiter="**"))
    adoc = converter.convert("<p>Enables <b>strict</b> mode.</p>")

    # Or, with the default settings
    from html2adoc import convert

    adoc = convert("<ul><li>one</li><li>two</li></ul>")
"""

__version__ = "1.0.0"

from .conversion import (
    AsciiDocConverter,
    CompositeRenderer,
    HtmlToAsciiDoc,
    NodeRenderer,
    OutputBuffer,
    convert,
)
from .logging_config import configure_logging, setup_logging
from .models.config import AsciiDocConfig, Html2AdocConfig

__all__ = [
    "__version__",
    # Core
    "HtmlToAsciiDoc",
    "convert",
    # Protocols
    "AsciiDocConverter",
    "NodeRenderer",
    # Building blocks
    "CompositeRenderer",
    "OutputBuffer",
    # Config
    "AsciiDocConfig",
    "Html2AdocConfig",
    # Logging
    "setup_logging",
    "configure_logging",
]
