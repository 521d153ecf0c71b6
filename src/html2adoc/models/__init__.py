"""Configuration models for html2adoc."""

from .config import AsciiDocConfig, Html2AdocConfig, ParserName

__all__ = [
    "AsciiDocConfig",
    "Html2AdocConfig",
    "ParserName",
]
