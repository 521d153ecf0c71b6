"""Pydantic configuration models for html2adoc."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

ParserName = Literal["html5lib", "lxml", "html.parser"]


class AsciiDocConfig(BaseModel):
    """
    Configuration for the AsciiDoc markup emitted by the converter.

    The defaults produce constrained AsciiDoc formatting. Use doubled
    delimiters (``**``, ``__``) for unconstrained emphasis when spans may
    touch word characters.
    """

    bold_delimiter: str = Field("*", min_length=1, description="Delimiter wrapping <b>/<strong> spans")
    italic_delimiter: str = Field("_", min_length=1, description="Delimiter wrapping <i>/<em> spans")
    inline_code_delimiter: str = Field("`", min_length=1, description="Delimiter wrapping inline <code> spans")
    listing_delimiter: str = Field("----", min_length=1, description="Delimiter line around <pre> blocks")
    hard_line_breaks: bool = Field(
        True,
        description="Render <br> as an AsciiDoc hard line break (' +') instead of a plain newline",
    )
    parser: ParserName = Field(
        "html5lib",
        description="BeautifulSoup tree builder; html5lib closes omitted end tags like a browser",
    )

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator(
        "bold_delimiter",
        "italic_delimiter",
        "inline_code_delimiter",
        "listing_delimiter",
    )
    @classmethod
    def _no_whitespace(cls, v: str) -> str:
        if any(ch.isspace() for ch in v):
            raise ValueError(f"Delimiter must not contain whitespace: {v!r}")
        return v


class Html2AdocConfig(BaseModel):
    """
    Root configuration model for html2adoc.

    Example:
        config = Html2AdocConfig(
            asciidoc=AsciiDocConfig(bold_delimiter="**"),
            log_level="DEBUG",
        )

    YAML format:
        asciidoc:
          bold_delimiter: "**"
          hard_line_breaks: false
        log_level: DEBUG
    """

    asciidoc: AsciiDocConfig = Field(default_factory=AsciiDocConfig)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        "INFO",
        description="Logging level",
    )
    log_file: Optional[Path] = Field(None, description="Log file path")

    model_config = {"extra": "forbid"}

    def to_yaml(self) -> str:
        """Serialize config to YAML string."""
        import yaml

        return yaml.dump(self.model_dump(mode="json", exclude_none=True), default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "Html2AdocConfig":
        """Load config from YAML string."""
        import yaml

        data = yaml.safe_load(yaml_str) or {}
        return cls.model_validate(data)

    @classmethod
    def from_yaml_file(cls, path: Path) -> "Html2AdocConfig":
        """Load config from YAML file."""
        return cls.from_yaml(path.read_text())
