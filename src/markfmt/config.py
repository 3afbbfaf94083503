"""Format configuration for markfmt.

FormatConfig is an immutable value handed to the renderer and passed
explicitly down the formatting call tree. There is no module-level or
context-local "current config".

Usage:
    from markfmt import FormatConfig, format

    pretty = format(markup, FormatConfig(indent="  "))
    small = format(markup, FormatConfig(minify=True))

    # From a driver's option mapping
    config = FormatConfig.from_dict({"indent": "\\t", "include_comments": False})

"""

from dataclasses import dataclass

from markfmt.errors import ConfigError

# Quote characters an attribute value may be wrapped in
ATTRIBUTE_QUOTES: frozenset[str] = frozenset({'"', "'"})

DEFAULT_INDENT = "   "


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable formatting configuration.

    Attributes:
        indent: Indent unit for one nesting level (default three spaces)
        minify: Drop all indentation and line breaks added by the formatter
        indent_attributes: Put each attribute on its own line
        include_comments: Emit comment nodes
        attribute_quote: Quote written around attribute values

    """

    indent: str = DEFAULT_INDENT
    minify: bool = False
    indent_attributes: bool = False
    include_comments: bool = True
    attribute_quote: str = '"'

    def __post_init__(self) -> None:
        if not isinstance(self.indent, str):
            raise ConfigError("indent", f"expected a string, got {type(self.indent).__name__}")
        if self.attribute_quote not in ATTRIBUTE_QUOTES:
            raise ConfigError(
                "attribute_quote", f"must be one of {sorted(ATTRIBUTE_QUOTES)}, got {self.attribute_quote!r}"
            )

    @property
    def indent_unit(self) -> str:
        """Indent actually applied per level."""
        return "" if self.minify else self.indent

    @property
    def stacks_attributes(self) -> bool:
        """Whether attributes go on their own lines (never when minifying)."""
        return self.indent_attributes and not self.minify

    @property
    def separator(self) -> str:
        """Text placed between stacked lines."""
        return "" if self.minify else "\n"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "FormatConfig":
        """Create FormatConfig from dictionary.

        Only includes keys that are valid FormatConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                FormatConfig attribute names.

        Returns:
            New FormatConfig instance with values from dict.

        Example:
            >>> config = FormatConfig.from_dict({
            ...     "minify": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.minify
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
DEFAULT_CONFIG: FormatConfig = FormatConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "FormatConfig",
]
