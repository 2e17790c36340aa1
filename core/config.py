# core/config.py
import os
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .models import Mode
from .validation import (
    DEFAULT_EXTENSIONS,
    ConfigValidator,
    SectionStyle,
    SettingsConfig,
    find_config_path,
)


DOTFILE_NAMES = (".env",)


@dataclass(frozen=True)
class Config:
    """Immutable settings handed to the resolver and formatter."""
    allowed_extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    style: SectionStyle = SectionStyle.HEADER
    separator_length: int = 46
    rule_width: int = 80
    bold_names: bool = False
    default_mode: Mode = Mode.APPEND
    encoding: str = "utf-8"
    source: Optional[str] = None  # settings file this was loaded from

    @classmethod
    def from_settings(cls, settings: SettingsConfig, source: str = None):
        return cls(
            allowed_extensions = tuple(settings.allowed_extensions),
            style              = settings.style,
            separator_length   = settings.separator_length,
            rule_width         = settings.rule_width,
            bold_names         = settings.bold_names,
            default_mode       = Mode(settings.default_mode),
            encoding           = settings.encoding,
            source             = source,
        )

    @classmethod
    def load(cls, path: str = None):
        """Load settings from path, $CLIPCOPY_CONFIG or ~/.clipcopy.yaml; defaults otherwise."""
        found = find_config_path(path)
        if not found:
            return cls()
        validator = ConfigValidator(found)
        return cls.from_settings(validator.validate_config_file(), source=validator.config_path)

    def with_overrides(self, style=None):
        if style is None:
            return self
        return replace(self, style=SectionStyle(style))

    def is_allowed(self, filename: str) -> bool:
        """Extension check used while walking directories (case-insensitive)."""
        lowered = filename.lower()
        ext = os.path.splitext(lowered)[1]
        if ext:
            return ext in self.allowed_extensions
        # ".env" has no extension of its own; match such dot-files by name
        return lowered in DOTFILE_NAMES and lowered in self.allowed_extensions
