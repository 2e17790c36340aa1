"""
Pydantic models for settings validation.

Provides schema validation and type checking for clipcopy settings files.
"""

import codecs
import os
from typing import List, Optional, Tuple
from enum import Enum
from pydantic import BaseModel, Field, field_validator, ConfigDict

from .exceptions import ConfigurationError


DEFAULT_EXTENSIONS = (
    ".js", ".jsx", ".ts", ".tsx", ".json", ".css", ".scss", ".md", ".txt", ".env",
)


class SectionStyle(str, Enum):
    """Supported section layouts."""
    HEADER = "header"
    RULE = "rule"


class SettingsConfig(BaseModel):
    """Root schema of a clipcopy settings file."""
    model_config = ConfigDict(extra='forbid')

    allowed_extensions: List[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS),
        description="Extensions included when walking directories",
    )
    style: SectionStyle = Field(SectionStyle.HEADER, description="Section layout")
    separator_length: int = Field(46, ge=1, description="Header line width target")
    rule_width: int = Field(80, ge=1, description="Rule style width")
    bold_names: bool = Field(False, description="Bold file names in section headers")
    default_mode: str = Field("append", description="Mode used when no flag is given")
    encoding: str = Field("utf-8", description="Encoding used to read files")

    @field_validator('allowed_extensions', mode='before')
    @classmethod
    def normalize_extensions(cls, v):
        """Accept a single string and ensure every extension is dotted lowercase."""
        if isinstance(v, str):
            v = [v]
        if v is None:
            return []
        normalized = []
        for ext in v:
            if not isinstance(ext, str) or not ext.strip(" ."):
                raise ValueError(f"Invalid extension: {ext!r}")
            ext = ext.strip().lower()
            if not ext.startswith("."):
                ext = "." + ext
            if ext not in normalized:
                normalized.append(ext)
        return normalized

    @field_validator('default_mode')
    @classmethod
    def validate_default_mode(cls, v):
        if v not in ("fresh", "append"):
            raise ValueError(f"default_mode must be 'fresh' or 'append', got '{v}'")
        return v

    @field_validator('encoding')
    @classmethod
    def validate_encoding(cls, v):
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v}")
        return v


class ConfigValidator:
    """Loads and validates settings files, collecting every error."""

    def __init__(self, config_path: str):
        self.config_path = os.path.abspath(os.path.expanduser(config_path))

    def load_data(self) -> dict:
        import yaml

        if not os.path.isfile(self.config_path):
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        try:
            with open(self.config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Settings file must contain a mapping",
                context={"path": self.config_path},
            )
        return data

    def validate_config_file(self) -> SettingsConfig:
        """
        Validate the settings file and return the parsed settings.

        Raises:
            ConfigurationError: If settings are invalid (includes all validation errors)
            FileNotFoundError: If the file doesn't exist
        """
        from pydantic import ValidationError as PydanticValidationError

        data = self.load_data()
        try:
            return SettingsConfig(**data)
        except PydanticValidationError as e:
            errors = []
            for error in e.errors():
                loc = " -> ".join(str(l) for l in error['loc'])
                errors.append(f"{loc}: {error['msg']}")
            raise ConfigurationError(
                "Configuration validation failed",
                context={"errors": errors, "path": self.config_path},
            )

    def validate_all(self) -> Tuple[SettingsConfig, List[str]]:
        """
        Validate settings and collect non-fatal warnings.

        Returns:
            Tuple of (settings, warnings)
        """
        settings = self.validate_config_file()
        warnings = []

        if not settings.allowed_extensions:
            warnings.append("allowed_extensions is empty: directories will contribute no files")
        if settings.style == SectionStyle.RULE and settings.bold_names:
            warnings.append("bold_names has no effect with the 'rule' style")

        return settings, warnings


def find_config_path(explicit: Optional[str] = None) -> Optional[str]:
    """Return the settings file to load: explicit, $CLIPCOPY_CONFIG, then ~/.clipcopy.yaml."""
    if explicit:
        return explicit
    env_path = os.environ.get("CLIPCOPY_CONFIG")
    if env_path:
        return env_path
    home_path = os.path.join(os.path.expanduser("~"), ".clipcopy.yaml")
    if os.path.isfile(home_path):
        return home_path
    return None
