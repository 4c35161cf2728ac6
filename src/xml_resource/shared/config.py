"""Configuration classes for XML resource editing.

This module provides configuration objects for file I/O, the edit driver and
the session as a whole, with validation on construction and JSON loading.
"""

import codecs
import json
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

VALID_LOGGING_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
COMPONENT_FIELDS = ("io", "edit")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.field_name = field_name


@dataclass
class IOConfig:
    """Codec settings used when moving buffer text to and from storage."""

    encoding: str = "utf-8"
    errors: str = "surrogateescape"

    def __post_init__(self) -> None:
        """Validate codec and error handler names."""
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding}") from e
        try:
            codecs.lookup_error(self.errors)
        except LookupError as e:
            raise ValueError(f"Unknown error handler: {self.errors}") from e

    @classmethod
    def raw(cls) -> "IOConfig":
        """Byte-preserving configuration: undecodable bytes survive a round trip."""
        return cls()

    @classmethod
    def strict(cls) -> "IOConfig":
        """Reject content that is not valid in the configured encoding."""
        return cls(errors="strict")


@dataclass
class EditConfig:
    """Settings for the find/insert/erase driver flow."""

    target_name: str = "li"
    new_element: str = "<new_element>Content</new_element>"

    def __post_init__(self) -> None:
        """Validate edit configuration."""
        if not self.target_name:
            raise ValueError("target_name cannot be empty")


@dataclass
class ResourceConfig:
    """Complete configuration for an edit session."""

    io: IOConfig = field(default_factory=IOConfig)
    edit: EditConfig = field(default_factory=EditConfig)
    input_path: str = "tree.xml"
    output_path: str = "new_tree.xml"
    correlation_id: Optional[str] = None
    logging_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate session configuration."""
        if self.logging_level not in VALID_LOGGING_LEVELS:
            raise ValueError(f"logging_level must be one of {list(VALID_LOGGING_LEVELS)}")
        if not self.input_path:
            raise ValueError("input_path cannot be empty")
        if not self.output_path:
            raise ValueError("output_path cannot be empty")

    def override(self, **kwargs: Any) -> "ResourceConfig":
        """Create a new configuration with specific overrides.

        Nested component fields use double-underscore notation.

        Example:
            >>> config = ResourceConfig()
            >>> config.override(io__errors="strict", output_path="out.xml").io.errors
            'strict'
        """
        nested_overrides: Dict[str, Dict[str, Any]] = {}
        top_level: Dict[str, Any] = {}
        for key, value in kwargs.items():
            if "__" in key:
                component, field_name = key.split("__", 1)
                if component not in COMPONENT_FIELDS:
                    raise ConfigValidationError(
                        f"Unknown configuration component: {component}", component
                    )
                nested_overrides.setdefault(component, {})[field_name] = value
            else:
                top_level[key] = value

        try:
            for component, values in nested_overrides.items():
                top_level[component] = replace(getattr(self, component), **values)
            return replace(self, **top_level)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {
            "io": {"encoding": self.io.encoding, "errors": self.io.errors},
            "edit": {
                "target_name": self.edit.target_name,
                "new_element": self.edit.new_element,
            },
            "input_path": self.input_path,
            "output_path": self.output_path,
            "correlation_id": self.correlation_id,
            "logging_level": self.logging_level,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResourceConfig":
        """Build a configuration from a plain dictionary.

        Raises:
            ConfigValidationError: If a key is unknown or a value is invalid
        """
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration must be a JSON object")
        values = dict(data)
        try:
            if "io" in values:
                values["io"] = IOConfig(**values["io"])
            if "edit" in values:
                values["edit"] = EditConfig(**values["edit"])
            return cls(**values)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(str(e)) from e

    @classmethod
    def from_json(cls, payload: str) -> "ResourceConfig":
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ConfigValidationError(f"Invalid JSON configuration: {e}") from e
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "ResourceConfig":
        """Load configuration from a JSON file.

        Raises:
            ConfigError: If the file cannot be read
            ConfigValidationError: If its content is not a valid configuration
        """
        path_obj = Path(config_path)
        try:
            payload = path_obj.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not read config file {path_obj}: {e}") from e
        return cls.from_json(payload)
