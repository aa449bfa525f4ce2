# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration models and validation for sequtils.

Pydantic models validate the raw TOML payload; frozen dataclasses carry the
resolved values at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Final, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sequtils.core.model_types import LogFormat
from sequtils.exceptions import SequtilsValidationError

if TYPE_CHECKING:
    from pathlib import Path

CONFIG_VERSION: Final[int] = 0

LogLevelName = Literal["debug", "info", "warning", "error"]


class ConfigValidationError(SequtilsValidationError):
    """Raised when configuration data contains invalid values."""


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read or parsed."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The path to the configuration file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when a configuration file fails schema validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        self.path = path
        self.error = error
        super().__init__(f"Invalid sequtils configuration in {path}: {error}")


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        """Initialize the exception with version information.

        Args:
            provided: The config_version value provided in the configuration file.
            expected: The config_version value expected by this version of sequtils.
        """
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[logging]`` table.

    Attributes:
        format: Output format for the sequtils log handler.
        level: Minimum level emitted by sequtils loggers.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
    format: LogFormat = LogFormat.TEXT
    level: LogLevelName = "info"

    @field_validator("format", "level", mode="before")
    @classmethod
    def _normalise_case(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class ConfigModel(BaseModel):
    """Pydantic model for the top-level sequtils configuration.

    Attributes:
        config_version: Schema version number for the configuration file.
        logging: Logging configuration settings.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
    config_version: int = Field(default=CONFIG_VERSION)
    logging: LoggingConfigModel = Field(default_factory=LoggingConfigModel)


@dataclass(slots=True, frozen=True)
class LoggingConfig:
    """Resolved logging settings."""

    format: LogFormat = LogFormat.TEXT
    level: LogLevelName = "info"


@dataclass(slots=True, frozen=True)
class Config:
    """Runtime configuration for sequtils."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_from_model(model: ConfigModel) -> Config:
    """Convert a validated ``ConfigModel`` into its runtime dataclass.

    Raises:
        UnsupportedConfigVersionError: If ``config_version`` is not supported.
    """
    if model.config_version != CONFIG_VERSION:
        raise UnsupportedConfigVersionError(model.config_version, CONFIG_VERSION)
    return Config(logging=LoggingConfig(format=model.logging.format, level=model.logging.level))


__all__ = [
    "CONFIG_VERSION",
    "Config",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "InvalidConfigFileError",
    "LoggingConfig",
    "LoggingConfigModel",
    "UnsupportedConfigVersionError",
    "config_from_model",
]
