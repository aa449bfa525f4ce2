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

"""Configuration loading for sequtils.

Supports standalone ``sequtils.toml`` / ``.sequtils.toml`` files and a
``[tool.sequtils]`` table in ``pyproject.toml``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from sequtils._internal.logging_utils import structured_extra
from sequtils.compat import tomllib
from sequtils.core.model_types import LogComponent

from .models import Config, ConfigModel, ConfigReadError, InvalidConfigFileError, config_from_model

logger = logging.getLogger("sequtils.config")

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("sequtils.toml", ".sequtils.toml", "pyproject.toml")


@dataclass(slots=True, frozen=True)
class LoadedConfig:
    """Container for a loaded configuration and its source path.

    Attributes:
        config: Parsed configuration instance.
        path: Filesystem path the configuration was loaded from, or None when
            defaults are used.
    """

    config: Config
    path: Path | None


def load_config(explicit_path: Path | None = None) -> Config:
    """Load sequtils configuration from a TOML file or use defaults.

    Args:
        explicit_path: Optional explicit path to a configuration file. If provided,
            only this file will be checked. If None, standard locations are searched.

    Returns:
        The resolved runtime ``Config``.
    """
    return load_config_with_metadata(explicit_path).config


def load_config_with_metadata(
    explicit_path: Path | None = None,
    *,
    search_dir: Path | None = None,
) -> LoadedConfig:
    """Load sequtils configuration with metadata about the source file.

    When ``explicit_path`` is None the files in ``CONFIG_FILENAMES`` are
    searched in order inside ``search_dir`` (default: the working directory);
    the first one that carries sequtils configuration wins. A ``pyproject.toml``
    without a ``[tool.sequtils]`` table is skipped.

    Raises:
        ConfigReadError: If a candidate file cannot be read or parsed.
        InvalidConfigFileError: If a candidate file fails schema validation.
        UnsupportedConfigVersionError: If ``config_version`` is not supported.
    """
    if explicit_path is not None:
        candidates = [_resolve_candidate_path(explicit_path)]
    else:
        base_dir = search_dir if search_dir is not None else Path.cwd()
        candidates = [base_dir / name for name in CONFIG_FILENAMES]

    for candidate in candidates:
        loaded = _load_candidate_config(candidate)
        if loaded is not None:
            logger.debug(
                "Loaded configuration from %s",
                loaded.path,
                extra=structured_extra(component=LogComponent.CONFIG, operation="load"),
            )
            return loaded
    return LoadedConfig(config=Config(), path=None)


def _resolve_candidate_path(candidate: Path) -> Path:
    return candidate if candidate.is_absolute() else (Path.cwd() / candidate).resolve()


def _load_candidate_config(candidate: Path) -> LoadedConfig | None:
    if not candidate.is_file():
        return None
    try:
        raw_map: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(candidate, exc) from exc

    payload = _extract_sequtils_payload(candidate, raw_map)
    if payload is None:
        return None
    try:
        model = ConfigModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigFileError(candidate, exc) from exc
    return LoadedConfig(config=config_from_model(model), path=candidate.resolve())


def _extract_sequtils_payload(candidate: Path, raw_map: dict[str, object]) -> dict[str, object] | None:
    if candidate.name != "pyproject.toml":
        return raw_map
    tool_section = raw_map.get("tool")
    if not isinstance(tool_section, dict):
        return None
    section = cast("dict[str, object]", tool_section).get("sequtils")
    if section is None:
        return None
    if not isinstance(section, dict):
        raise InvalidConfigFileError(candidate, ValueError("[tool.sequtils] must be a TOML table"))
    return cast("dict[str, object]", section)


__all__ = ["CONFIG_FILENAMES", "LoadedConfig", "load_config", "load_config_with_metadata"]
