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

"""Structured logging utilities shared across sequtils components."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Final, Literal, cast

from sequtils._internal.precedence import resolve_with_precedence
from sequtils.compat import UTC, TypedDict, Unpack, override
from sequtils.core.model_types import LogComponent, LogFormat
from sequtils.json import normalize_enums_for_json

if TYPE_CHECKING:
    from sequtils.config import Config

ROOT_LOGGER_NAME: Final[str] = "sequtils"
LOG_FORMAT_ENV: Final[str] = "SEQUTILS_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "SEQUTILS_LOG_LEVEL"

LOG_FORMATS: Final[tuple[Literal["text", "json"], ...]] = cast(
    "tuple[Literal['text', 'json'], ...]",
    tuple(format_.value for format_ in LogFormat),
)
LOG_LEVELS: Final[tuple[Literal["debug", "info", "warning", "error"], ...]] = (
    "debug",
    "info",
    "warning",
    "error",
)
STRUCTURED_FIELDS: Final[tuple[str, ...]] = (
    "component",
    "operation",
    "size",
    "position",
    "count",
    "details",
)
CHILD_LOGGERS: Final[tuple[str, ...]] = (
    "sequtils.collections",
    "sequtils.arraylist",
    "sequtils.config",
)


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Resolved logging configuration for diagnostics and debugging."""

    format: LogFormat
    level: int
    level_name: str


class JSONLogFormatter(logging.Formatter):
    """Render log records as structured JSON objects."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON string.

        Args:
            record: Log record to serialise.

        Returns:
            JSON-formatted string containing standard and structured fields.
        """
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "logger": record.name,
        }
        for field in STRUCTURED_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(normalize_enums_for_json(payload), ensure_ascii=False)


class TextLogFormatter(logging.Formatter):
    """Readable, single-line formatter."""

    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")


def _coerce_log_format(log_format: LogFormat | str) -> LogFormat:
    if isinstance(log_format, LogFormat):
        return log_format
    return LogFormat.from_str(log_format)


def _coerce_log_level(level: str | int) -> tuple[int, str]:
    if isinstance(level, int):
        return level, logging.getLevelName(level).lower()
    value = str(level).strip().lower()
    match value:
        case "debug":
            return logging.DEBUG, "debug"
        case "warning":
            return logging.WARNING, "warning"
        case "error":
            return logging.ERROR, "error"
        case _:
            return logging.INFO, "info"


def _configure_handler(log_format: LogFormat) -> logging.Handler:
    handler = logging.StreamHandler()
    if log_format is LogFormat.JSON:
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(TextLogFormatter())
    return handler


def _apply_child_levels(level: int, children: Iterable[str]) -> None:
    for child in children:
        logging.getLogger(child).setLevel(level)


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: str | int | None = None,
    config: Config | None = None,
) -> LogConfig:
    """Configure sequtils logging according to the requested format and level.

    The library never calls this on import; applications opt in.

    Args:
        log_format: Desired log output format. ``None`` falls back to the
            ``SEQUTILS_LOG_FORMAT`` environment variable, then ``config``,
            then ``text``.
        log_level: Preferred verbosity (string or numeric). ``None`` consults
            ``SEQUTILS_LOG_LEVEL``, then ``config``, then ``info``.
        config: Optional loaded configuration supplying file-level defaults.

    Returns:
        A ``LogConfig`` describing the selected formatter and resolved numeric
        log level, which is also applied to the root and child loggers.
    """
    config_format = config.logging.format if config is not None else None
    config_level = config.logging.level if config is not None else None
    selected_format = _coerce_log_format(
        resolve_with_precedence(
            explicit_value=log_format,
            env_value=os.getenv(LOG_FORMAT_ENV) or None,
            config_value=config_format,
            default=LogFormat.TEXT,
        ),
    )
    level_value, level_name = _coerce_log_level(
        resolve_with_precedence(
            explicit_value=log_level,
            env_value=os.getenv(LOG_LEVEL_ENV) or None,
            config_value=config_level,
            default="info",
        ),
    )

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(_configure_handler(selected_format))
    root_logger.setLevel(level_value)
    root_logger.propagate = False

    _apply_child_levels(level_value, CHILD_LOGGERS)
    return LogConfig(format=selected_format, level=level_value, level_name=level_name)


class _StructuredLogBase(TypedDict):
    component: LogComponent


class StructuredLogExtra(_StructuredLogBase, total=False):
    """Structured logging extras accepted by sequtils log records."""

    operation: str
    size: int
    position: int
    count: int
    details: Mapping[str, object]


class _StructuredLogKwargs(TypedDict, total=False):
    operation: str
    size: int
    position: int
    count: int
    details: Mapping[str, object]


def structured_extra(
    component: LogComponent,
    **kwargs: Unpack[_StructuredLogKwargs],
) -> StructuredLogExtra:
    """Return a consistently typed ``logging.extra`` payload.

    Args:
        component: Logical logging component for the record.
        **kwargs: Optional structured fields (operation, size, position, count, details).

    Returns:
        Mapping suitable for the ``extra`` parameter when emitting log records.
    """
    extra: StructuredLogExtra = {"component": component}
    payload_kwargs = cast("dict[str, object]", kwargs)
    operation = payload_kwargs.get("operation")
    if operation is not None:
        extra["operation"] = str(operation)
    for key in ("size", "position", "count"):
        value = payload_kwargs.get(key)
        if value is not None:
            cast("dict[str, object]", extra)[key] = int(cast("int", value))
    details = payload_kwargs.get("details")
    if isinstance(details, Mapping) and details:
        extra["details"] = dict(cast("Mapping[str, object]", details))
    return extra


__all__ = [
    "LOG_FORMATS",
    "LOG_LEVELS",
    "LogConfig",
    "StructuredLogExtra",
    "configure_logging",
    "structured_extra",
]
