"""Environment-driven configuration for spansink."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any, TypeVar

from .batch_processor import BatchSpanProcessorConfig
from .logger import LogLevel, configure_logger, parse_log_level

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "SPANSINK_LOG_LEVEL"
ENV_MAX_QUEUE_SIZE = "SPANSINK_MAX_QUEUE_SIZE"
ENV_MAX_EXPORT_BATCH_SIZE = "SPANSINK_MAX_EXPORT_BATCH_SIZE"
ENV_SCHEDULED_DELAY_SECONDS = "SPANSINK_SCHEDULED_DELAY_SECONDS"

T = TypeVar("T")


@dataclass
class SpanSinkConfig:
    log_level: LogLevel = LogLevel.WARN
    batch: BatchSpanProcessorConfig = field(default_factory=BatchSpanProcessorConfig)


def _read_env(environ: Mapping[str, str], name: str, parse: Callable[[str], T]) -> T | None:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return parse(raw)
    except ValueError:
        logger.warning(f"Invalid {name} env var: {raw!r}, using default")
        return None


def load_config(environ: Mapping[str, str] | None = None) -> SpanSinkConfig:
    """
    Build a SpanSinkConfig from environment variables.

    Invalid values are logged and replaced by their defaults.
    """
    if environ is None:
        environ = os.environ

    config = SpanSinkConfig()

    log_level = _read_env(environ, ENV_LOG_LEVEL, parse_log_level)
    if log_level is not None:
        config.log_level = log_level

    overrides: dict[str, Any] = {}
    for env_name, attr, parse in (
        (ENV_MAX_QUEUE_SIZE, "max_queue_size", int),
        (ENV_MAX_EXPORT_BATCH_SIZE, "max_export_batch_size", int),
        (ENV_SCHEDULED_DELAY_SECONDS, "scheduled_delay_seconds", float),
    ):
        value = _read_env(environ, env_name, parse)
        if value is not None:
            overrides[attr] = value

    if overrides:
        defaults = {f.name: getattr(config.batch, f.name) for f in fields(config.batch)}
        try:
            config.batch = BatchSpanProcessorConfig(**{**defaults, **overrides})
        except ValueError as e:
            logger.warning(f"Invalid batch processor settings from environment ({e}), using defaults")

    logger.debug(f"Config: {config}")
    return config


def configure_from_env(environ: Mapping[str, str] | None = None) -> SpanSinkConfig:
    """
    Load the config and apply its log level to the package logger.

    load_config alone has no side effects; call this at startup when the
    environment should drive logging.
    """
    config = load_config(environ)
    configure_logger(log_level=config.log_level)
    return config
