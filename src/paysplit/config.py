from __future__ import annotations

from dataclasses import dataclass
import os
import sys
from typing import Literal

from loguru import logger

LogFormat = Literal["text", "json"]

LOG_LEVELS = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
)


@dataclass(frozen=True, slots=True)
class OptimizerConfig:
    """Optimizer settings loaded at process startup."""

    log_level: str = "WARNING"
    log_format: LogFormat = "text"
    max_orders: int | None = None


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(
            f"PAYSPLIT_LOG_LEVEL must be one of: {', '.join(sorted(LOG_LEVELS))}"
        )
    return level


def load_optimizer_config_from_env() -> OptimizerConfig:
    """Load optimizer config from env and validate it."""
    log_level = _parse_log_level(os.environ.get("PAYSPLIT_LOG_LEVEL", "WARNING"))

    log_format = os.environ.get("PAYSPLIT_LOG_FORMAT", "text").strip().lower()
    if log_format not in {"text", "json"}:
        raise ValueError("PAYSPLIT_LOG_FORMAT must be one of: text, json")

    max_orders: int | None = None
    max_orders_value = os.environ.get("PAYSPLIT_MAX_ORDERS", "").strip()
    if max_orders_value:
        try:
            max_orders = int(max_orders_value)
        except ValueError:
            raise ValueError("PAYSPLIT_MAX_ORDERS must be an integer") from None
        if max_orders <= 0:
            raise ValueError("PAYSPLIT_MAX_ORDERS must be positive")

    return OptimizerConfig(
        log_level=log_level,
        log_format=log_format,  # type: ignore[arg-type]
        max_orders=max_orders,
    )


def with_log_level(config: OptimizerConfig, log_level: str | None) -> OptimizerConfig:
    """Return config with a command-line log level applied, if given."""
    if log_level is None:
        return config
    return OptimizerConfig(
        log_level=_parse_log_level(log_level),
        log_format=config.log_format,
        max_orders=config.max_orders,
    )


def configure_logging(config: OptimizerConfig) -> None:
    """Send loguru output to stderr; stdout carries the report."""
    logger.remove()
    if config.log_format == "json":
        logger.add(sys.stderr, level=config.log_level, serialize=True)
    else:
        logger.add(
            sys.stderr,
            format="{time:YYYY-MM-DD HH:mm:ss} [{level}] {name}: {message}",
            level=config.log_level,
        )
