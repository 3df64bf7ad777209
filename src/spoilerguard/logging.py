"""
structlog setup for tools built on the engine.

The library modules only call structlog.get_logger(__name__); nothing is configured
on import. Scripts call configure_logging() once at startup. Rendered events go
through the stdlib logger of the same name, so the logger name lands in each event.
"""

from __future__ import annotations

import logging

import structlog

from spoilerguard.config import LoggingCfg


def _normalize_log_level(level: str | None) -> int:
    normalized = (level or "INFO").strip().upper()
    return logging._nameToLevel.get(normalized, logging.INFO)


def configure_logging(cfg: LoggingCfg | None = None) -> None:
    cfg = cfg or LoggingCfg()
    resolved_level = _normalize_log_level(cfg.level)
    renderer = (
        structlog.processors.JSONRenderer()
        if cfg.renderer == "json"
        else structlog.dev.ConsoleRenderer()
    )
    logging.basicConfig(level=resolved_level)
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolved_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
