"""telelog loggers, events and the per-command spans the engine emits.

Logger output is configured once from ``INDENT_ENGINE_*`` variables:
``LOG_LEVEL`` (default ``WARNING``), ``LOG_FILE``, ``LOG_JSON``,
``DISABLE_CONSOLE`` and ``NO_COLOR``.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from functools import lru_cache
from typing import Any, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "INDENT_ENGINE_"
DEFAULT_LOGGER_NAME = "indent_engine"


def _env_flag(name: str) -> bool:
    return os.getenv(f"{ENV_PREFIX}{name}", "").lower() in {"1", "true", "yes", "on"}


@lru_cache(maxsize=None)
def _config() -> Any:
    config = tl.Config()
    config.with_min_level(os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "WARNING").upper())
    console = not _env_flag("DISABLE_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_flag("NO_COLOR"))
    if _env_flag("LOG_JSON"):
        config.with_json_format(True)
    log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
    if log_file:
        config.with_file_output(log_file)
    # command spans are timed through logger.profile
    config.with_profiling(True)
    return config


@lru_cache(maxsize=None)
def get_logger(name: str = DEFAULT_LOGGER_NAME) -> Any:
    return tl.Logger.with_config(name, _config())


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), value if isinstance(value, str) else repr(value)) for key, value in data.items()]


def _emit(log: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, _pairs(data))
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: str = DEFAULT_LOGGER_NAME,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@contextmanager
def span(
    name: str,
    *,
    logger_name: str = DEFAULT_LOGGER_NAME,
    context: Optional[Dict[str, Any]] = None,
) -> Iterator[Dict[str, Any]]:
    """Time a block under ``name`` with ``context`` bound to the logger.

    Yields a dict the block may add details to. The details are logged at
    debug level when the block finishes, or at error level before an
    exception propagates.
    """

    log = get_logger(logger_name)
    bound = dict(context or {})
    for key, value in _pairs(bound):
        log.add_context(key, value)
    details: Dict[str, Any] = {}
    try:
        with log.profile(name):
            yield details
    except Exception as exc:
        _emit(log, "error", "span::fail", {"span": name, "reason": str(exc), **details})
        raise
    else:
        _emit(log, "debug", "span::done", {"span": name, **details})
    finally:
        for key in bound:
            log.remove_context(str(key))


__all__ = ["ENV_PREFIX", "get_logger", "record_event", "span"]
