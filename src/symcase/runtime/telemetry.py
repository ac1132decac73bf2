"""Telemetry helpers layered on loguru.

The rest of the package only touches four entry points:

``configure(...)`` -- install the loguru sinks for a preset or the environment
``get_logger(name)`` -- cached logger bound to a name
``record_event(name, ...)`` -- structured one-off events
``span(name, ...)`` -- timed block, optionally tagged with a component
"""

from __future__ import annotations

import os
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional

from loguru import logger as _root_logger

ENV_PREFIX = "SYMCASE_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "symcase")
CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_SINK_IDS: list[int] = []


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}", default)


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


@dataclass(frozen=True)
class SinkSettings:
    level: str = "INFO"
    console: bool = True
    colorize: bool = True
    serialize: bool = False
    log_file: Optional[str] = None


def _preset_settings(preset: str) -> SinkSettings:
    key = preset.lower()
    if key == "development":
        return SinkSettings(level="DEBUG")
    if key == "quiet":
        # Used by hosts that render their own UI on the terminal.
        return SinkSettings(level="WARNING", console=False, log_file=_env("LOG_FILE"))
    raise ValueError(f"Unknown preset '{preset}'.")


def _env_settings() -> SinkSettings:
    console = not _env_flag("DISABLE_CONSOLE", False)
    return SinkSettings(
        level=(_env("LOG_LEVEL") or "INFO").upper(),
        console=console,
        colorize=console and not _env_flag("NO_COLOR", False),
        serialize=_env_flag("LOG_JSON", False),
        log_file=_env("LOG_FILE"),
    )


def configure(
    *, settings: Optional[SinkSettings] = None, preset: Optional[str] = None
) -> SinkSettings:
    """Replace the sinks installed by this module.

    ``settings`` adopts explicit ``SinkSettings``; ``preset`` builds one of
    the named presets (``"development"`` or ``"quiet"``). Passing neither
    rebuilds the environment-driven default. Sinks added by other code
    are left alone.
    """

    if settings is not None and preset:
        raise ValueError("Provide either `settings` or `preset`, not both.")
    if preset:
        settings = _preset_settings(preset)
    elif settings is None:
        settings = _env_settings()

    while _SINK_IDS:
        try:
            _root_logger.remove(_SINK_IDS.pop())
        except ValueError:
            continue

    if settings.console:
        _SINK_IDS.append(
            _root_logger.add(
                sys.stderr,
                level=settings.level,
                colorize=settings.colorize,
                serialize=settings.serialize,
                format=CONSOLE_FORMAT,
            )
        )
    if settings.log_file:
        _SINK_IDS.append(
            _root_logger.add(
                settings.log_file,
                level=settings.level,
                serialize=settings.serialize,
                format=CONSOLE_FORMAT,
            )
        )
    return settings


def _install_defaults() -> None:
    # loguru ships a stderr sink with id 0; replace it with ours
    _root_logger.configure(extra={"logger_name": DEFAULT_LOGGER_NAME})
    try:
        _root_logger.remove(0)
    except ValueError:
        pass


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached loguru logger with ``logger_name`` bound."""

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = _root_logger.bind(logger_name=logger_name)
    return _LOGGER_CACHE[logger_name]


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    fields = {key: _stringify(value) for key, value in payload.items()}
    logger.bind(**fields).log(str(level).upper(), message)


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` bound as extra fields."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Yielded by ``span`` so callers can attach outcome metadata."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _payload(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        if extra:
            payload.update({key: _stringify(val) for key, val in extra.items()})
        return payload

    def fail(self, reason: str) -> None:
        _emit(self.logger, "error", "span::fail", self._payload({"reason": reason}))

    def finish(self, elapsed_ms: float) -> None:
        _emit(
            self.logger,
            "debug",
            f"span::{self.span_name}",
            self._payload({"elapsed_ms": f"{elapsed_ms:.3f}"}),
        )


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a block and log it at debug level when it completes.

    ``component=True`` reuses ``name`` as the component identifier, a string
    names it explicitly. ``metadata`` is pushed as loguru context for the
    duration of the block and copied onto the handle.
    """

    log = get_logger(logger_name)
    if component is True:
        component_name: Optional[str] = name
    elif isinstance(component, str):
        component_name = component
    else:
        component_name = None

    serialized = {key: _stringify(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata=dict(serialized),
    )
    started = time.perf_counter()
    with _root_logger.contextualize(**serialized):
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc) or type(exc).__name__)
            raise
    handle.finish((time.perf_counter() - started) * 1000.0)


_install_defaults()
configure()
logger = get_logger()

__all__ = [
    "SinkSettings",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
