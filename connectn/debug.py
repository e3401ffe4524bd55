"""
debug.py - Diagnostics for the connect-N engine

All modules report through the `debug` singleton defined at the bottom of this
file. Messages carry an optional component tag ("board", "game", "ai", "cli")
so output can be narrowed to one part of the engine, and named timers measure
how long searches take.
"""

import logging
import sys
import time
from contextlib import contextmanager
from enum import Enum
from typing import Dict, Iterable, Iterator, Optional, Set

class DebugLevel(Enum):
    """Verbosity, from silent to per-drop tracing."""
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

# Board drops and search branches log below DEBUG
TRACE = logging.DEBUG - 5
logging.addLevelName(TRACE, "TRACE")

LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: TRACE,
}

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class DebugManager:
    """Level, component and timer bookkeeping in front of a stdlib logger."""

    def __init__(self, name: str = "connectn", level: DebugLevel = DebugLevel.WARNING):
        self._level = level
        self._enabled = True
        self._components: Set[str] = set()  # empty = every component
        self._timers: Dict[str, float] = {}
        self._logger = logging.getLogger(name)
        self._logger.setLevel(LEVEL_MAP[level])
        self._logger.propagate = False
        self._attach_console()

    def _attach_console(self) -> None:
        # A logger shared by several managers keeps a single console handler
        for handler in self._logger.handlers:
            if getattr(handler, "_connectn_console", False):
                return
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
        console._connectn_console = True
        self._logger.addHandler(console)

    def _swap_log_file(self, path: str) -> None:
        for handler in list(self._logger.handlers):
            if isinstance(handler, logging.FileHandler):
                self._logger.removeHandler(handler)
                handler.close()
        if path:
            handler = logging.FileHandler(path)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
            self._logger.addHandler(handler)

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def configure(self, level: Optional[DebugLevel] = None,
                  enabled: Optional[bool] = None,
                  log_file: Optional[str] = None,
                  components: Optional[Iterable[str]] = None):
        """
        Change any subset of the settings; arguments left as None are untouched.

        Args:
            level: New verbosity
            enabled: Master switch for all output
            log_file: Also write to this file ("" stops writing to a file)
            components: Only report these components (empty for all of them)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])
        if enabled is not None:
            self._enabled = enabled
        if log_file is not None:
            self._swap_log_file(log_file)
        if components is not None:
            self._components = set(components)

    def wants(self, level: DebugLevel, component: Optional[str] = None) -> bool:
        """True if a message at this level and component would be emitted."""
        if not self._enabled or level is DebugLevel.NONE or level.value > self._level.value:
            return False
        return not (component and self._components and component not in self._components)

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None):
        if self.wants(level, component):
            text = f"[{component}] {message}" if component else message
            self._logger.log(LEVEL_MAP[level], text)

    def error(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None):
        self.log(DebugLevel.TRACE, message, component)

    def is_tracing(self) -> bool:
        """True when trace output would actually be emitted."""
        return self._enabled and self._level == DebugLevel.TRACE

    def start_timer(self, name: str):
        self._timers[name] = time.perf_counter()

    def end_timer(self, name: str, component: Optional[str] = None) -> Optional[float]:
        """
        Stop a named timer and report the elapsed time at debug level.

        Returns:
            Seconds since start_timer(name), or None if that timer is not running
        """
        started = self._timers.pop(name, None)
        if started is None:
            self.warning(f"Timer '{name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.debug(f"Performance [{name}]: {elapsed:.6f} seconds", component)
        return elapsed

    @contextmanager
    def timed(self, name: str, component: Optional[str] = None) -> Iterator[Dict[str, float]]:
        """
        Time a block; the yielded dict receives 'elapsed' (seconds) on exit.

        Example:
            with debug.timed("search", "ai") as timing:
                search.choose_move(board, token)
            print(timing['elapsed'])
        """
        timing = {'elapsed': 0.0}
        self.start_timer(name)
        try:
            yield timing
        finally:
            timing['elapsed'] = self.end_timer(name, component) or 0.0

    def set_from_string(self, level_str: str) -> bool:
        """Apply a level name such as "debug" or "TRACE" (CLI flags)."""
        level = DebugLevel.__members__.get(level_str.upper())
        if level is None:
            self.warning(f"Unknown debug level '{level_str}', keeping {self._level.name}")
            return False

        self.configure(level=level)
        self.info(f"Debug level set to {level.name}")
        return True


debug = DebugManager()
