"""Logging setup, called once by the CLI.

Level precedence: CLI flag > GOGETTERS_LOG_LEVEL env var > WARNING.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional


LOG_LEVEL_ENV = "GOGETTERS_LOG_LEVEL"

_FMT_MINIMAL = "%(message)s"
_FMT_VERBOSE = "%(asctime)s [%(name)s] %(message)s"
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_DATEFMT = "%H:%M:%S"


def resolve_level(flag_level: Optional[str] = None) -> str:
	return flag_level or os.environ.get(LOG_LEVEL_ENV) or "WARNING"


def setup_logging(level: Optional[str] = None) -> None:
	numeric_level = _parse_level(resolve_level(level))

	if numeric_level <= logging.DEBUG:
		fmt, datefmt = _FMT_DEBUG, _DATEFMT
	elif numeric_level <= logging.INFO:
		fmt, datefmt = _FMT_VERBOSE, _DATEFMT
	else:
		fmt, datefmt = _FMT_MINIMAL, None

	console = logging.StreamHandler(sys.stderr)
	console.setLevel(numeric_level)
	console.setFormatter(logging.Formatter(fmt, datefmt=datefmt))

	root = logging.getLogger()
	root.handlers.clear()
	root.addHandler(console)
	root.setLevel(numeric_level)


def _parse_level(level: str) -> int:
	numeric = getattr(logging, level.upper(), None)
	if not isinstance(numeric, int):
		return logging.WARNING
	return numeric
