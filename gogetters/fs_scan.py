from __future__ import annotations

import logging
import os
import re
from typing import Iterable, List, Optional

from .config import DEFAULT_OUTPUT_SUFFIX, DEFAULT_SKIP_DIRS


logger = logging.getLogger(__name__)

GO_EXTENSION = ".go"

# https://go.dev/s/generatedcode
_GENERATED_RE = re.compile(r"^// Code generated .* DO NOT EDIT\.$")


def is_go_source(filename: str) -> bool:
	return filename.endswith(GO_EXTENSION)


def is_output_name(filename: str, suffix: str = DEFAULT_OUTPUT_SUFFIX) -> bool:
	return is_go_source(filename) and filename[: -len(GO_EXTENSION)].endswith(suffix)


def is_generated(path: str) -> bool:
	"""True when the file carries Go's generated-code marker before its package clause."""
	try:
		with open(path, "r", encoding="utf-8", errors="replace") as fh:
			for line in fh:
				line = line.rstrip()
				if _GENERATED_RE.match(line):
					return True
				if line.startswith("package "):
					return False
	except OSError as exc:
		# left to the parser, which reports unreadable sources
		logger.debug("cannot inspect %s: %s", path, exc)
	return False


def scan_repository(
	root: str,
	skip_dirs: Optional[Iterable[str]] = None,
	suffix: str = DEFAULT_OUTPUT_SUFFIX,
) -> List[str]:
	"""Go source files under ``root`` in a stable, sorted walk order.

	Files named like an output and marked as generated are skipped; a
	hand-written ``*_getters.go`` is scanned like any other source.
	"""
	skipped = set(DEFAULT_SKIP_DIRS if skip_dirs is None else skip_dirs)
	files: List[str] = []
	for dirpath, dirnames, filenames in os.walk(root):
		dirnames[:] = sorted(d for d in dirnames if d not in skipped)
		for filename in sorted(filenames):
			if not is_go_source(filename):
				continue
			path = os.path.join(dirpath, filename)
			if is_output_name(filename, suffix) and is_generated(path):
				logger.debug("skipping generated %s", path)
				continue
			files.append(path)
	return files
