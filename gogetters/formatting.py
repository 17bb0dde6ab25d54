"""Canonical formatting of generated Go source.

``gofmt`` is used when it is installed. The builtin formatter validates the
text against the tree-sitter Go grammar and normalizes blank lines and
trailing whitespace, which is all the accessor template can get wrong.
"""

from __future__ import annotations

import logging
import re
import shutil
import subprocess
from typing import Optional

from .errors import FormatError, ParseError
from .goparse import parse_source


logger = logging.getLogger(__name__)

_BLANK_RUN_RE = re.compile(r"\n{3,}")


class Formatter:
	name = "base"

	def format(self, source: str) -> str:
		raise NotImplementedError


class BuiltinFormatter(Formatter):
	name = "builtin"

	def format(self, source: str) -> str:
		try:
			parse_source(source, "<generated>")
		except ParseError as exc:
			raise FormatError(f"generated source does not parse: {exc}", source) from exc
		lines = [line.rstrip() for line in source.splitlines()]
		text = "\n".join(lines).strip("\n")
		return _BLANK_RUN_RE.sub("\n\n", text) + "\n"


class GofmtFormatter(Formatter):
	name = "gofmt"

	def __init__(self, executable: str = "gofmt") -> None:
		self.executable = executable

	def format(self, source: str) -> str:
		try:
			proc = subprocess.run(
				[self.executable],
				input=source,
				capture_output=True,
				text=True,
				encoding="utf-8",
				check=False,
			)
		except OSError as exc:
			raise FormatError(f"cannot run {self.executable}: {exc}", source) from exc
		if proc.returncode != 0:
			raise FormatError(f"{self.executable} rejected generated source: {proc.stderr.strip()}", source)
		return proc.stdout


def get_formatter(name: str = "auto", gofmt: Optional[str] = None) -> Formatter:
	if name == "builtin":
		return BuiltinFormatter()
	executable = gofmt or shutil.which("gofmt")
	if name == "gofmt":
		return GofmtFormatter(executable or "gofmt")
	if name == "auto":
		if executable:
			return GofmtFormatter(executable)
		logger.info("gofmt not found on PATH; using the builtin formatter")
		return BuiltinFormatter()
	raise ValueError(f"unknown formatter {name!r}")
