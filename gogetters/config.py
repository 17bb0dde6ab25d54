from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field


DEFAULT_DIRECTIVE = "//go:generate getters"
DEFAULT_OUTPUT_SUFFIX = "_getters"
DEFAULT_SKIP_DIRS = [".git", "vendor", "node_modules", "testdata"]


class GeneratorConfig(BaseModel):
	"""Options shared by the CLI and the HTTP service."""

	directive: str = DEFAULT_DIRECTIVE
	export_strategy: Literal["ascii", "unicode"] = "ascii"
	formatter: Literal["auto", "gofmt", "builtin"] = "auto"
	# abort the whole run on the first failing file
	fail_fast: bool = True
	# render without writing and report outputs that differ from disk
	check: bool = False
	allow_collisions: bool = False
	legacy_chan_spelling: bool = False
	output_suffix: str = DEFAULT_OUTPUT_SUFFIX
	skip_dirs: List[str] = Field(default_factory=lambda: list(DEFAULT_SKIP_DIRS))
