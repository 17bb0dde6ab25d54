from __future__ import annotations

import logging
import os
from typing import Callable, Optional

from .build import build_accessor_model
from .config import GeneratorConfig
from .emit import GetterEmitter, output_path_for
from .errors import GettersError
from .formatting import get_formatter
from .fs_scan import scan_repository
from .goast import SourceFile
from .goparse import parse_file, parse_source
from .model import AccessorModel, FileFailure, GeneratedFile, GenerationReport, PreviewResult
from .naming import get_export_strategy
from .scan import scan_declarations


logger = logging.getLogger(__name__)


def _existing_bytes(path: str) -> Optional[bytes]:
	"""Current content of an output file; None when it is missing or unreadable."""
	try:
		with open(path, "rb") as fh:
			return fh.read()
	except OSError as exc:
		logger.debug("cannot read %s: %s", path, exc)
		return None


class GetterGenerator:
	def __init__(self, config: Optional[GeneratorConfig] = None, emitter: Optional[GetterEmitter] = None) -> None:
		self.config = config or GeneratorConfig()
		self.export_name = get_export_strategy(self.config.export_strategy)
		self.emitter = emitter or GetterEmitter(formatter=get_formatter(self.config.formatter))

	def build_model(self, source: SourceFile) -> Optional[AccessorModel]:
		"""The accessor model for ``source``, or None when nothing in it is marked."""
		scan = scan_declarations(source, self.config.directive)
		if not scan.declarations:
			return None
		return build_accessor_model(
			scan,
			export_name=self.export_name,
			allow_collisions=self.config.allow_collisions,
			legacy_chan_spelling=self.config.legacy_chan_spelling,
		)

	def generate_file(self, path: str) -> Optional[GeneratedFile]:
		model = self.build_model(parse_file(path))
		if model is None:
			return None
		out_path = output_path_for(path, self.config.output_suffix)
		content = self.emitter.source_for(model)
		changed = _existing_bytes(out_path) != content.encode("utf-8")
		if not self.config.check:
			self.emitter.write(out_path, content)
		return GeneratedFile(
			source_path=path,
			output_path=out_path,
			accessor_count=len(model.fields),
			changed=changed,
		)

	def run(self, root: str, on_generated: Optional[Callable[[GeneratedFile], None]] = None) -> GenerationReport:
		"""Generate accessors for every Go file under ``root``.

		With ``fail_fast`` the first GettersError propagates and files written
		before it stay on disk; otherwise failures are collected in the report.
		"""
		report = GenerationReport(root=root)
		for path in scan_repository(root, self.config.skip_dirs, self.config.output_suffix):
			logger.debug("scanning %s", path)
			try:
				generated = self.generate_file(path)
			except GettersError as exc:
				if exc.path is None:
					exc.path = path
				if self.config.fail_fast:
					raise
				logger.error("%s", exc)
				report.failures.append(FileFailure(path=path, kind=exc.kind, message=exc.message))
				continue
			if generated is None:
				continue
			report.generated.append(generated)
			if on_generated is not None:
				on_generated(generated)
		return report

	def preview(self, text: str, filename: str = "main.go") -> PreviewResult:
		model = self.build_model(parse_source(text, filename))
		if model is None:
			return PreviewResult()
		return PreviewResult(
			output_name=os.path.basename(output_path_for(filename, self.config.output_suffix)),
			content=self.emitter.source_for(model),
			accessor_count=len(model.fields),
		)
