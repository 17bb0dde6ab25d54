from __future__ import annotations

import functools
import logging
import os
from typing import List, Optional

import jinja2

from .config import DEFAULT_OUTPUT_SUFFIX
from .errors import TemplateRenderError, WriteError
from .formatting import Formatter, get_formatter
from .model import AccessorModel, ImportRef


logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_NAME = "getters.go.j2"


@functools.lru_cache(maxsize=None)
def load_default_template() -> str:
	loader = jinja2.PackageLoader("gogetters", "templates")
	source, _, _ = loader.get_source(jinja2.Environment(), DEFAULT_TEMPLATE_NAME)
	return source


def output_path_for(path: str, suffix: str = DEFAULT_OUTPUT_SUFFIX) -> str:
	"""``user.go`` -> ``user_getters.go``."""
	root, ext = os.path.splitext(path)
	return f"{root}{suffix}{ext}"


def group_imports(imports: List[ImportRef]) -> List[List[ImportRef]]:
	std = sorted((i for i in imports if i.is_std), key=lambda i: i.path)
	other = sorted((i for i in imports if not i.is_std), key=lambda i: i.path)
	return [group for group in (std, other) if group]


class GetterEmitter:
	"""Renders an AccessorModel to formatted Go source and writes it next to its input."""

	def __init__(self, template: Optional[str] = None, formatter: Optional[Formatter] = None) -> None:
		env = jinja2.Environment(
			undefined=jinja2.StrictUndefined,
			keep_trailing_newline=True,
			trim_blocks=True,
			lstrip_blocks=True,
		)
		try:
			self.template = env.from_string(template if template is not None else load_default_template())
		except jinja2.TemplateError as exc:
			raise TemplateRenderError(f"invalid template: {exc}") from exc
		self.formatter = formatter or get_formatter("auto")

	def render(self, model: AccessorModel) -> str:
		try:
			return self.template.render(
				package_name=model.package_name,
				imports=model.imports,
				import_groups=group_imports(model.imports),
				fields=model.fields,
			)
		except jinja2.TemplateError as exc:
			raise TemplateRenderError(f"cannot render accessors: {exc}") from exc

	def source_for(self, model: AccessorModel) -> str:
		return self.formatter.format(self.render(model))

	def write(self, out_path: str, content: str) -> None:
		try:
			with open(out_path, "w", encoding="utf-8", newline="\n") as fh:
				fh.write(content)
		except OSError as exc:
			raise WriteError(f"cannot write {out_path}: {exc}") from exc
		logger.info("wrote %s", out_path)
