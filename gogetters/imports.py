from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List

from .goast import ImportSpec
from .model import ImportRef


logger = logging.getLogger(__name__)

# an identifier directly followed by "." and another identifier: "uuid." in "[]*uuid.UUID"
_QUALIFIER_RE = re.compile(r"(?<!\w)([^\W\d]\w*)\.(?=[^\W\d])")


def qualifiers(type_text: str) -> List[str]:
	return _QUALIFIER_RE.findall(type_text)


@dataclass
class _TrackedImport:
	ref: ImportRef
	used: bool = False


class ImportUsage:
	"""Tracks which of a file's imports the generated accessors reference."""

	def __init__(self, imports: Iterable[ImportSpec]) -> None:
		self._by_alias: Dict[str, _TrackedImport] = {}
		for spec in imports:
			if spec.name in ("_", "."):
				continue
			ref = ImportRef(path=spec.path, name=spec.name)
			if ref.alias in self._by_alias:
				logger.debug("import %s shadows %s as %r", spec.path, self._by_alias[ref.alias].ref.path, ref.alias)
			self._by_alias[ref.alias] = _TrackedImport(ref)

	def mark(self, type_text: str) -> None:
		for alias in qualifiers(type_text):
			tracked = self._by_alias.get(alias)
			if tracked is not None:
				tracked.used = True

	def used(self) -> List[ImportRef]:
		refs = [t.ref for t in self._by_alias.values() if t.used]
		return sorted(refs, key=lambda r: (r.path, r.name or ""))
