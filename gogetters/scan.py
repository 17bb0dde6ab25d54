from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from .config import DEFAULT_DIRECTIVE
from .goast import ImportSpec, SourceFile, TypeDecl, TypeSpec
from .goparse import parse_file


@dataclass
class ScanResult:
	package_name: str
	imports: List[ImportSpec] = field(default_factory=list)
	declarations: List[TypeSpec] = field(default_factory=list)


def has_directive(doc: Sequence[str], directive: str = DEFAULT_DIRECTIVE) -> bool:
	"""True when one ``//`` line of ``doc`` is the directive, optionally followed by arguments."""
	for line in doc:
		text = line.rstrip()
		if not text.startswith("//"):
			continue
		if text == directive:
			return True
		if text.startswith(directive) and text[len(directive)].isspace():
			return True
	return False


def matched_structs(decl: TypeDecl, directive: str = DEFAULT_DIRECTIVE) -> List[TypeSpec]:
	if not has_directive(decl.doc, directive):
		return []
	# aliases, function types and other non-struct members are skipped
	return [spec for spec in decl.specs if spec.is_struct]


def scan_declarations(source: SourceFile, directive: str = DEFAULT_DIRECTIVE) -> ScanResult:
	result = ScanResult(package_name=source.package, imports=list(source.imports))
	for decl in source.type_decls:
		result.declarations.extend(matched_structs(decl, directive))
	return result


def scan_file(path: str, directive: str = DEFAULT_DIRECTIVE) -> ScanResult:
	return scan_declarations(parse_file(path), directive)
