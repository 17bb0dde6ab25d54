"""Loads Go source into the ``goast`` tree using the tree-sitter Go grammar.

Only the package clause, imports and ``type`` declarations are mapped; the
rest of the file is checked for syntax errors and otherwise ignored.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from .errors import ParseError
from .goast import (
	AnyType,
	ChanType,
	Field,
	Ident,
	ImportSpec,
	MapType,
	Pointer,
	Qualified,
	Slice,
	SourceFile,
	StructType,
	TypeDecl,
	TypeExpr,
	TypeSpec,
	UnsupportedType,
	Variadic,
)


GO_LANGUAGE = Language(tree_sitter_go.language())

# tree-sitter accepts statements at the top level; Go does not
_TOP_LEVEL_DECLS = frozenset(
	{"function_declaration", "method_declaration", "var_declaration", "const_declaration", "type_declaration"}
)


def _text(node: Node) -> str:
	return node.text.decode("utf-8")


def _line(node: Node) -> int:
	return node.start_point[0] + 1


def _named(node: Node) -> List[Node]:
	return [c for c in node.named_children if c.type != "comment"]


def _first_error(node: Node) -> Optional[Node]:
	if node.type == "ERROR" or node.is_missing:
		return node
	for child in node.children:
		if child.has_error or child.is_missing:
			found = _first_error(child)
			if found is not None:
				return found
	return None


def _error(node: Node, message: str, filename: str) -> ParseError:
	row, column = node.start_point
	return ParseError(message, filename, row + 1, column + 1)


def _check_syntax(root: Node, filename: str) -> None:
	if not root.has_error:
		return
	bad = _first_error(root) or root
	if bad.is_missing:
		raise _error(bad, f"syntax error: missing {bad.type!r}", filename)
	snippet = _text(bad).splitlines()[0] if _text(bad) else ""
	raise _error(bad, f"syntax error near {snippet[:40]!r}", filename)


def _parse_tree(text: str, filename: str) -> Node:
	if text.startswith("\ufeff"):
		text = text[1:]
	tree = Parser(GO_LANGUAGE).parse(text.encode("utf-8"))
	_check_syntax(tree.root_node, filename)
	return tree.root_node


class _Loader:
	def __init__(self, filename: str) -> None:
		self.filename = filename

	def error(self, node: Node, message: str) -> ParseError:
		return _error(node, message, self.filename)

	# -- file level ----------------------------------------------------

	def source_file(self, root: Node) -> SourceFile:
		package: Optional[str] = None
		imports: List[ImportSpec] = []
		decls: List[TypeDecl] = []
		seen_decl = False
		for node in _named(root):
			if node.type == "package_clause":
				if package is not None or imports or seen_decl:
					raise self.error(node, "unexpected package clause")
				package = _text(_named(node)[0])
				continue
			if package is None:
				raise self.error(node, "expected 'package' clause")
			if node.type == "import_declaration":
				if seen_decl:
					raise self.error(node, "imports must appear before other declarations")
				imports.extend(self.import_specs(node))
				continue
			if node.type not in _TOP_LEVEL_DECLS:
				raise self.error(node, "non-declaration statement outside function body")
			seen_decl = True
			if node.type == "type_declaration":
				decls.append(self.type_decl(node))
		if package is None:
			raise ParseError("expected 'package' clause", self.filename, 1, 1)
		return SourceFile(
			path=self.filename,
			package=package,
			imports=tuple(imports),
			type_decls=tuple(decls),
		)

	def import_specs(self, node: Node) -> List[ImportSpec]:
		specs: List[ImportSpec] = []
		for child in _named(node):
			if child.type == "import_spec_list":
				specs.extend(self.import_specs(child))
			elif child.type == "import_spec":
				name = child.child_by_field_name("name")
				path = child.child_by_field_name("path")
				specs.append(
					ImportSpec(
						path=_text(path)[1:-1],
						name=_text(name) if name is not None else None,
						line=_line(path),
					)
				)
		return specs

	# -- type declarations ---------------------------------------------

	def type_decl(self, node: Node) -> TypeDecl:
		specs = [self.type_spec(c) for c in _named(node) if c.type in ("type_spec", "type_alias")]
		return TypeDecl(specs=tuple(specs), doc=doc_comments(node), line=_line(node))

	def type_spec(self, node: Node) -> TypeSpec:
		name = node.child_by_field_name("name")
		params = node.child_by_field_name("type_parameters")
		type_params: Tuple[str, ...] = ()
		if params is not None:
			type_params = tuple(
				_text(n) for decl in _named(params) for n in decl.children_by_field_name("name")
			)
		return TypeSpec(
			name=_text(name),
			type=self.type_expr(node.child_by_field_name("type")),
			type_params=type_params,
			alias=node.type == "type_alias",
			line=_line(name),
		)

	# -- type expressions ----------------------------------------------

	def type_expr(self, node: Node) -> TypeExpr:
		kind = node.type
		if kind == "type_identifier":
			return Ident(_text(node))
		if kind == "qualified_type":
			return Qualified(_text(node.child_by_field_name("package")), _text(node.child_by_field_name("name")))
		if kind == "pointer_type":
			return Pointer(self.type_expr(_named(node)[0]))
		if kind == "parenthesized_type":
			return self.type_expr(_named(node)[0])
		if kind == "slice_type":
			return Slice(self.type_expr(node.child_by_field_name("element")))
		if kind == "array_type":
			return Slice(
				self.type_expr(node.child_by_field_name("element")),
				length=_text(node.child_by_field_name("length")),
			)
		if kind == "map_type":
			return MapType(
				self.type_expr(node.child_by_field_name("key")),
				self.type_expr(node.child_by_field_name("value")),
			)
		if kind == "channel_type":
			return ChanType(self.type_expr(node.child_by_field_name("value")), _chan_direction(node))
		if kind == "interface_type":
			if not _named(node):
				return AnyType()
			return UnsupportedType("interface", _text(node))
		if kind == "struct_type":
			return self.struct_type(node)
		if kind == "function_type":
			return UnsupportedType("func", _text(node))
		if kind == "generic_type":
			return UnsupportedType("generic instantiation", _text(node))
		if kind == "variadic_parameter_declaration":
			return Variadic(self.type_expr(node.child_by_field_name("type")))
		return UnsupportedType(kind, _text(node))

	def struct_type(self, node: Node) -> StructType:
		fields: List[Field] = []
		for body in _named(node):
			for decl in _named(body):
				if decl.type == "field_declaration":
					fields.append(self.field(decl))
		return StructType(tuple(fields))

	def field(self, node: Node) -> Field:
		names = tuple(_text(n) for n in node.children_by_field_name("name"))
		typ = self.type_expr(node.child_by_field_name("type"))
		if not names and any(c.type == "*" for c in node.children):
			typ = Pointer(typ)
		tag = node.child_by_field_name("tag")
		return Field(names=names, type=typ, tag=_text(tag) if tag is not None else None, line=_line(node))


def _chan_direction(node: Node) -> str:
	tokens = [c.type for c in node.children if not c.is_named]
	if tokens and tokens[0] == "<-":
		return "recv"
	if "<-" in tokens:
		return "send"
	return "both"


def doc_comments(node: Node) -> Tuple[str, ...]:
	"""Text of the comment group ending on the line directly above ``node``.

	A comment sharing a line with earlier code trails that code and is not
	part of the group.
	"""
	comments: List[Node] = []
	line = node.start_point[0]
	sibling = node.prev_named_sibling
	while sibling is not None and sibling.type == "comment":
		end = sibling.end_point[0]
		if end != line - 1 and not (comments and end == line):
			break
		comments.append(sibling)
		line = sibling.start_point[0]
		sibling = sibling.prev_named_sibling
	if sibling is not None and sibling.type != "comment":
		while comments and comments[-1].start_point[0] == sibling.end_point[0]:
			comments.pop()
	return tuple(_text(c).rstrip() for c in reversed(comments))


def parse_source(text: str, filename: str = "<source>") -> SourceFile:
	return _Loader(filename).source_file(_parse_tree(text, filename))


def parse_file(path: str) -> SourceFile:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			text = fh.read()
	except (OSError, UnicodeDecodeError) as exc:
		raise ParseError(f"cannot read source: {exc}", str(path)) from exc
	return parse_source(text, str(path))


def parse_type_expr(text: str, allow_variadic: bool = True) -> TypeExpr:
	"""Parse a lone type expression, e.g. ``map[string][]*uuid.UUID``."""
	root = _parse_tree(f"package p\n\nfunc f(x {text})\n", "<type>")
	func = _named(root)[-1]
	params = _named(func.child_by_field_name("parameters"))
	if len(params) != 1 or len(params[0].children_by_field_name("name")) != 1:
		raise ParseError(f"unexpected tokens after type in {text!r}", "<type>")
	param = params[0]
	if param.type == "variadic_parameter_declaration":
		if not allow_variadic:
			raise ParseError(f"variadic type not allowed here: {text!r}", "<type>")
		return _Loader("<type>").type_expr(param)
	return _Loader("<type>").type_expr(param.child_by_field_name("type"))
