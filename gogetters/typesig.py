from __future__ import annotations

from typing import Optional

from .errors import UnsupportedFieldTypeError
from .goast import (
	AnyType,
	ChanType,
	Ident,
	MapType,
	Pointer,
	Qualified,
	Slice,
	StructType,
	TypeExpr,
	UnsupportedType,
	Variadic,
)


def _chan_prefix(expr: ChanType, legacy: bool) -> str:
	if legacy:
		return "chann "
	if expr.direction == "send":
		return "chan<- "
	if expr.direction == "recv":
		return "<-chan "
	return "chan "


def resolve_type(
	expr: TypeExpr,
	field_name: Optional[str] = None,
	owner: Optional[str] = None,
	legacy_chan_spelling: bool = False,
) -> str:
	"""Render a field type expression back to Go source text.

	Function types, struct and non-empty interface literals, and generic
	instantiations raise UnsupportedFieldTypeError naming the field.
	"""

	def resolve(node: TypeExpr) -> str:
		if isinstance(node, Ident):
			return node.name
		if isinstance(node, Pointer):
			return "*" + resolve(node.elem)
		if isinstance(node, Qualified):
			return node.package + "." + node.name
		if isinstance(node, Slice):
			return f"[{node.length or ''}]" + resolve(node.elem)
		if isinstance(node, MapType):
			return "map[" + resolve(node.key) + "]" + resolve(node.value)
		if isinstance(node, AnyType):
			return "interface{}"
		if isinstance(node, ChanType):
			elem = resolve(node.elem)
			# "chan <-chan T" would read as a send-only channel of "chan T"
			if (
				node.direction == "both"
				and isinstance(node.elem, ChanType)
				and node.elem.direction == "recv"
				and not legacy_chan_spelling
			):
				elem = f"({elem})"
			return _chan_prefix(node, legacy_chan_spelling) + elem
		if isinstance(node, Variadic):
			return "..." + resolve(node.elem)
		if isinstance(node, StructType):
			raise UnsupportedFieldTypeError(field_name, owner, "struct", "struct{...}")
		if isinstance(node, UnsupportedType):
			raise UnsupportedFieldTypeError(field_name, owner, node.shape, node.text)
		raise UnsupportedFieldTypeError(field_name, owner, type(node).__name__, repr(node))

	return resolve(expr)
