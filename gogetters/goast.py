"""Syntax tree for the parts of a Go source file the generator reads.

Type expressions form a closed set. The resolver in ``typesig`` handles every
variant; ``StructType`` and ``UnsupportedType`` exist so the parser can
represent any valid field type, and both are rejected when resolved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union



@dataclass(frozen=True)
class Ident:
	name: str


@dataclass(frozen=True)
class Pointer:
	elem: "TypeExpr"


@dataclass(frozen=True)
class Qualified:
	package: str
	name: str


@dataclass(frozen=True)
class Slice:
	elem: "TypeExpr"
	length: Optional[str] = None  # set for arrays, e.g. "4" or "N"


@dataclass(frozen=True)
class MapType:
	key: "TypeExpr"
	value: "TypeExpr"


@dataclass(frozen=True)
class AnyType:
	"""The empty interface, ``interface{}``."""


@dataclass(frozen=True)
class ChanType:
	elem: "TypeExpr"
	direction: str = "both"  # both, send, recv


@dataclass(frozen=True)
class Variadic:
	elem: "TypeExpr"


@dataclass(frozen=True)
class Field:
	names: Tuple[str, ...]
	type: "TypeExpr"
	tag: Optional[str] = None
	line: int = 0

	@property
	def embedded(self) -> bool:
		return not self.names


@dataclass(frozen=True)
class StructType:
	fields: Tuple[Field, ...] = ()


@dataclass(frozen=True)
class UnsupportedType:
	shape: str  # "func", "struct", "interface", "generic instantiation"
	text: str


TypeExpr = Union[
	Ident, Pointer, Qualified, Slice, MapType, AnyType, ChanType, Variadic, StructType, UnsupportedType
]


@dataclass(frozen=True)
class TypeSpec:
	name: str
	type: TypeExpr
	type_params: Tuple[str, ...] = ()
	alias: bool = False
	line: int = 0

	@property
	def is_struct(self) -> bool:
		return isinstance(self.type, StructType) and not self.alias


@dataclass(frozen=True)
class TypeDecl:
	specs: Tuple[TypeSpec, ...]
	doc: Tuple[str, ...] = ()  # lead comment lines, markers included
	line: int = 0


@dataclass(frozen=True)
class ImportSpec:
	path: str
	name: Optional[str] = None  # explicit name, "." or "_"
	line: int = 0


@dataclass(frozen=True)
class SourceFile:
	path: str
	package: str
	imports: Tuple[ImportSpec, ...] = ()
	type_decls: Tuple[TypeDecl, ...] = ()
