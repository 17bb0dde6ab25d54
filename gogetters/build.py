from __future__ import annotations

import logging
from typing import Dict, List, Set

from .errors import AccessorCollisionError, UnsupportedFieldError
from .goast import StructType, TypeSpec
from .imports import ImportUsage
from .model import AccessorField, AccessorModel
from .naming import ExportStrategy, export_ascii
from .scan import ScanResult
from .typesig import resolve_type


logger = logging.getLogger(__name__)


def _struct_accessors(
	spec: TypeSpec,
	export_name: ExportStrategy,
	allow_collisions: bool,
	legacy_chan_spelling: bool,
) -> List[AccessorField]:
	if not isinstance(spec.type, StructType):
		return []
	field_names: Set[str] = set()
	for f in spec.type.fields:
		field_names.update(f.names)

	accessors: List[AccessorField] = []
	methods: Dict[str, str] = {}
	for f in spec.type.fields:
		if f.embedded:
			raise UnsupportedFieldError(spec.name, "embedded fields have no name", f.line)
		if len(f.names) > 1:
			raise UnsupportedFieldError(spec.name, f"multiple names in one field ({', '.join(f.names)})", f.line)
		field_name = f.names[0]
		method_name = export_name(field_name)
		if not allow_collisions:
			if method_name in methods:
				raise AccessorCollisionError(spec.name, method_name, f"the accessor for field {methods[method_name]}")
			if method_name in field_names:
				raise AccessorCollisionError(spec.name, method_name, f"field {method_name}")
		methods[method_name] = field_name
		accessors.append(
			AccessorField(
				owner_type_name=spec.name,
				method_name=method_name,
				field_name=field_name,
				field_type=resolve_type(f.type, field_name, spec.name, legacy_chan_spelling),
				type_params=list(spec.type_params),
			)
		)
	return accessors


def build_accessor_model(
	scan: ScanResult,
	export_name: ExportStrategy = export_ascii,
	allow_collisions: bool = False,
	legacy_chan_spelling: bool = False,
) -> AccessorModel:
	"""Flatten every matched struct's fields into one ordered accessor list.

	Only imports whose alias qualifies at least one accessor type are kept.
	"""
	usage = ImportUsage(scan.imports)
	fields: List[AccessorField] = []
	for spec in scan.declarations:
		accessors = _struct_accessors(spec, export_name, allow_collisions, legacy_chan_spelling)
		logger.debug("%s: %d accessors", spec.name, len(accessors))
		for accessor in accessors:
			usage.mark(accessor.field_type)
		fields.extend(accessors)
	return AccessorModel(package_name=scan.package_name, imports=usage.used(), fields=fields)
