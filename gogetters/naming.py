from __future__ import annotations

from typing import Callable, Dict


ExportStrategy = Callable[[str], str]


def export_ascii(name: str) -> str:
	"""Uppercase a leading ASCII letter; anything else is left alone."""
	if name and "a" <= name[0] <= "z":
		return name[0].upper() + name[1:]
	return name


def export_unicode(name: str) -> str:
	"""Title-case the first character using Unicode rules, e.g. ``über`` -> ``Über``."""
	if not name:
		return name
	return name[0].title() + name[1:]


EXPORT_STRATEGIES: Dict[str, ExportStrategy] = {
	"ascii": export_ascii,
	"unicode": export_unicode,
}


def get_export_strategy(name: str) -> ExportStrategy:
	try:
		return EXPORT_STRATEGIES[name]
	except KeyError:
		raise ValueError(f"unknown export strategy {name!r}; expected one of {sorted(EXPORT_STRATEGIES)}") from None
