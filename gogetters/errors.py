from __future__ import annotations

from typing import Optional


class GettersError(Exception):
	"""Base class for every failure the generator reports."""

	kind = "error"

	def __init__(self, message: str, path: Optional[str] = None) -> None:
		super().__init__(message)
		self.message = message
		self.path = path

	def __str__(self) -> str:
		if self.path:
			return f"{self.path}: {self.message}"
		return self.message


class ParseError(GettersError):
	kind = "parse"

	def __init__(self, message: str, filename: str, line: int = 0, column: int = 0) -> None:
		if line:
			message = f"{line}:{column}: {message}"
		super().__init__(message, path=filename)
		self.line = line
		self.column = column


class UnsupportedFieldTypeError(GettersError):
	kind = "unsupported-type"

	def __init__(self, field_name: Optional[str], owner: Optional[str], shape: str, text: str) -> None:
		where = f"{owner}.{field_name}" if owner and field_name else (field_name or "<type>")
		super().__init__(f"unsupported field type for {where}: {shape} ({text})")
		self.field_name = field_name
		self.owner = owner
		self.shape = shape
		self.text = text


class UnsupportedFieldError(GettersError):
	kind = "unsupported-field"

	def __init__(self, owner: str, detail: str, line: int) -> None:
		super().__init__(f"line {line}: unsupported field in {owner}: {detail}")
		self.owner = owner
		self.line = line


class AccessorCollisionError(GettersError):
	kind = "collision"

	def __init__(self, owner: str, method_name: str, detail: str) -> None:
		super().__init__(f"accessor {owner}.{method_name} collides with {detail}")
		self.owner = owner
		self.method_name = method_name


class TemplateRenderError(GettersError):
	kind = "render"


class FormatError(GettersError):
	"""The formatter rejected generated text; ``source`` holds the raw buffer."""

	kind = "format"

	def __init__(self, message: str, source: str) -> None:
		super().__init__(f"{message}\n--- generated source ---\n{source}")
		self.source = source


class WriteError(GettersError):
	kind = "write"
