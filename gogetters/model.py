from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ImportRef(BaseModel):
	model_config = ConfigDict(frozen=True)

	path: str
	name: Optional[str] = None

	@property
	def alias(self) -> str:
		if self.name:
			return self.name
		return self.path.rsplit("/", 1)[-1]

	@property
	def is_std(self) -> bool:
		# standard library paths have no dot in their first element
		return "." not in self.path.split("/", 1)[0]


class AccessorField(BaseModel):
	model_config = ConfigDict(frozen=True)

	owner_type_name: str
	method_name: str
	field_name: str
	field_type: str
	type_params: List[str] = []

	@property
	def receiver(self) -> str:
		if self.type_params:
			return f"{self.owner_type_name}[{', '.join(self.type_params)}]"
		return self.owner_type_name

	@property
	def receiver_name(self) -> str:
		# a receiver may not reuse the name of one of its type parameters
		name = "n"
		index = 0
		while name in self.type_params:
			name = f"n{index}"
			index += 1
		return name


class AccessorModel(BaseModel):
	package_name: str
	imports: List[ImportRef] = []
	fields: List[AccessorField] = []


class GeneratedFile(BaseModel):
	source_path: str
	output_path: str
	accessor_count: int
	changed: bool = True


class FileFailure(BaseModel):
	path: str
	kind: str
	message: str


class GenerationReport(BaseModel):
	root: str
	generated: List[GeneratedFile] = []
	failures: List[FileFailure] = []

	@property
	def ok(self) -> bool:
		return not self.failures

	@property
	def stale(self) -> List[GeneratedFile]:
		return [g for g in self.generated if g.changed]


class PreviewResult(BaseModel):
	output_name: Optional[str] = None
	content: Optional[str] = None
	accessor_count: int = 0
