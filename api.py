from __future__ import annotations

import os

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from gogetters.config import GeneratorConfig
from gogetters.errors import GettersError
from gogetters.generate import GetterGenerator
from gogetters.model import GenerationReport, PreviewResult


app = FastAPI(title="Go Getters Generator")


class GenerateRequest(BaseModel):
	root_path: str
	config: GeneratorConfig = Field(default_factory=GeneratorConfig)


class PreviewRequest(BaseModel):
	source: str
	filename: str = "main.go"
	config: GeneratorConfig = Field(default_factory=GeneratorConfig)


@app.post("/generate", response_model=GenerationReport)
def generate(req: GenerateRequest) -> GenerationReport:
	root = os.path.abspath(req.root_path)
	if not os.path.isdir(root):
		raise HTTPException(status_code=400, detail=f"Invalid root_path: {root}")
	try:
		return GetterGenerator(req.config).run(root)
	except GettersError as e:
		raise HTTPException(status_code=422, detail=str(e))


@app.post("/preview", response_model=PreviewResult)
def preview(req: PreviewRequest) -> PreviewResult:
	try:
		return GetterGenerator(req.config).preview(req.source, req.filename)
	except GettersError as e:
		raise HTTPException(status_code=422, detail=str(e))


def create_app() -> FastAPI:
	return app
