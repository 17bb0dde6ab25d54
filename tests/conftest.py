"""
Shared test fixtures.
"""

import logging
from pathlib import Path

import pytest

from gogetters.config import GeneratorConfig


FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _restore_root_logging():
	# the CLI reconfigures the root logger
	root = logging.getLogger()
	handlers, level = root.handlers[:], root.level
	yield
	root.handlers[:] = handlers
	root.setLevel(level)


@pytest.fixture
def example_source() -> str:
	return (FIXTURES / "example" / "main.go").read_text(encoding="utf-8")


@pytest.fixture
def expected_getters() -> str:
	return (FIXTURES / "example" / "main_getters.golden").read_text(encoding="utf-8")


@pytest.fixture
def builtin_config() -> GeneratorConfig:
	return GeneratorConfig(formatter="builtin")


@pytest.fixture
def go_tree(tmp_path: Path):
	"""Write ``{relative path: source}`` under tmp_path and return the root."""

	def write(files):
		for rel, text in files.items():
			path = tmp_path / rel
			path.parent.mkdir(parents=True, exist_ok=True)
			path.write_text(text, encoding="utf-8")
		return tmp_path

	return write
