"""Shared pytest fixtures: bundled schema, document writers, capabilities."""
import json
import logging
from pathlib import Path

import pytest

from okp_validator import schema_loader
from okp_validator.capabilities import Capabilities
from okp_validator.matching import JsonSchemaMatcher
from okp_validator.parsers.yaml_parser import YamlDocumentParser


BUNDLED_SCHEMA = Path(schema_loader.__file__).resolve().parent / "schemas" / "okp.schema.json"


VALID_DOCUMENT = {
    "okp": "1.0",
    "agents": [
        {"id": "planner", "provider": "anthropic", "role": "planning"},
        {"id": "coder", "provider": "openai", "model": "gpt-4"},
    ],
    "workflow": [
        {"id": "plan", "agent": "planner", "action": "decompose", "outputs": ["plan"]},
        {"id": "implement", "agent": "coder", "depends_on": ["plan"]},
    ],
    "handoff": {"mode": "auto", "require_context": True},
}


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """The CLI reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _fresh_schema_cache():
    schema_loader.clear_cache()
    yield
    schema_loader.clear_cache()


@pytest.fixture
def schema_path():
    return BUNDLED_SCHEMA


@pytest.fixture
def schema(schema_path):
    return schema_loader.load_schema(schema_path)


@pytest.fixture
def full_capabilities():
    return Capabilities(yaml_parser=YamlDocumentParser(), matcher=JsonSchemaMatcher())


@pytest.fixture
def valid_document():
    return json.loads(json.dumps(VALID_DOCUMENT))


@pytest.fixture
def write_json(tmp_path):
    """Write ``data`` as JSON under tmp_path and return the path."""
    def _write(name, data):
        p = tmp_path / name
        p.write_text(json.dumps(data), encoding="utf-8")
        return p
    return _write


@pytest.fixture
def write_text(tmp_path):
    """Write raw text under tmp_path and return the path."""
    def _write(name, text):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write
