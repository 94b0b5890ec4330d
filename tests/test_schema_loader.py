"""Unit tests for okp_validator.schema_loader."""
import json

import pytest

from okp_validator import schema_loader
from okp_validator.exceptions import SchemaLoadError, SchemaNotFoundError
from okp_validator.schema_loader import (
    load_schema,
    make_resolver,
    resolve_schema_path,
)


def test_bundled_schema_is_first_candidate(schema_path):
    assert schema_loader.default_schema_candidates()[0] == schema_path
    assert resolve_schema_path() == schema_path


def test_falls_back_to_cwd_schemas_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "schemas").mkdir()
    local = tmp_path / "schemas" / "okp.schema.json"
    local.write_text("{}", encoding="utf-8")
    candidates = [tmp_path / "absent" / "okp.schema.json"] + schema_loader.default_schema_candidates()[1:]
    assert resolve_schema_path(candidates=candidates) == local


def test_no_candidate_resolves(tmp_path):
    with pytest.raises(SchemaNotFoundError) as exc_info:
        resolve_schema_path(candidates=[tmp_path / "a.json", tmp_path / "b.json"])
    assert "okp.schema.json" in str(exc_info.value)


def test_explicit_path_wins(tmp_path):
    p = tmp_path / "custom.json"
    p.write_text("{}", encoding="utf-8")
    assert resolve_schema_path(p) == p
    assert make_resolver(str(p))() == p


def test_explicit_path_missing(tmp_path):
    with pytest.raises(SchemaNotFoundError):
        make_resolver(tmp_path / "gone.json")()


def test_load_schema_caches(schema_path):
    first = load_schema(schema_path)
    assert first["required"] == ["okp", "agents"]
    assert load_schema(schema_path) is first


def test_invalid_json_schema(tmp_path):
    p = tmp_path / "okp.schema.json"
    p.write_text('{"type": ', encoding="utf-8")
    with pytest.raises(SchemaLoadError) as exc_info:
        load_schema(p)
    assert "Invalid JSON" in str(exc_info.value)


def test_schema_must_be_object(tmp_path):
    p = tmp_path / "okp.schema.json"
    p.write_text(json.dumps(["not", "a", "schema"]), encoding="utf-8")
    with pytest.raises(SchemaLoadError):
        load_schema(p)


def test_missing_schema_file(tmp_path):
    with pytest.raises(SchemaNotFoundError):
        load_schema(tmp_path / "okp.schema.json")
