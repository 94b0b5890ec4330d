"""Unit tests for okp_validator.loader."""
import pytest

from okp_validator.exceptions import (
    EmptyDocumentError,
    MissingCapabilityError,
    NotFoundError,
    ParseError,
    ReadError,
)
from okp_validator.loader import DocumentLoader, detect_format
from okp_validator.parsers.yaml_parser import YamlDocumentParser


@pytest.mark.parametrize("name,expected", [
    ("kitchen.yaml", "yaml"),
    ("kitchen.yml", "yaml"),
    ("kitchen.json", "json"),
    ("kitchen", "json"),
    ("kitchen.yaml.json", "json"),
])
def test_detect_format_uses_suffix_only(name, expected):
    assert detect_format(name) == expected


def test_load_json(write_json, valid_document):
    p = write_json("kitchen.json", valid_document)
    doc = DocumentLoader().load(p)
    assert doc.data == valid_document
    assert doc.format == "json"
    assert doc.source == str(p)
    assert doc.source_map == {}


def test_load_yaml_with_source_map(write_text):
    p = write_text("kitchen.yaml", 'okp: "1.0"\nagents:\n  - id: planner\n    provider: anthropic\n')
    doc = DocumentLoader(yaml_parser=YamlDocumentParser()).load(p)
    assert doc.format == "yaml"
    assert doc.data["agents"][0]["id"] == "planner"
    assert doc.source_map["/okp"] == {"line": 1, "column": 6}
    assert doc.source_map["/agents/0/provider"]["line"] == 4


def test_missing_file(tmp_path):
    missing = tmp_path / "nope.json"
    with pytest.raises(NotFoundError) as exc_info:
        DocumentLoader().load(missing)
    assert str(exc_info.value) == f"File not found: {missing}"
    assert exc_info.value.source == str(missing)


def test_directory_is_read_error(tmp_path):
    with pytest.raises(ReadError) as exc_info:
        DocumentLoader().load(tmp_path)
    assert str(exc_info.value).startswith("Cannot read file:")


def test_undecodable_bytes_are_read_error(tmp_path):
    p = tmp_path / "latin1.json"
    p.write_bytes(b'{"okp": "\xff"}')
    with pytest.raises(ReadError):
        DocumentLoader().load(p)


def test_broken_json_is_parse_error(write_text):
    p = write_text("broken.json", '{"okp":')
    with pytest.raises(ParseError) as exc_info:
        DocumentLoader().load(p)
    assert str(exc_info.value).startswith("Parse error: ")
    assert exc_info.value.source == str(p)


def test_broken_yaml_is_parse_error(write_text):
    p = write_text("broken.yaml", "okp: [1.0\nagents: {")
    with pytest.raises(ParseError):
        DocumentLoader(yaml_parser=YamlDocumentParser()).load(p)


def test_yaml_without_parser_names_capability(write_text):
    p = write_text("kitchen.yml", 'okp: "1.0"\n')
    with pytest.raises(MissingCapabilityError) as exc_info:
        DocumentLoader(yaml_parser=None).load(p)
    assert exc_info.value.capability == "yaml"
    assert "PyYAML" in str(exc_info.value)


def test_json_does_not_need_yaml_parser(write_json):
    p = write_json("kitchen.json", {"okp": "1.0"})
    assert DocumentLoader(yaml_parser=None).load(p).data == {"okp": "1.0"}


@pytest.mark.parametrize("content", ["", "# only a comment\n", "null", "false", "\"\""])
def test_empty_yaml_documents(write_text, content):
    p = write_text("empty.yaml", content)
    with pytest.raises(EmptyDocumentError) as exc_info:
        DocumentLoader(yaml_parser=YamlDocumentParser()).load(p)
    assert str(exc_info.value) == "Empty document"


def test_json_null_is_empty_document(write_text):
    p = write_text("empty.json", "null")
    with pytest.raises(EmptyDocumentError):
        DocumentLoader().load(p)


@pytest.mark.parametrize("content,expected", [("{}", {}), ("[]", [])])
def test_empty_containers_are_documents(write_text, content, expected):
    p = write_text("empty.json", content)
    assert DocumentLoader().load(p).data == expected


def test_overlong_file_name_is_load_error(tmp_path):
    # longer than NAME_MAX; depending on the Python version exists() raises or returns False
    name = str(tmp_path / ("x" * 300 + ".json"))
    with pytest.raises((ReadError, NotFoundError)) as exc_info:
        DocumentLoader().load(name)
    assert exc_info.value.source == name


def test_os_error_while_checking_path_is_read_error(tmp_path, monkeypatch):
    def refuse(self, *args, **kwargs):
        raise OSError(36, "File name too long")
    monkeypatch.setattr(type(tmp_path), "exists", refuse)
    with pytest.raises(ReadError) as exc_info:
        DocumentLoader().load(tmp_path / "kitchen.json")
    assert str(exc_info.value).startswith("Cannot read file: ")
    assert "File name too long" in str(exc_info.value)
