"""Tests for the --init starter template."""
import yaml

from okp_validator.matching import JsonSchemaMatcher
from okp_validator.schema_validator import SchemaValidator
from okp_validator.template import DEFAULT_PROJECT_PREFIX, render_starter


def test_starter_is_valid_yaml():
    data = yaml.safe_load(render_starter())
    assert data["okp"] == "1.0"
    assert [a["id"] for a in data["agents"]] == ["planner", "coder", "reviewer"]
    assert [s["id"] for s in data["workflow"]] == ["plan", "implement", "review"]
    assert "depends_on" not in data["workflow"][0]
    assert data["workflow"][2]["depends_on"] == ["implement"]
    assert data["tasks"]["project_prefix"] == DEFAULT_PROJECT_PREFIX


def test_starter_passes_schema(schema):
    verdict = SchemaValidator(schema, matcher=JsonSchemaMatcher()).validate(yaml.safe_load(render_starter()))
    assert verdict.valid, verdict.message


def test_project_prefix_is_quoted():
    data = yaml.safe_load(render_starter(project_prefix="ACME: kitchen #1"))
    assert data["tasks"]["project_prefix"] == "ACME: kitchen #1"


def test_starter_layout():
    text = render_starter()
    assert text.startswith("# Open Kitchen Protocol Configuration\n")
    assert text.endswith("\n")
    assert "\n\n\n" not in text
