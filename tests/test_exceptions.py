"""Tests for okp_validator.exceptions."""
import typing

from okp_validator.exceptions import LoadError, MissingCapabilityError, NotFoundError, OkpValidatorError


def test_load_error_source_defaults_to_none():
    exc = NotFoundError("File not found: x.json")
    assert isinstance(exc, OkpValidatorError)
    assert exc.source is None
    assert str(exc) == "File not found: x.json"


def test_missing_capability_carries_source_and_capability():
    exc = MissingCapabilityError("PyYAML not installed", source="k.yaml", capability="yaml")
    assert isinstance(exc, LoadError)
    assert (exc.source, exc.capability) == ("k.yaml", "yaml")
    assert MissingCapabilityError("PyYAML not installed").capability is None


def test_optional_arguments_are_annotated_optional():
    hints = typing.get_type_hints(MissingCapabilityError.__init__)
    assert hints["source"] == typing.Optional[str]
    assert hints["capability"] == typing.Optional[str]
    assert typing.get_type_hints(LoadError.__init__)["source"] == typing.Optional[str]
