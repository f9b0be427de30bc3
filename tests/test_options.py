"""Tests for generator options."""

import json

import pytest
from pydantic import ValidationError

from options.schema import GeneratorOptions, OutputFormat
from options.validator import (
    OptionsValidationError,
    load_options_file,
    resolve_options,
    validate_options,
)


def test_defaults():
    options = GeneratorOptions()

    assert options.record_name == "Record"
    assert options.derives == ["Debug", "Clone", "Copy", "Eq"]
    assert options.public is True
    assert options.output_format is OutputFormat.RUST
    assert options.delimiter is None


def test_options_are_frozen():
    options = GeneratorOptions()
    with pytest.raises(ValidationError):
        options.record_name = "Other"


@pytest.mark.parametrize("name", ["1Record", "my record", "struct-name", "for"])
def test_invalid_record_name(name):
    with pytest.raises(ValidationError):
        GeneratorOptions(record_name=name)


def test_tab_delimiter_escape():
    assert GeneratorOptions(delimiter="\\t").delimiter == "\t"


@pytest.mark.parametrize("delimiter", [";;", "", '"'])
def test_invalid_delimiter(delimiter):
    with pytest.raises(ValidationError):
        GeneratorOptions(delimiter=delimiter)


def test_validate_options_formats_errors():
    with pytest.raises(OptionsValidationError, match="record_name"):
        validate_options({"record_name": "9lives"})


def test_extra_fields_rejected():
    with pytest.raises(OptionsValidationError, match="unknown_option"):
        validate_options({"unknown_option": True})


def test_load_yaml(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("record_name: Row\nderives: [Debug]\noutput_format: json\n", encoding="utf-8")

    options = validate_options(load_options_file(path))
    assert options.record_name == "Row"
    assert options.derives == ["Debug"]
    assert options.output_format is OutputFormat.JSON


def test_load_json(tmp_path):
    path = tmp_path / "options.json"
    path.write_text(json.dumps({"public": False}), encoding="utf-8")

    assert load_options_file(path) == {"public": False}


def test_empty_file_rejected(tmp_path):
    path = tmp_path / "options.yml"
    path.write_text("", encoding="utf-8")

    with pytest.raises(OptionsValidationError, match="empty"):
        load_options_file(path)


def test_non_mapping_rejected(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(OptionsValidationError, match="dictionary"):
        load_options_file(path)


def test_invalid_yaml_rejected(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("record_name: [unclosed\n", encoding="utf-8")

    with pytest.raises(OptionsValidationError, match="Invalid YAML"):
        load_options_file(path)


def test_unsupported_format(tmp_path):
    path = tmp_path / "options.toml"
    path.write_text("record_name = 'Row'\n", encoding="utf-8")

    with pytest.raises(OptionsValidationError, match="Unsupported file format"):
        load_options_file(path)


def test_missing_file(tmp_path):
    with pytest.raises(OptionsValidationError, match="not found"):
        load_options_file(tmp_path / "missing.yaml")


def test_resolve_options_overrides_file(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("record_name: Row\noutput_format: json\n", encoding="utf-8")

    options = resolve_options(path, overrides={"record_name": "Line", "output_format": None})
    assert options.record_name == "Line"
    assert options.output_format is OutputFormat.JSON


def test_resolve_options_without_file():
    assert resolve_options() == GeneratorOptions()


@pytest.mark.parametrize("name", ["fn", "struct", "impl", "Self", "_"])
def test_rust_keywords_rejected_as_record_name(name):
    with pytest.raises(OptionsValidationError, match="record_name"):
        validate_options({"record_name": name})


def test_rust_keywords_rejected_in_derives():
    with pytest.raises(ValidationError, match="Rust keyword"):
        GeneratorOptions(derives=["Debug", "impl"])


def test_python_only_keywords_are_valid_rust_names():
    assert GeneratorOptions(record_name="class").record_name == "class"
