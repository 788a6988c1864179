"""Tests for YAML declaration loading."""
from __future__ import annotations

import pytest

from constant_enum import SchemaValidationError, load_declarations, parse_declarations
from constant_enum.core.loader import load_schema, validate_declarations


DECLARATIONS = """\
enums:
  Genre:
    skate: 1
    surf: 2
    snow: 3
    bike: 4
  AssetType:
    photo: {id: 1, type: jpg, bucket: photos}
    video: {id: 2, type: mp4, bucket: videos}
    sound: {id: 3, type: mp4, bucket: sounds}
"""


def test_load_declarations(declarations_file) -> None:
    registries = load_declarations(declarations_file(DECLARATIONS))
    assert list(registries) == ["Genre", "AssetType"]

    genre = registries["Genre"]
    assert genre.type_name == "Genre"
    assert genre.names() == ["skate", "surf", "snow", "bike"]
    assert genre["surf"] == 2

    asset_type = registries["AssetType"]
    assert [e.name for e in asset_type.where(type="mp4")] == ["video", "sound"]
    assert asset_type.find(1).bucket == "photos"


def test_parse_declarations_with_titleize() -> None:
    registries = parse_declarations(DECLARATIONS, titleize=str.upper)
    assert registries["Genre"].dropdown()[0] == ("SKATE", "skate")


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_declarations(tmp_path / "missing.yaml")


def test_schema_violation_raises(declarations_file) -> None:
    path = declarations_file("enums:\n  Genre:\n    skate: fast\n")
    with pytest.raises(SchemaValidationError, match="Genre.skate") as excinfo:
        load_declarations(path)
    assert excinfo.value.context["source"] == str(path)
    assert excinfo.value.context["errors"]


@pytest.mark.parametrize(
    "payload",
    [
        None,
        {},
        {"enums": []},
        {"enums": {"Genre": None}},
        {"enums": {"AssetType": {"photo": {"type": "jpg"}}}},
        {"enums": {"Genre": {"skate": True}}},
        {"enums": {}, "extra": 1},
    ],
)
def test_validate_declarations_reports_errors(payload) -> None:
    assert validate_declarations(payload) != []


def test_validate_declarations_accepts_valid_payload() -> None:
    assert validate_declarations({"enums": {"Genre": {"skate": 1}, "Empty": {}}}) == []


def test_bundled_schema_loads() -> None:
    schema = load_schema()
    assert schema["required"] == ["enums"]


SWITCH = """\
enums:
  Switch:
    on: 1
    off: 0
    no: 2
    null: 3
  yes:
    y: {id: 1, on: true}
"""


def test_yaml_keywords_stay_entry_names() -> None:
    registries = parse_declarations(SWITCH)
    assert list(registries) == ["Switch", "yes"]

    switch = registries["Switch"]
    assert switch.names() == ["on", "off", "no", "null"]
    assert dict(switch.constants) == {"ON": 1, "OFF": 0, "NO": 2, "NULL": 3}
    assert switch.find_by_name("on").id == 1
    assert switch["off"] == 0

    entry = registries["yes"].find(1)
    assert entry.name == "y"
    assert entry.attributes["on"] is True


def test_yaml_keywords_stay_entry_names_from_file(declarations_file) -> None:
    registries = load_declarations(declarations_file(SWITCH))
    assert registries["Switch"].names() == ["on", "off", "no", "null"]
