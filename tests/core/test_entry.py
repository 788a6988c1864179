"""Tests for Entry behavior."""
from __future__ import annotations

import dataclasses

import pytest

from constant_enum import Entry, Identifiable, Registry


def test_plain_entry_derives_from_name_and_id(genre: Registry) -> None:
    entry = genre.find(1)
    assert entry.attributes is None
    assert entry.slug == "skate"
    assert entry.title == "Skate"
    assert str(entry) == "skate"
    assert entry.to_param() == "1"


def test_attribute_access(asset_type: Registry) -> None:
    video = asset_type.find_by_name("video")
    assert video.type == "mp4"
    assert video.bucket == "videos"
    assert video.attributes["id"] == 2


def test_unknown_attribute_raises(asset_type: Registry) -> None:
    photo = asset_type.find(1)
    with pytest.raises(AttributeError, match="'delivery_type'"):
        photo.delivery_type
    assert getattr(photo, "delivery_type", None) is None
    assert not hasattr(photo, "delivery_type")


def test_native_fields_win_over_attributes() -> None:
    registry = Registry.declare("Odd", {"real": {"id": 1, "slug": "fake", "label": "Real one"}})
    entry = registry.find(1)
    assert entry.slug == "real"
    assert entry.label == "Real one"
    assert entry.attributes["slug"] == "fake"


def test_entries_are_immutable(asset_type: Registry) -> None:
    photo = asset_type.find(1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        photo.id = 9  # type: ignore[misc]
    with pytest.raises(TypeError):
        photo.attributes["bucket"] = "other"  # type: ignore[index]


def test_attributes_are_copied_from_declaration() -> None:
    declared = {"id": 1, "bucket": "photos"}
    registry = Registry.declare("AssetType", {"photo": declared})
    declared["bucket"] = "changed"
    assert registry.find(1).bucket == "photos"


def test_slug_strips_non_word_characters() -> None:
    entry = Entry(name="Rock & Roll!", id=1)
    assert entry.slug == "rockroll"


def test_title_uses_titleize() -> None:
    entry = Entry(name="asset_type", id=1)
    assert entry.title == "Asset Type"


def test_entries_are_hashable(genre: Registry, asset_type: Registry) -> None:
    assert len(set(genre)) == 4
    assert len({e: e.id for e in asset_type}) == 3


def test_to_dict(asset_type: Registry, genre: Registry) -> None:
    assert asset_type.find(1).to_dict() == {"name": "photo", "id": 1, "type": "jpg", "bucket": "photos"}
    assert genre.find(2).to_dict() == {"name": "surf", "id": 2}


def test_entry_is_identifiable(genre: Registry) -> None:
    assert isinstance(genre.find(1), Identifiable)


def test_copy_and_replace(asset_type: Registry) -> None:
    import copy

    photo = asset_type.find(1)
    assert copy.copy(photo) == photo
    assert copy.deepcopy(photo) == photo
    assert dataclasses.replace(photo, id=7).id == 7
