import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'constant_enum'
for p in (SRC_ROOT, TESTS_ROOT):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


from constant_enum import Registry


@pytest.fixture
def genre() -> Registry:
    """Plain ``name: id`` declaration."""
    return Registry.declare(
        "Genre",
        {
            "skate": 1,
            "surf": 2,
            "snow": 3,
            "bike": 4,
        },
    )


@pytest.fixture
def asset_type() -> Registry:
    """Attribute-map declaration."""
    return Registry.declare(
        "AssetType",
        {
            "photo": {"id": 1, "type": "jpg", "bucket": "photos"},
            "video": {"id": 2, "type": "mp4", "bucket": "videos"},
            "sound": {"id": 3, "type": "mp4", "bucket": "sounds"},
        },
    )


@pytest.fixture
def empty_enum() -> Registry:
    """Registry that was never declared."""
    return Registry("EmptyEnum")


@pytest.fixture
def declarations_file(tmp_path):
    """Write a YAML declarations document and return its path."""

    def _write(content: str, name: str = "enums.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
