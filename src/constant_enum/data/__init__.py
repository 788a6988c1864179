"""Files shipped inside the package, currently the declarations schema."""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """Locate ``constant_enum/data/<subpackage>[/<filename>]`` on disk."""
    root = Path(str(resources.files("constant_enum.data") / subpackage))
    if not filename:
        return root
    return root / filename


@lru_cache(maxsize=16)
def read_yaml(subpackage: str, filename: str) -> Any:
    # Bundled files never change at runtime, so one parse per file is enough.
    text = get_data_path(subpackage, filename).read_text(encoding="utf-8")
    return yaml.safe_load(text)


__all__ = ["get_data_path", "read_yaml"]
