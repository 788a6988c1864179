"""Load registry declarations from YAML.

Declarations can live in a YAML document instead of code::

    enums:
      Genre:
        skate: 1
        surf: 2
      AssetType:
        photo: {id: 1, type: jpg, bucket: photos}
        video: {id: 2, type: mp4, bucket: videos}

Documents are validated against the bundled JSON Schema
(``data/schemas/declarations.schema.yaml``) before any registry is built.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml
from jsonschema import Draft202012Validator

from constant_enum.data import read_yaml
from constant_enum.utils.text import titleize as default_titleize

from .exceptions import SchemaValidationError
from .protocols import Titleizer
from .registry import Registry

logger = logging.getLogger(__name__)

SCHEMA_FILENAME = "declarations.schema.yaml"


class DeclarationLoader(yaml.SafeLoader):
    """SafeLoader that keeps scalar mapping keys as written.

    Plain YAML would read keys such as ``on``, ``no`` or ``null`` as booleans
    or None, renaming entries and merging ``off``/``no`` into one key.
    """


def _construct_mapping(loader: DeclarationLoader, node: yaml.MappingNode) -> Dict[Any, Any]:
    loader.flatten_mapping(node)
    mapping: Dict[Any, Any] = {}
    for key_node, value_node in node.value:
        if isinstance(key_node, yaml.ScalarNode):
            key = key_node.value
        else:
            key = loader.construct_object(key_node)
        mapping[key] = loader.construct_object(value_node)
    return mapping


DeclarationLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_mapping
)


def load_schema() -> Dict[str, Any]:
    """Return the bundled declarations schema."""
    schema = read_yaml("schemas", SCHEMA_FILENAME)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
    return schema


def validate_declarations(payload: Any) -> List[str]:
    """Validate a declarations payload and return error messages (empty if valid)."""
    validator = Draft202012Validator(load_schema())
    errors: List[str] = []
    for error in sorted(validator.iter_errors(payload), key=lambda e: str(list(e.path))):
        if error.path:
            path_str = ".".join(str(p) for p in error.path)
            errors.append(f"{path_str}: {error.message}")
        else:
            errors.append(error.message)
    return errors


def build_registries(
    payload: Any,
    *,
    titleize: Titleizer = default_titleize,
    source: str = "<payload>",
) -> Dict[str, Registry]:
    """Validate a parsed document and declare one registry per enum type.

    Raises:
        SchemaValidationError: If the document does not match the schema
    """
    errors = validate_declarations(payload)
    if errors:
        raise SchemaValidationError(
            f"Invalid declarations in {source}: " + "; ".join(errors),
            context={"source": source, "errors": errors},
        )

    registries: Dict[str, Registry] = {}
    for type_name, entries in payload["enums"].items():
        type_name = str(type_name)
        declared = {str(name): value for name, value in entries.items()}
        registries[type_name] = Registry.declare(type_name, declared, titleize=titleize)
    logger.debug("Loaded %d enum declarations from %s", len(registries), source)
    return registries


def parse_declarations(
    text: str,
    *,
    titleize: Titleizer = default_titleize,
) -> Dict[str, Registry]:
    """Build registries from a YAML string."""
    payload = yaml.load(text, Loader=DeclarationLoader)
    return build_registries(payload, titleize=titleize, source="<string>")


def load_declarations(
    path: Union[str, Path],
    *,
    titleize: Titleizer = default_titleize,
) -> Dict[str, Registry]:
    """Build registries from a YAML file.

    Raises:
        FileNotFoundError: If the file does not exist
        SchemaValidationError: If the document does not match the schema
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        payload = yaml.load(f, Loader=DeclarationLoader)
    return build_registries(payload, titleize=titleize, source=str(path))


__all__ = [
    "SCHEMA_FILENAME",
    "DeclarationLoader",
    "load_schema",
    "validate_declarations",
    "build_registries",
    "parse_declarations",
    "load_declarations",
]
