"""Utility helpers for constant enum registries.

- text: constant, slug and display-label derivation
"""
from __future__ import annotations

from .text import constant_name, humanize, slugify, titleize, underscore

__all__ = [
    "constant_name",
    "humanize",
    "slugify",
    "titleize",
    "underscore",
]
