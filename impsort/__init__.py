"""
impsort: classify and sort import declarations by ordered pattern groups.
"""

from __future__ import annotations

from .engine import classify_and_sort, flatten, match_group, render_groups
from .errors import ConfigurationError, ImpsortUserError
from .model import ClassifiedGroup, GroupConfiguration, GroupRule, ImportDeclaration, PatternSpec

__all__ = [
    "classify_and_sort",
    "flatten",
    "match_group",
    "render_groups",
    "ConfigurationError",
    "ImpsortUserError",
    "ClassifiedGroup",
    "GroupConfiguration",
    "GroupRule",
    "ImportDeclaration",
    "PatternSpec",
]
