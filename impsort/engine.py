"""
Import classification and sorting.

Single-pass pure transform: match every declaration against the ordered
rules (first match wins), partition by rule index, stable-sort each
partition and emit non-empty groups in configuration order.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from .model import ClassifiedGroup, GroupConfiguration, ImportDeclaration

_LOG = logging.getLogger("impsort.engine")


def match_group(config: GroupConfiguration, decl: ImportDeclaration) -> int:
    """
    Return the index of the first rule matching the declaration.

    Declarations without raw text, or matched by no rule, go to
    the catch-all group (config.catch_all_index).
    """
    if not decl.raw_text:
        return config.catch_all_index
    for rule in config.rules:
        if rule.matches(decl):
            return rule.index
    return config.catch_all_index


def sort_key(config: GroupConfiguration, decl: ImportDeclaration) -> Tuple[str, int]:
    text = decl.raw_text or ""
    if not config.case_sensitive:
        text = text.casefold()
    return text, decl.original_index


def classify_and_sort(config: GroupConfiguration, imports: Sequence[ImportDeclaration]) -> List[ClassifiedGroup]:
    """
    Classify declarations into configured groups and sort each group.

    Args:
        config: Compiled group configuration
        imports: Declarations in original source order

    Returns:
        Non-empty groups in configuration order; the catch-all group, if any, is last
    """
    if not imports:
        return []

    partitions: Dict[int, List[ImportDeclaration]] = {}
    for decl in imports:
        index = match_group(config, decl)
        partitions.setdefault(index, []).append(decl)
        _LOG.debug("import %r -> group %d", decl.raw_text, index)

    groups: List[ClassifiedGroup] = []
    for index in sorted(partitions):
        members = sorted(partitions[index], key=lambda d: sort_key(config, d))
        groups.append(ClassifiedGroup(
            index=index,
            declarations=tuple(members),
            is_catch_all=index == config.catch_all_index,
        ))
    return groups


def flatten(groups: Iterable[ClassifiedGroup]) -> List[ImportDeclaration]:
    return [decl for group in groups for decl in group.declarations]


def render_groups(groups: Iterable[ClassifiedGroup], newline: str = "\n") -> str:
    """
    Serialize groups: one declaration per line, exactly one blank line
    between consecutive non-empty groups, no trailing newline.
    """
    blocks = [
        newline.join(decl.rendered for decl in group.declarations)
        for group in groups
        if group.declarations
    ]
    return (newline * 2).join(blocks)


__all__ = ["match_group", "sort_key", "classify_and_sort", "flatten", "render_groups"]
