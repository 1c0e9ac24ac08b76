"""
Data model of the import classifier.

Declarations come from an adapter (or any caller), the group configuration
comes from user settings. Patterns are compiled once, in
GroupConfiguration.compile(), and reused for every file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .errors import ConfigurationError


@dataclass(frozen=True)
class ImportDeclaration:
    """A single import statement extracted from a source file."""
    raw_text: Optional[str]          # specifier used for matching (module path, marker text)
    is_type_only: bool = False       # `import type ...`
    original_index: int = 0          # position in the file, tie-break for sorting
    text: Optional[str] = None       # full statement source, used for rendering

    @property
    def rendered(self) -> str:
        if self.text is not None:
            return self.text
        return self.raw_text or ""


@dataclass(frozen=True)
class PatternSpec:
    """One configured pattern of a group."""
    source: str
    type_only: bool = False

    def to_config(self) -> Union[str, dict]:
        if self.type_only:
            return {"pattern": self.source, "type_only": True}
        return self.source


PatternInput = Union[str, PatternSpec, Mapping[str, Any]]


@dataclass(frozen=True)
class GroupRule:
    """
    One ordered slot of the configuration.

    A rule matches a declaration when ANY of its patterns matches.
    Type-only patterns additionally require decl.is_type_only.
    """
    index: int
    patterns: Tuple[PatternSpec, ...]
    compiled: Tuple[Tuple[re.Pattern, bool], ...] = field(repr=False, compare=False, default=())

    def matches(self, decl: ImportDeclaration) -> bool:
        text = decl.raw_text
        if not text:
            return False
        for regex, type_only in self.compiled:
            if type_only and not decl.is_type_only:
                continue
            if regex.search(text):
                return True
        return False


@dataclass(frozen=True)
class GroupConfiguration:
    """Ordered sequence of group rules. Order is caller-defined and never changed."""
    rules: Tuple[GroupRule, ...]
    case_sensitive: bool = False

    @property
    def catch_all_index(self) -> int:
        """Index of the implicit trailing group for unmatched declarations."""
        return len(self.rules)

    def to_list(self) -> List[List[Union[str, dict]]]:
        return [[p.to_config() for p in rule.patterns] for rule in self.rules]

    @classmethod
    def compile(cls, groups: Sequence[Sequence[PatternInput]], case_sensitive: bool = False) -> GroupConfiguration:
        """
        Build a configuration from raw group definitions.

        Args:
            groups: Ordered groups; each group is a list of pattern strings,
                PatternSpec objects or {pattern, type_only} mappings
            case_sensitive: Whether the in-group sort compares raw text case-sensitively

        Raises:
            ConfigurationError: On empty configuration or invalid pattern
        """
        if isinstance(groups, (str, bytes)) or not isinstance(groups, Sequence):
            raise ConfigurationError(f"groups must be a list of pattern lists, got {type(groups).__name__}")
        if not groups:
            raise ConfigurationError("at least one group is required")

        rules: List[GroupRule] = []
        for index, group in enumerate(groups):
            if isinstance(group, (str, bytes)) or not isinstance(group, Sequence):
                raise ConfigurationError(
                    f"group must be a list of patterns, got {type(group).__name__}",
                    group_index=index,
                )
            if not group:
                raise ConfigurationError("group has no patterns", group_index=index)

            specs = tuple(_pattern_spec(item, index) for item in group)
            rules.append(GroupRule(index=index, patterns=specs, compiled=_compile_specs(specs, index)))

        return cls(rules=tuple(rules), case_sensitive=bool(case_sensitive))


def _pattern_spec(item: PatternInput, group_index: int) -> PatternSpec:
    if isinstance(item, PatternSpec):
        return item
    if isinstance(item, str):
        return PatternSpec(source=item)
    if isinstance(item, Mapping):
        source = item.get("pattern")
        if not isinstance(source, str):
            raise ConfigurationError(
                f"pattern mapping needs a string 'pattern' key, got {item!r}",
                group_index=group_index,
            )
        unknown = set(item) - {"pattern", "type_only"}
        if unknown:
            raise ConfigurationError(
                f"unknown pattern keys {sorted(unknown)} in {item!r}",
                group_index=group_index,
                pattern=source,
            )
        return PatternSpec(source=source, type_only=bool(item.get("type_only", False)))
    raise ConfigurationError(
        f"pattern must be a string or a mapping, got {type(item).__name__}",
        group_index=group_index,
    )


def _compile_specs(specs: Iterable[PatternSpec], group_index: int) -> Tuple[Tuple[re.Pattern, bool], ...]:
    out = []
    for spec in specs:
        try:
            regex = re.compile(spec.source)
        except re.error as e:
            raise ConfigurationError(
                f"invalid pattern {spec.source!r}: {e}",
                group_index=group_index,
                pattern=spec.source,
            ) from e
        out.append((regex, spec.type_only))
    return tuple(out)


@dataclass(frozen=True)
class ClassifiedGroup:
    """Output unit: rule index plus the sorted declarations assigned to it."""
    index: int
    declarations: Tuple[ImportDeclaration, ...]
    is_catch_all: bool = False


__all__ = [
    "ImportDeclaration",
    "PatternSpec",
    "GroupRule",
    "GroupConfiguration",
    "ClassifiedGroup",
]
