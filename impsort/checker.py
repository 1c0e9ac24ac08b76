"""
Import block diagnostics and rewriting.

Compares the current top-level import block of a file with the
rendering produced by classify_and_sort(). Only the import block is
ever rewritten.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .adapters import ImportBlock, extract_imports
from .config import Settings
from .engine import classify_and_sort, render_groups
from .errors import ImpsortUserError
from .fs import read_text, write_text
from .model import ClassifiedGroup, GroupConfiguration
from .report_schema import FileEntry, GroupEntry

_LOG = logging.getLogger("impsort.checker")

MESSAGE = "imports are not correctly sorted/grouped"


@dataclass
class FileReport:
    path: Optional[Path]
    sorted: bool
    fixable: bool = True
    expected: str = ""
    groups: List[ClassifiedGroup] = field(default_factory=list)

    def to_entry(self) -> FileEntry:
        return FileEntry(
            path=None if self.path is None else self.path.as_posix(),
            sorted=self.sorted,
            fixable=self.fixable,
            groups=[
                GroupEntry(
                    index=g.index,
                    catch_all=g.is_catch_all,
                    imports=[d.raw_text for d in g.declarations],
                )
                for g in self.groups
            ],
        )


def _ext(path: Path) -> str:
    return path.suffix.lstrip(".").lower()


def detect_newline(text: str) -> str:
    return "\r\n" if "\r\n" in text else "\n"


def _report(block: ImportBlock, text: str, config: GroupConfiguration, path: Optional[Path]) -> FileReport:
    if not block:
        return FileReport(path=path, sorted=True, fixable=not block.has_error)
    groups = classify_and_sort(config, block.declarations)
    expected = render_groups(groups, newline=detect_newline(text))
    current = text[block.start:block.end]
    return FileReport(
        path=path,
        sorted=current == expected,
        fixable=block.contiguous and not block.has_error,
        expected=expected,
        groups=groups,
    )


def check_text(text: str, ext: str, config: GroupConfiguration, path: Optional[Path] = None) -> FileReport:
    """Check the import block of a source text."""
    return _report(extract_imports(text, ext), text, config, path)


def _fixed(text: str, ext: str, config: GroupConfiguration, path: Optional[Path]) -> Tuple[str, FileReport]:
    block = extract_imports(text, ext)
    report = _report(block, text, config, path)
    if report.sorted:
        return text, report
    if block.has_error:
        _LOG.warning("%s: syntax errors in file; not fixed", path or "<text>")
        return text, report
    if not block.contiguous:
        _LOG.warning("%s: import block is interleaved with other code; not fixed", path or "<text>")
        return text, report
    return text[:block.start] + report.expected + text[block.end:], report


def fix_text(text: str, ext: str, config: GroupConfiguration) -> str:
    """
    Return text with its import block replaced by the sorted rendering.

    Blocks interleaved with code, or files tree-sitter could not parse,
    are returned unchanged.
    """
    return _fixed(text, ext, config, None)[0]


def _read(path: Path) -> str:
    try:
        return read_text(path)
    except (OSError, UnicodeDecodeError) as e:
        raise ImpsortUserError(f"{path}: cannot read file: {e}")


def check_file(path: Path, settings: Settings) -> FileReport:
    report = check_text(_read(path), _ext(path), settings.groups, path=path)
    _LOG.debug("%s: sorted=%s", path, report.sorted)
    return report


def fix_file(path: Path, settings: Settings) -> FileReport:
    """
    Rewrite the import block of a file if needed.

    Returns:
        Report for the file as it was before the rewrite
    """
    text = _read(path)
    fixed, report = _fixed(text, _ext(path), settings.groups, path)
    if fixed == text:
        return report
    write_text(path, fixed)
    _LOG.info("%s: imports sorted", path)
    return report


__all__ = ["MESSAGE", "FileReport", "detect_newline", "check_text", "fix_text", "check_file", "fix_file"]
