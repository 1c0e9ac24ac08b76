from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Sequence

import pathspec


# newline="" keeps CRLF files byte-faithful on read and write
def read_text(path: Path) -> str:
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


def write_text(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as f:
        f.write(text)


def build_ignore_spec(patterns: Sequence[str]) -> Optional[pathspec.PathSpec]:
    """PathSpec for gitignore-style patterns. None if there are none."""
    lines = [ln.strip() for ln in patterns if ln.strip() and not ln.strip().startswith("#")]
    if not lines:
        return None
    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def _rel_posix(path: Path, root: Path) -> Optional[str]:
    try:
        return path.resolve().relative_to(root).as_posix()
    except ValueError:
        # outside root: ignore patterns do not apply
        return None


def _ignored(spec: Optional[pathspec.PathSpec], rel: Optional[str], is_dir: bool = False) -> bool:
    if spec is None or rel is None or rel == ".":
        return False
    return spec.match_file(rel + "/" if is_dir else rel)


def _walk(
    top: Path,
    root: Path,
    extensions: Sequence[str],
    spec: Optional[pathspec.PathSpec],
) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(top):
        # Do not enter .git; prune ignored branches early (in-place)
        keep: List[str] = []
        for d in sorted(dirnames):
            if d == ".git":
                continue
            if _ignored(spec, _rel_posix(Path(dirpath, d), root), is_dir=True):
                continue
            keep.append(d)
        dirnames[:] = keep

        for fn in sorted(filenames):
            p = Path(dirpath, fn)
            if p.suffix.lower() not in extensions:
                continue
            if _ignored(spec, _rel_posix(p, root)):
                continue
            yield p


def iter_source_files(
    paths: Iterable[Path],
    *,
    root: Path,
    extensions: Sequence[str],
    ignores: Sequence[str],
) -> Iterator[Path]:
    """
    Expand files and directories into source files to process.

    Explicitly named files are yielded even when their extension is not
    configured; ignore patterns (relative to root) apply to both.
    """
    root = root.resolve()
    spec = build_ignore_spec(ignores)
    exts = [e.lower() for e in extensions]
    seen = set()

    for p in paths:
        if p.is_dir():
            if _ignored(spec, _rel_posix(p, root), is_dir=True):
                continue
            candidates: Iterable[Path] = _walk(p, root, exts, spec)
        elif _ignored(spec, _rel_posix(p, root)):
            continue
        else:
            candidates = [p]
        for c in candidates:
            key = c.resolve()
            if key in seen:
                continue
            seen.add(key)
            yield c


__all__ = ["read_text", "write_text", "build_ignore_spec", "iter_source_files"]
