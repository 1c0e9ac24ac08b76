from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, List, Optional

from .checker import MESSAGE, check_file, fix_file
from .config import Settings, load_settings
from .errors import ImpsortUserError
from .fs import iter_source_files
from .report_schema import CheckReport, GroupsList
from .version import tool_version

_LOG = logging.getLogger("impsort")


def _jdumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.environ.get("IMPSORT_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if not _LOG.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        _LOG.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="impsort",
        description="Classify and sort import declarations by configured pattern groups",
        add_help=True,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {tool_version()}")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    p.add_argument(
        "--config",
        type=Path,
        metavar="PATH",
        help="config file (default: .impsort.yaml in the current directory, else built-in preset)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_check = sub.add_parser("check", help="report files whose imports are not sorted")
    sp_check.add_argument("paths", nargs="+", type=Path, help="files or directories")
    sp_check.add_argument("--json", action="store_true", help="print a JSON report")

    sp_fix = sub.add_parser("fix", help="rewrite unsorted import blocks in place")
    sp_fix.add_argument("paths", nargs="+", type=Path, help="files or directories")

    sp_render = sub.add_parser("render", help="print the sorted import block of one file")
    sp_render.add_argument("file", type=Path)

    sp_list = sub.add_parser("list", help="show active configuration (JSON)")
    sp_list.add_argument("what", choices=["groups"], help="what to list")

    return p


def _files(paths: List[Path], settings: Settings) -> List[Path]:
    return list(iter_source_files(
        paths,
        root=Path.cwd(),
        extensions=settings.extensions,
        ignores=settings.ignores,
    ))


def _cmd_check(ns: argparse.Namespace, settings: Settings) -> int:
    reports = [check_file(p, settings) for p in _files(ns.paths, settings)]
    bad = [r for r in reports if not r.sorted]
    if ns.json:
        result = CheckReport(files=[r.to_entry() for r in reports], unsorted=len(bad))
        sys.stdout.write(_jdumps(result.model_dump(mode="json", by_alias=True)))
    else:
        for r in bad:
            sys.stdout.write(f"{r.path}: {MESSAGE}\n")
    return 1 if bad else 0


def _cmd_fix(ns: argparse.Namespace, settings: Settings) -> int:
    rc = 0
    for p in _files(ns.paths, settings):
        report = fix_file(p, settings)
        if report.sorted:
            continue
        if report.fixable:
            sys.stdout.write(f"{p}: fixed\n")
        else:
            sys.stdout.write(f"{p}: {MESSAGE} (not fixable automatically)\n")
            rc = 1
    return rc


def _cmd_render(ns: argparse.Namespace, settings: Settings) -> int:
    report = check_file(ns.file, settings)
    if report.expected:
        sys.stdout.write(report.expected + "\n")
    return 0


def _cmd_list(ns: argparse.Namespace, settings: Settings) -> int:
    result = GroupsList(
        source=None if settings.source is None else settings.source.as_posix(),
        case_sensitive=settings.groups.case_sensitive,
        groups=settings.groups.to_list(),
        ignores=list(settings.ignores),
        extensions=list(settings.extensions),
    )
    sys.stdout.write(_jdumps(result.model_dump(mode="json", by_alias=True)))
    return 0


_COMMANDS = {
    "check": _cmd_check,
    "fix": _cmd_fix,
    "render": _cmd_render,
    "list": _cmd_list,
}


def main(argv: Optional[List[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(ns.verbose)

    try:
        settings = load_settings(Path.cwd(), ns.config)
        return _COMMANDS[ns.cmd](ns, settings)
    except ImpsortUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
