import importlib.util
import json
import os
import subprocess
import sys
import textwrap
from pathlib import Path

import pytest

from impsort import GroupConfiguration, ImportDeclaration

REPO_ROOT = Path(__file__).resolve().parents[1]


def write(p: Path, text: str) -> Path:
    """Write text to a file, creating parent directories as needed."""
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def decls(*raw: str) -> list[ImportDeclaration]:
    """Declarations with original indices 0..n-1 in the given order."""
    return [ImportDeclaration(raw_text=r, original_index=i) for i, r in enumerate(raw)]


def raw_groups(groups) -> list[list[str]]:
    return [[d.raw_text for d in g.declarations] for g in groups]


def run_cli(root: Path, *args: str) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    env.pop("IMPSORT_DEBUG", None)
    return subprocess.run(
        [sys.executable, "-m", "impsort.cli", *args],
        cwd=root, env=env, capture_output=True, text=True, encoding="utf-8"
    )


def jload(s: str):
    return json.loads(s)


def is_tree_sitter_available() -> bool:
    return (
        importlib.util.find_spec("tree_sitter") is not None
        and importlib.util.find_spec("tree_sitter_typescript") is not None
    )


@pytest.fixture
def skip_if_no_tree_sitter():
    """Skip test if Tree-sitter or the TypeScript grammar is not available."""
    if not is_tree_sitter_available():
        pytest.skip("Tree-sitter not available")


@pytest.fixture
def sample_config() -> GroupConfiguration:
    return GroupConfiguration.compile([["^react"], ["^@/"], [r"^\./"]])


@pytest.fixture
def tmpproj(tmp_path: Path) -> Path:
    """Minimal project: .impsort.yaml plus an unsorted and a sorted TS file."""
    root = tmp_path
    write(
        root / ".impsort.yaml",
        textwrap.dedent("""
        case_sensitive: false
        ignores: ["node_modules", "src/generated/**"]
        groups:
          - [{pattern: ".*", type_only: true}]
          - ["^react"]
          - ["^@/"]
          - ["^\\\\./"]
        """).strip() + "\n",
    )
    write(
        root / "src" / "app.tsx",
        textwrap.dedent("""
        import { b } from './b';
        import ReactDOM from 'react-dom';
        import { util } from '@/utils';
        import type { Props } from './types';
        import React from 'react';

        export const App = () => null;
        """).lstrip(),
    )
    write(
        root / "src" / "ok.ts",
        textwrap.dedent("""
        import React from 'react';

        import { a } from './a';

        export const ok = 1;
        """).lstrip(),
    )
    write(root / "src" / "generated" / "client.ts", "import { z } from './z';\nimport { a } from './a';\n")
    write(root / "node_modules" / "pkg" / "index.ts", "import { z } from './z';\nimport { a } from './a';\n")
    return root
