from __future__ import annotations

from pathlib import Path
from typing import Optional

CONFIG_FILENAMES = (".impsort.yaml", ".impsort.yml")


def find_config(root: Path) -> Optional[Path]:
    """First existing config file in root, or None."""
    for name in CONFIG_FILENAMES:
        p = (root / name).resolve()
        if p.is_file():
            return p
    return None


__all__ = ["CONFIG_FILENAMES", "find_config"]
