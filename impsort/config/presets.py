"""
Built-in defaults used when no configuration file is present.

The group list reproduces the import ordering of the Next.js/React
lint setup this tool was written for: type-only imports first, then
framework, library, alias, relative, asset and style imports.
"""

from __future__ import annotations

from typing import List, Union

DEFAULT_GROUPS: List[List[Union[str, dict]]] = [
    [{"pattern": r".*", "type_only": True}],
    [r"^next/*"],
    [r"^react", r"^react-dom", r"^react-router", r"^react-router-dom", r"^react-dom/client"],
    [
        r"^@reduxjs",
        r"^@tanstack",
        r"^styled-components",
        r"^nextui",
        r"^react-.*",
        r"^swiper",
        r"^formik",
        r"^react-hook-form",
        r"@hookform/*",
        r"^@react-oauth",
        r"^@react-icons",
    ],
    [r"^@*"],
    [
        r"^@query",
        r"^@services",
        r"^@store",
        r"^@slices",
        r"^@context",
        r"^@reducers",
        r"^@layout",
        r"^@pages",
        r"^@components",
        r"^@hooks",
        r"^@helpers",
        r"^@utils",
        r"^@constants",
        r"^@types",
    ],
    [
        r"^./query",
        r"^./services",
        r"^./store",
        r"^./slices",
        r"^./context",
        r"^./reducers",
        r"^./components",
        r"^./pages",
        r"^./hooks",
        r"^./helpers",
        r"^./utils",
        r"^./constants",
        r"^./types",
    ],
    [r"^@/actions"],
    [r"^\./", r"^\../"],
    [r"^@storybook", r"^@assets", r"^./assets/*", r"^.*\.svg$"],
    [r"^prisma*"],
    [r"^@/db"],
    [r"^.*\.(ts|tsx)$"],
    [r"^.*\.(css|scss)$"],
]

DEFAULT_IGNORES: List[str] = ["node_modules", "src/generated/**", ".next", "next-env.d.ts"]

DEFAULT_EXTENSIONS: List[str] = [".ts", ".tsx"]

# Matches the member-ordering style of the same setup (alphabetically-case-insensitive).
DEFAULT_CASE_SENSITIVE = False

__all__ = ["DEFAULT_GROUPS", "DEFAULT_IGNORES", "DEFAULT_EXTENSIONS", "DEFAULT_CASE_SENSITIVE"]
