"""
JSON report schemas for the CLI (check --json, list groups).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class GroupEntry(_Schema):
    index: int
    catch_all: bool = Field(alias="catchAll")
    imports: List[Optional[str]]


class FileEntry(_Schema):
    path: Optional[str] = None
    sorted: bool
    fixable: bool
    groups: List[GroupEntry] = Field(default_factory=list)


class CheckReport(_Schema):
    files: List[FileEntry] = Field(default_factory=list)
    unsorted: int = 0


class GroupsList(_Schema):
    source: Optional[str] = None
    case_sensitive: bool = Field(alias="caseSensitive")
    groups: List[List[Union[str, Dict[str, Any]]]]
    ignores: List[str]
    extensions: List[str]


__all__ = ["GroupEntry", "FileEntry", "CheckReport", "GroupsList"]
