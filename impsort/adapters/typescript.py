"""
TypeScript/TSX import extraction using the Tree-sitter AST.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Tuple

from tree_sitter import Language, Node

from ..model import ImportDeclaration
from .tree_sitter_support import TreeSitterDocument

QUERIES = {
    # Top-level import statements only; imports nested in namespaces are left alone
    "imports": """
    (program (import_statement) @import)
    """,

    "comments": """
    (program (comment) @comment)
    """,
}


class TypeScriptDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_typescript as tsts
        # TS and TSX have two different grammars in one package
        if self.ext == "tsx":
            return Language(tsts.language_tsx())
        return Language(tsts.language_typescript())

    def get_query_definitions(self) -> Dict[str, str]:
        return QUERIES


@dataclass
class ImportBlock:
    """Top-level imports of one file, in source order."""
    declarations: List[ImportDeclaration] = field(default_factory=list)
    spans: List[Tuple[int, int]] = field(default_factory=list)   # char ranges of statements
    contiguous: bool = True                                      # only whitespace and comments between statements
    has_error: bool = False                                      # tree-sitter reported syntax errors

    @property
    def start(self) -> int:
        return self.spans[0][0] if self.spans else 0

    @property
    def end(self) -> int:
        return self.spans[-1][1] if self.spans else 0

    def __bool__(self) -> bool:
        return bool(self.declarations)


def _module_specifier(doc: TypeScriptDocument, node: Node) -> Optional[str]:
    source = node.child_by_field_name("source")
    if source is None:
        for child in node.children:
            if child.type == "string":
                source = child
                break
            if child.type == "import_require_clause":
                # import x = require('y')
                source = next((c for c in child.children if c.type == "string"), None)
                break
    if source is None:
        return None
    return doc.get_node_text(source).strip("'\"`")


def _is_type_only(node: Node) -> bool:
    # `import type { A } from 'x'` carries an anonymous "type" keyword child
    for child in node.children:
        if child.type == "type":
            return True
        if child.type in ("import_clause", "string"):
            break
    return False


def _without(text: str, start: int, end: int, cuts: List[Tuple[int, int]]) -> str:
    """text[start:end] with the given char ranges removed."""
    out = []
    pos = start
    for s, e in cuts:
        out.append(text[pos:s])
        pos = e
    out.append(text[pos:end])
    return "".join(out)


def extract_imports(text: str, ext: str) -> ImportBlock:
    """
    Collect top-level import statements of a TypeScript source.

    Comments between two imports travel with the import below them;
    a comment on the same line as an import stays with that import.
    Comments above the first import are not part of the block.

    Args:
        text: File contents
        ext: File extension without dot ("ts", "tsx", ...)

    Returns:
        ImportBlock with one declaration per statement
    """
    doc = TypeScriptDocument(text, ext.lstrip(".").lower())
    block = ImportBlock(has_error=doc.has_error())

    items = doc.query("imports") + doc.query("comments")
    items.sort(key=lambda item: item[0].start_byte)

    pending: List[Tuple[int, int]] = []   # comments seen since the previous import
    last_row = -1

    for node, capture in items:
        start, end = doc.get_node_range(node)

        if capture == "comment":
            if (block.spans and not pending and node.start_point[0] == last_row
                    and not text[block.spans[-1][1]:start].strip()):
                lead, _ = block.spans[-1]
                block.spans[-1] = (lead, end)
                block.declarations[-1] = replace(block.declarations[-1], text=text[lead:end])
            else:
                pending.append((start, end))
            continue

        lead = start
        if block.spans:
            prev_end = block.spans[-1][1]
            if _without(text, prev_end, start, pending).strip():
                block.contiguous = False
            elif pending:
                lead = pending[0][0]
        pending = []
        last_row = node.end_point[0]

        block.spans.append((lead, end))
        block.declarations.append(ImportDeclaration(
            raw_text=_module_specifier(doc, node),
            is_type_only=_is_type_only(node),
            original_index=len(block.declarations),
            text=text[lead:end],
        ))

    return block


__all__ = ["TypeScriptDocument", "ImportBlock", "extract_imports"]
