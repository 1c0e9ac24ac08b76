"""
Tree-sitter infrastructure for import extraction.
Provides grammar loading hooks, named query cache and offset helpers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from tree_sitter import Language, Node, Parser, Query, QueryCursor, Tree


class TreeSitterDocument(ABC):
    """
    Wrapper for a Tree-sitter parsed document with named queries.
    """

    def __init__(self, text: str, ext: str):
        self.text = text
        self.ext = ext
        self.tree: Optional[Tree] = None
        self._text_bytes = text.encode("utf-8")
        self._query_cache: Dict[str, Query] = {}
        self._parse()

    @abstractmethod
    def get_language(self) -> Language:
        """Language instance for parser and queries."""
        pass

    @abstractmethod
    def get_query_definitions(self) -> Dict[str, str]:
        """Named query definitions (name -> S-expression) for this language."""
        pass

    def _parse(self) -> None:
        parser = Parser(self.get_language())
        self.tree = parser.parse(self._text_bytes)

    @property
    def root_node(self) -> Node:
        if not self.tree:
            raise RuntimeError("Document not parsed")
        return self.tree.root_node

    def query(self, query_name: str) -> List[Tuple[Node, str]]:
        """
        Execute a named query on the document.

        Returns:
            List of (node, capture_name) tuples ordered by position

        Raises:
            ValueError: If query is not defined for this language
        """
        query_definitions = self.get_query_definitions()
        if query_name not in query_definitions:
            raise ValueError(f"Unknown query: {query_name}")

        if query_name not in self._query_cache:
            self._query_cache[query_name] = Query(self.get_language(), query_definitions[query_name])

        cursor = QueryCursor(self._query_cache[query_name])
        results = []
        for _pattern_index, captures in cursor.matches(self.root_node):
            for capture_name, nodes in captures.items():
                for node in nodes:
                    results.append((node, capture_name))

        results.sort(key=lambda item: item[0].start_byte)
        return results

    def has_error(self) -> bool:
        if not self.tree:
            return True
        return self.root_node.has_error

    def get_node_text(self, node: Node) -> str:
        return self._text_bytes[node.start_byte:node.end_byte].decode("utf-8")

    def get_node_range(self, node: Node) -> Tuple[int, int]:
        """Char range for a node."""
        return self.byte_to_char_position(node.start_byte), self.byte_to_char_position(node.end_byte)

    def byte_to_char_position(self, byte_pos: int) -> int:
        """
        Convert a byte offset into a char offset in the Unicode text.
        An offset inside a multi-byte character maps to the position before it.
        """
        if byte_pos <= 0:
            return 0
        if byte_pos >= len(self._text_bytes):
            return len(self.text)

        # UTF-8 uses at most 4 bytes per character
        start = max(0, byte_pos - 4)
        for end in range(byte_pos, start - 1, -1):
            try:
                return len(self._text_bytes[:end].decode("utf-8"))
            except UnicodeDecodeError:
                continue
        return 0


__all__ = ["TreeSitterDocument"]
