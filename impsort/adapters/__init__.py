from __future__ import annotations

# Public API of adapters package:
#  • extract_imports: top-level imports of a TypeScript/TSX source
#  • ImportBlock: extracted declarations plus their source spans
from .typescript import ImportBlock, extract_imports

__all__ = ["ImportBlock", "extract_imports"]
