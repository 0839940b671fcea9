"""divisible_pairs.core package (lightweight).

Submodules are imported explicitly where needed.
"""

from __future__ import annotations

__all__: list[str] = []
