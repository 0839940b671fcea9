"""Models package re-exports.

Allows `from divisible_pairs.core.models import PairCountRequest` imports by
re-exporting from the implementation module.
"""

from __future__ import annotations

from .models import PairCountRequest, PairCountResult

__all__ = ["PairCountRequest", "PairCountResult"]
