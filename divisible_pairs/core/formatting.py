"""Formatting utilities for counting results."""

from __future__ import annotations

import json
from collections.abc import Sequence

from divisible_pairs.core.errors import PairCountError
from divisible_pairs.core.models import PairCountResult


def _format_pair(pair: tuple[int, int], values: Sequence[int] | None) -> str:
    i, j = pair
    if values is None:
        return f"{i} {j}"
    return f"{i} {j} ({values[i]} + {values[j]} = {values[i] + values[j]})"


def format_result(
    result: PairCountResult, output_format: str = "text", values: Sequence[int] | None = None
) -> str:
    """Render a result for stdout.

    Text output is the bare count, followed by one line per pair when pairs
    were collected. ``values`` adds the summed elements to each pair line.
    """
    if output_format == "json":
        return json.dumps(result.to_dict())

    lines = [str(result.count)]
    for pair in result.pairs or []:
        lines.append(_format_pair(pair, values))
    return "\n".join(lines)


def format_error(error: PairCountError, output_format: str = "text") -> str:
    if output_format == "json":
        return json.dumps({"error": error.to_dict()})
    return f"Error: {error.message}"
