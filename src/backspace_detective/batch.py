"""Per-file analysis of a mapping of file paths to editing stats."""

from __future__ import annotations

import json
import logging
from typing import Any

from backspace_detective.adapter import analyze_editing_pattern
from backspace_detective.errors import DecodeError

logger = logging.getLogger(__name__)


def analyze_per_file(payload: str | bytes) -> dict[str, dict[str, Any]]:
    """Analyze every file in a ``{path: stats}`` JSON object.

    Each entry is passed through ``analyze_editing_pattern`` on its own, so
    one malformed entry yields an error envelope for that path only.

    Args:
        payload: JSON object text keyed by file path.

    Returns:
        The decoded response for each path, in input order.

    Raises:
        DecodeError: If the payload is not a JSON object.
    """
    try:
        files = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError("Per-file payload is not valid JSON") from exc

    if not isinstance(files, dict):
        raise DecodeError("Per-file payload must be a JSON object keyed by file path")

    results: dict[str, dict[str, Any]] = {}
    for path, stats in files.items():
        results[path] = json.loads(analyze_editing_pattern(json.dumps(stats)))

    logger.debug("Analyzed %d file(s)", len(results))
    return results
