"""Helpers for displaying endpoint results."""

from __future__ import annotations

import json
from typing import Any


def render_result(value: Any) -> str:
    """Pretty-print a parsed JSON value with 2-space indentation.

    Key order is kept as received and non-ASCII text is left readable.
    """

    return json.dumps(value, indent=2, ensure_ascii=False)


__all__ = ["render_result"]
