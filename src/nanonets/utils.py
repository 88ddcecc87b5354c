"""Utility functions for the Nanonets SDK."""

import mimetypes
from pathlib import Path
from typing import Any, Mapping
from urllib.parse import quote

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def guess_content_type(filename: str | Path) -> str:
    """Guess the MIME type of a file from its name."""
    content_type, _ = mimetypes.guess_type(str(filename))
    return content_type or DEFAULT_CONTENT_TYPE


def expand_path(template: str, params: Mapping[str, Any]) -> str:
    """
    Fill a path template such as '/workflows/{workflow_id}'.

    Each value is percent-encoded as a single path segment, so an ID can't
    escape into a neighbouring segment.
    """
    encoded = {key: quote(str(value), safe="") for key, value in params.items()}
    try:
        return template.format(**encoded)
    except KeyError as exc:
        raise ValueError(f"Missing path parameter {exc.args[0]!r} for {template}") from exc


def form_value(value: Any) -> str:
    """Render a value as a multipart form field ('true'/'false' for booleans)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
