from __future__ import annotations
import json
import logging
from typing import Optional

logger = logging.getLogger(__name__)

# Defaults
DEFAULT_OPTIONS = {
    # pretty printer: a structure is kept on one line while indent + length < max_line_length
    "max_line_length": 80,
    "indent_width": 2,
    # reader: raise instead of closing unterminated lists / reading empty numbers as null
    "strict": False,
}


def merge_options(options: Optional[dict] = None) -> dict:
    if not options:
        return dict(DEFAULT_OPTIONS)
    if not isinstance(options, dict):
        raise ValueError(f"Options must be a mapping, got {type(options).__name__}")
    unknown = set(options) - set(DEFAULT_OPTIONS)
    if unknown:
        raise ValueError(f"Unknown options: {', '.join(sorted(unknown))}")
    return {**DEFAULT_OPTIONS, **options}


def load_options_from_json(json_str: str) -> dict:
    try:
        user_opts = json.loads(json_str)
    except json.JSONDecodeError as exc:
        logger.warning("Ignoring invalid options JSON: %s", exc)
        return dict(DEFAULT_OPTIONS)
    return merge_options(user_opts)
