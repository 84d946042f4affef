from __future__ import annotations

import json
import re

from conduct_checker.errors import ProtocolError

# A single fenced block spanning the whole reply, with an optional language tag.
_FENCED_BLOCK = re.compile(r"\A```[\w+-]*[ \t]*\n?(.*?)\s*```\Z", re.DOTALL)


def strip_markdown_fences(content: str) -> str:
    """Remove a markdown code fence (```json ... ```) wrapping a JSON payload.

    Text that is not entirely one fenced block is returned unchanged apart
    from surrounding whitespace.
    """
    text = content.strip()
    match = _FENCED_BLOCK.match(text)
    if match:
        return match.group(1).strip()
    return text


def parse_json_object(content: str) -> dict:
    """Parse a JSON object, raising :class:`ProtocolError` for anything else."""
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ProtocolError(f"Reply is not valid JSON: {content!r}") from exc
    if not isinstance(data, dict):
        raise ProtocolError(f"Reply is not a JSON object: {content!r}")
    return data
