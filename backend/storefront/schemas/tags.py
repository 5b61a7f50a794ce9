# storefront/schemas/tags.py
"""
Tag (de)serialization shared by FAQ, blog post and product records.

Tags live in the record store as JSON array text. Every reader goes through
``parse_tags`` so malformed values never surface as errors.
"""
import json
from typing import Any, Iterable, List


def parse_tags(raw: Any) -> List[str]:
    """
    Convert a stored tag value into a list of strings.

    Args:
        raw: JSON text such as '["결제", "카드"]', an already decoded list, or None

    Returns:
        List[str]: The tags; an empty list when the value is missing, is not
        valid JSON, or does not decode to a list. Non-string items are dropped.
    """
    if raw is None or raw == "":
        return []
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            return []
    if not isinstance(raw, list):
        return []
    return [t for t in raw if isinstance(t, str)]


def dump_tags(tags: Iterable[str] | None) -> str:
    """Serialize tags to JSON array text (Korean text stays readable)."""
    return json.dumps(list(tags or []), ensure_ascii=False)
