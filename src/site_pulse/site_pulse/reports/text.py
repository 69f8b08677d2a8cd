from __future__ import annotations

import re
from typing import Iterable


def format_numbered(items: Iterable[str], prefix: str) -> str:
    """['a', '', 'b'] -> 'Activity 1: a\\nActivity 2: b' for prefix 'Activity'."""
    cleaned = [i.strip() for i in items if i and i.strip()]
    return "\n".join(f"{prefix} {idx}: {text}" for idx, text in enumerate(cleaned, start=1))


def parse_numbered(text: str, prefix: str) -> list[str]:
    """Inverse of format_numbered; lines without the prefix are kept as-is."""
    if not text:
        return []
    pattern = re.compile(rf"^{re.escape(prefix)} \d+:\s*", re.IGNORECASE)
    out = []
    for line in text.split("\n"):
        clean = pattern.sub("", line.strip()).strip()
        if clean:
            out.append(clean)
    return out
