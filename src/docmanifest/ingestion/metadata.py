"""Title and description extraction from Markdown documents."""

from __future__ import annotations

import re
from typing import Dict

DEFAULT_TITLE = "Untitled"

_FRONTMATTER = re.compile(r"\A---\r?\n(.*?)\r?\n---", re.DOTALL)
_FIELD = r"^{name}:\s*[\"']?([^\"'\r\n]+)[\"']?"
_HEADING = re.compile(r"^#\s+(.+?)\s*$", re.MULTILINE)


def extract_frontmatter(content: str) -> Dict[str, str]:
    """Return the ``title`` and ``description`` keys of a leading front matter block."""
    match = _FRONTMATTER.match(content)
    if not match:
        return {}
    block = match.group(1)
    fields: Dict[str, str] = {}
    for name in ("title", "description"):
        found = re.search(_FIELD.format(name=name), block, re.MULTILINE)
        if found:
            value = found.group(1).strip()
            if value:
                fields[name] = value
    return fields


def extract_title(content: str) -> str:
    """Front matter title, else the first level-1 heading, else ``DEFAULT_TITLE``."""
    title = extract_frontmatter(content).get("title")
    if title:
        return title
    heading = _HEADING.search(content)
    if heading:
        return heading.group(1)
    return DEFAULT_TITLE


def extract_description(content: str) -> str | None:
    return extract_frontmatter(content).get("description")
