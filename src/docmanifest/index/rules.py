"""Category and tag rules applied to documents.

Both tables are ordered data. Category rules are tried in order and the first
directory segment match wins; tag rules are case-sensitive substring searches
over the document content.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

DEFAULT_CATEGORY = "general"

CATEGORY_RULES: Tuple[Tuple[str, str], ...] = (
    ("contracts", "contracts"),
    ("processes", "processes"),
    ("governance", "governance"),
    ("tokenomics", "tokenomics"),
    ("architecture", "architecture"),
    ("investor-deck", "investor"),
    ("technical", "technical"),
    ("mcp-integration", "mcp"),
)

TAG_RULES: Tuple[Tuple[str, str], ...] = (
    ("RiskEngine", "risk"),
    ("slashing", "slashing"),
    ("governance", "governance"),
    ("zkSync", "zksync"),
    ("fund", "fund"),
)


def categorize(
    path: str,
    rules: Sequence[Tuple[str, str]] = CATEGORY_RULES,
    default: str = DEFAULT_CATEGORY,
) -> str:
    """Return the label of the first rule whose segment is a directory of ``path``."""
    directories = path.split("/")[:-1]
    for segment, label in rules:
        if segment in directories:
            return label
    return default


def extract_tags(
    category: str,
    content: str,
    rules: Sequence[Tuple[str, str]] = TAG_RULES,
) -> List[str]:
    """Category first, then every keyword-triggered tag, without duplicates."""
    tags = [category]
    for keyword, label in rules:
        if keyword in content and label not in tags:
            tags.append(label)
    return tags
