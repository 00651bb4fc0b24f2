# lims_core/results/identifiers.py
from __future__ import annotations

import enum
import re

CANONICAL_ID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


class IdentifierMatch(str, enum.Enum):
    EXACT = "exact"
    PARTIAL = "partial"


def classify_identifier(value: str) -> IdentifierMatch:
    """
    A full 8-4-4-4-12 hex identifier is matched exactly; anything else is a fragment.
    """
    if CANONICAL_ID_RE.fullmatch(value or ""):
        return IdentifierMatch.EXACT
    return IdentifierMatch.PARTIAL


def identifier_matches(candidate, query: str) -> bool:
    """
    In-memory matching rule for profile identifiers (case-insensitive).
    """
    c = str(candidate).lower()
    q = (query or "").lower()
    if classify_identifier(query) is IdentifierMatch.EXACT:
        return c == q
    return q in c
