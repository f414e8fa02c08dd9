"""
Header Resolver
Maps a raw spreadsheet column name to the canonical field it represents
"""
import re
from typing import Dict, List, Optional, Tuple

from .fields import CanonicalField
from .rules import HeaderRuleTable

_WHITESPACE = re.compile(r"\s+")


def _normalize_header(text) -> str:
    """Remove all whitespace and fold case for comparison."""
    return _WHITESPACE.sub("", str(text)).casefold()


class HeaderResolver:
    """Resolves column names against a snapshot of a header rule table"""

    def __init__(self, rule_table: HeaderRuleTable):
        """
        Args:
            rule_table: Header synonyms. Read once here; later edits to the
                        table do not affect this resolver.
        """
        self._candidates: List[Tuple[CanonicalField, List[str]]] = []
        for field, synonyms in rule_table.items():
            normalized = [_normalize_header(s) for s in synonyms]
            self._candidates.append((field, [s for s in normalized if s]))
        self._resolved: Dict[str, Optional[CanonicalField]] = {}

    def resolve(self, raw_header) -> Optional[CanonicalField]:
        """
        Resolve a raw column name

        Matching precedence:
        1. Exact match against any synonym (first field in table order)
        2. Header contains a synonym, or a synonym contains the header
           (first field in table order)

        Returns:
            The canonical field, or None when the column is not recognized
        """
        key = str(raw_header)
        if key not in self._resolved:
            self._resolved[key] = self._match(_normalize_header(key))
        return self._resolved[key]

    def _match(self, header: str) -> Optional[CanonicalField]:
        # A blank header would be a substring of every synonym
        if not header:
            return None

        for field, synonyms in self._candidates:
            if header in synonyms:
                return field

        for field, synonyms in self._candidates:
            if any(s in header or header in s for s in synonyms):
                return field

        return None


def resolve_header(raw_header, rule_table: HeaderRuleTable) -> Optional[CanonicalField]:
    """Resolve one column name against a header rule table."""
    return HeaderResolver(rule_table).resolve(raw_header)
