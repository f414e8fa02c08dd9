"""
Product Normalizer
Rewrites free-text product names into standard catalog names
"""
from typing import List, Tuple

from .rules import ProductRuleTable


class ProductNormalizer:
    """Applies keyword rules to raw product text"""

    def __init__(self, rule_table: ProductRuleTable):
        # Snapshot; blank keywords can never be added to a table
        self._rules: List[Tuple[str, str]] = list(rule_table.items())

    def normalize(self, raw: str) -> str:
        """
        Normalize a product name

        Args:
            raw: Raw product text (e.g., "반숙란 30개입 특가")

        Returns:
            Standard name of the first keyword contained in the text
            (e.g., "반숙란 30구"), or the raw text unchanged when it is
            blank or no keyword matches
        """
        if not raw or not raw.strip():
            return raw

        for keyword, standard_name in self._rules:
            if keyword in raw:
                return standard_name

        return raw


def normalize_product(raw: str, rule_table: ProductRuleTable) -> str:
    """Normalize one product name against a product rule table."""
    return ProductNormalizer(rule_table).normalize(raw)
