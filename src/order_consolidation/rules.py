"""
Rule Tables
User-editable header synonyms and product keyword rules.

Both tables are plain ordered data: the resolver and normalizer walk them in
iteration order, so the order entries were added in is part of their meaning.
"""
from typing import Dict, Iterator, List, Optional, Tuple

import config
from .fields import CanonicalField, RESOLVABLE_FIELDS, to_field


class HeaderRuleTable:
    """Canonical field -> ordered synonym list. The field keys are fixed."""

    def __init__(self, mapping: Optional[Dict] = None):
        """
        Args:
            mapping: {field: [synonym, ...]} keyed by CanonicalField or its
                     string value. None loads config.DEFAULT_HEADER_MAPPING.
                     Fields left out get an empty synonym list.
        """
        self._synonyms: Dict[CanonicalField, List[str]] = {
            field: [] for field in RESOLVABLE_FIELDS
        }
        if mapping is None:
            mapping = config.DEFAULT_HEADER_MAPPING

        for key, synonyms in mapping.items():
            field = self._check_field(key)
            for synonym in synonyms:
                self.add_synonym(field, synonym)

    @staticmethod
    def _check_field(key) -> CanonicalField:
        field = to_field(key)
        if field not in RESOLVABLE_FIELDS:
            raise ValueError(
                f"'{field.value}' is filled in by the consolidator and cannot have synonyms"
            )
        return field

    @classmethod
    def defaults(cls) -> 'HeaderRuleTable':
        return cls(config.DEFAULT_HEADER_MAPPING)

    @classmethod
    def from_dict(cls, data: Dict) -> 'HeaderRuleTable':
        return cls(data or {})

    def to_dict(self) -> Dict[str, List[str]]:
        return {field.value: list(synonyms) for field, synonyms in self._synonyms.items()}

    def copy(self) -> 'HeaderRuleTable':
        return HeaderRuleTable(self.to_dict())

    def synonyms(self, field) -> List[str]:
        return list(self._synonyms[self._check_field(field)])

    def items(self) -> Iterator[Tuple[CanonicalField, List[str]]]:
        """Yield (field, synonyms) in the fixed field order."""
        for field in RESOLVABLE_FIELDS:
            yield field, list(self._synonyms[field])

    def add_synonym(self, field, synonym: str) -> bool:
        """
        Add a column-name synonym to a field

        Returns:
            True if added, False if the field already had it
        """
        field = self._check_field(field)
        synonym = str(synonym).strip()
        if not synonym:
            raise ValueError("Synonym must not be blank")

        if synonym in self._synonyms[field]:
            return False
        self._synonyms[field].append(synonym)
        return True

    def remove_synonym(self, field, synonym: str) -> bool:
        field = self._check_field(field)
        synonym = str(synonym).strip()
        if synonym not in self._synonyms[field]:
            return False
        self._synonyms[field].remove(synonym)
        return True

    def reset(self):
        """Restore the default synonyms"""
        self._synonyms = HeaderRuleTable.defaults()._synonyms

    def __eq__(self, other):
        if not isinstance(other, HeaderRuleTable):
            return NotImplemented
        return self._synonyms == other._synonyms

    def __repr__(self):
        counts = ', '.join(f"{f.value}={len(s)}" for f, s in self._synonyms.items())
        return f"HeaderRuleTable({counts})"


class ProductRuleTable:
    """Ordered keyword -> standard product name rules. First match wins."""

    def __init__(self, rules=None):
        """
        Args:
            rules: iterable of (keyword, standard_name) pairs, or a dict
                   (insertion order kept). None loads config.DEFAULT_PRODUCT_RULES.
        """
        self._rules: List[Tuple[str, str]] = []
        if rules is None:
            rules = config.DEFAULT_PRODUCT_RULES
        if isinstance(rules, dict):
            rules = rules.items()

        for keyword, standard_name in rules:
            self.add_rule(keyword, standard_name)

    @classmethod
    def defaults(cls) -> 'ProductRuleTable':
        return cls(config.DEFAULT_PRODUCT_RULES)

    @classmethod
    def from_dict(cls, data) -> 'ProductRuleTable':
        return cls(data or [])

    def to_dict(self) -> Dict[str, str]:
        return dict(self._rules)

    def to_list(self) -> List[List[str]]:
        return [[keyword, name] for keyword, name in self._rules]

    def copy(self) -> 'ProductRuleTable':
        return ProductRuleTable(list(self._rules))

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(list(self._rules))

    def keywords(self) -> List[str]:
        return [keyword for keyword, _ in self._rules]

    def add_rule(self, keyword: str, standard_name: str):
        """
        Add a rule, or replace the standard name of an existing keyword.

        An existing keyword keeps its position in the table.
        """
        keyword = str(keyword).strip()
        standard_name = str(standard_name).strip()
        if not keyword or not standard_name:
            raise ValueError("Keyword and standard name must not be blank")

        for idx, (existing, _) in enumerate(self._rules):
            if existing == keyword:
                self._rules[idx] = (keyword, standard_name)
                return
        self._rules.append((keyword, standard_name))

    def remove_rule(self, keyword: str) -> bool:
        keyword = str(keyword).strip()
        before = len(self._rules)
        self._rules = [(k, v) for k, v in self._rules if k != keyword]
        return len(self._rules) != before

    def reset(self):
        """Restore the default rules"""
        self._rules = list(config.DEFAULT_PRODUCT_RULES)

    def __len__(self):
        return len(self._rules)

    def __eq__(self, other):
        if not isinstance(other, ProductRuleTable):
            return NotImplemented
        return self._rules == other._rules

    def __repr__(self):
        return f"ProductRuleTable({len(self._rules)} rules)"
