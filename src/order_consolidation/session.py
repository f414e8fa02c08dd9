"""
Consolidation Session
Holds the uploaded sources and the current rule tables, and recomputes the
order list from scratch whenever either changes.
"""
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from .consolidator import consolidate
from .models import OrderRecord, UploadedSource
from .rules import HeaderRuleTable, ProductRuleTable


class ConsolidationSession:
    """Manages the source list and the derived order records"""

    def __init__(
        self,
        header_rules: Optional[HeaderRuleTable] = None,
        product_rules: Optional[ProductRuleTable] = None,
    ):
        """
        Args:
            header_rules: Column synonyms (defaults when None)
            product_rules: Product keyword rules (defaults when None)
        """
        if header_rules is None:
            header_rules = HeaderRuleTable.defaults()
        if product_rules is None:
            product_rules = ProductRuleTable.defaults()
        self.header_rules = header_rules.copy()
        self.product_rules = product_rules.copy()
        self._sources: List[UploadedSource] = []
        self._records: List[OrderRecord] = []
        self.created_at = datetime.now()
        self.updated_at = None

    @property
    def sources(self) -> List[UploadedSource]:
        return list(self._sources)

    @property
    def records(self) -> List[OrderRecord]:
        return list(self._records)

    def has_source_named(self, name: str) -> bool:
        """True if a source with this display name is already loaded"""
        return any(source.name == name for source in self._sources)

    def add_sources(self, sources: Iterable[UploadedSource]) -> List[OrderRecord]:
        """Append sources (after any already loaded) and recompute"""
        self._sources.extend(sources)
        return self.recompute()

    def remove_source(self, source_id: str) -> bool:
        """
        Remove a source by id

        Returns:
            True if a source was removed (records are recomputed), False otherwise
        """
        remaining = [s for s in self._sources if s.source_id != source_id]
        if len(remaining) == len(self._sources):
            return False
        self._sources = remaining
        self.recompute()
        return True

    def clear_all(self):
        """Drop every source and record"""
        self._sources = []
        self._records = []
        self.updated_at = datetime.now()

    def update_rules(
        self,
        header_rules: Optional[HeaderRuleTable] = None,
        product_rules: Optional[ProductRuleTable] = None,
    ) -> List[OrderRecord]:
        """Replace one or both rule tables and recompute"""
        if header_rules is not None:
            self.header_rules = header_rules.copy()
        if product_rules is not None:
            self.product_rules = product_rules.copy()
        return self.recompute()

    def recompute(self) -> List[OrderRecord]:
        """Rebuild every record from the current sources and rules"""
        self._records = consolidate(self._sources, self.header_rules, self.product_rules)
        self.updated_at = datetime.now()
        return self.records

    def to_dict(self) -> Dict:
        """Convert session to dictionary"""
        return {
            'source_count': len(self._sources),
            'sources': [
                {'source_id': s.source_id, 'name': s.name, 'row_count': s.row_count}
                for s in self._sources
            ],
            'record_count': len(self._records),
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }
