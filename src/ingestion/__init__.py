"""
Ingestion for Order Consolidator
Spreadsheet decoding and rule-table persistence
"""
from .spreadsheet_loader import (
    SourceLoadError,
    UnsupportedSourceError,
    load_source,
    load_sources,
    rows_from_table,
)
from .rule_store import RuleStore, RuleStoreError

__all__ = [
    'SourceLoadError',
    'UnsupportedSourceError',
    'load_source',
    'load_sources',
    'rows_from_table',
    'RuleStore',
    'RuleStoreError',
]
