"""
Order Consolidation Engine
Recognizes channel-specific columns, normalizes product names and merges rows
from many order spreadsheets into one standardized order list.

Nothing in this package touches files or the UI.
"""
from .fields import CanonicalField, MASTER_FIELD_ORDER, RESOLVABLE_FIELDS
from .rules import HeaderRuleTable, ProductRuleTable
from .models import OrderRecord, UploadedSource
from .header_resolver import HeaderResolver, resolve_header
from .product_normalizer import ProductNormalizer, normalize_product
from .record_builder import RecordBuilder, build_record
from .consolidator import OrderConsolidator, consolidate
from .audit import ConsolidationReport, RowRejection, consolidate_with_report
from .session import ConsolidationSession

__all__ = [
    'CanonicalField',
    'MASTER_FIELD_ORDER',
    'RESOLVABLE_FIELDS',
    'HeaderRuleTable',
    'ProductRuleTable',
    'OrderRecord',
    'UploadedSource',
    'HeaderResolver',
    'resolve_header',
    'ProductNormalizer',
    'normalize_product',
    'RecordBuilder',
    'build_record',
    'OrderConsolidator',
    'consolidate',
    'ConsolidationReport',
    'RowRejection',
    'consolidate_with_report',
    'ConsolidationSession',
]
