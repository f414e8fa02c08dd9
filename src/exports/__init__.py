"""
Exports module for Order Consolidator
Re-exports consolidated orders in the standard nine-column layout
"""

from .order_csv_exporter import OrderCSVExporter
from .order_xlsx_exporter import OrderXlsxExporter

__all__ = ['OrderCSVExporter', 'OrderXlsxExporter']
