#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Order Consolidation CLI
Merge order spreadsheets from several sales channels into one standard file

Usage:
    python consolidate_orders.py orders_a.xlsx orders_b.csv -o merged.xlsx --report
"""
import argparse
import sys
from pathlib import Path

# Fix encoding for Windows
if sys.platform == 'win32':
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8', errors='replace')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8', errors='replace')

# Add src to path
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT / 'src'))

import config
from exports import OrderCSVExporter, OrderXlsxExporter
from ingestion import RuleStore, RuleStoreError, SourceLoadError, load_sources
from order_consolidation import consolidate_with_report


def build_parser():
    parser = argparse.ArgumentParser(
        description="Consolidate channel order spreadsheets into one standard order list"
    )
    parser.add_argument('files', nargs='+', help="Order files (.xlsx, .xlsm, .csv)")
    parser.add_argument('-o', '--output', help="Output file (default: dated file in the export folder)")
    parser.add_argument('--format', choices=['xlsx', 'csv'], default='xlsx', help="Output format")
    parser.add_argument('--rules', help=f"Rules JSON file (default: {config.RULES_FILE})")
    parser.add_argument('--report', action='store_true', help="List rows that were left out")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    print("\n" + "=" * 80)
    print("ORDER CONSOLIDATION")
    print("=" * 80 + "\n")

    try:
        config.validate_config()
        header_rules, product_rules = RuleStore(args.rules).load()
        sources = load_sources(args.files)
    except (ValueError, RuleStoreError, SourceLoadError) as e:
        print(f"[ERROR] {e}")
        return 1

    for source in sources:
        print(f"[INFO] {source.name}: {source.row_count} row(s)")

    report = consolidate_with_report(sources, header_rules, product_rules)
    summary = report.summary()
    print(
        f"\n[OK] {summary['records']} order(s) from {summary['rows']} row(s) "
        f"in {summary['sources']} file(s); {summary['rejected']} row(s) left out"
    )

    if args.report:
        for rejection in report.rejections:
            print(f"  - {rejection.describe()}")
        names = {source.source_id: source.name for source in sources}
        for source_id, columns in report.unrecognized_columns.items():
            print(f"  ? {names[source_id]}: unrecognized columns {', '.join(columns)}")

    exporter = OrderCSVExporter() if args.format == 'csv' else OrderXlsxExporter()
    try:
        output_path = exporter.export(report.records, args.output)
    except ValueError as e:
        print(f"[ERROR] {e}")
        return 1

    print(f"\n[OK] Written: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
