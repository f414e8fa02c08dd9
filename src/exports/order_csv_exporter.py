"""
Order CSV Exporter
Writes consolidated orders as CSV in the nine-column standard order layout
(MASTER_HEADERS). Mirrors OrderXlsxExporter for plain-text consumers.
"""
import csv
import os
from datetime import datetime
from typing import List

import config
from order_consolidation.models import OrderRecord
from utils.logger import get_logger


class OrderCSVExporter:
    """Export consolidated order records to a CSV file."""

    COLUMNS = config.MASTER_HEADERS

    def __init__(self, output_folder: str = None):
        self.output_folder = output_folder or config.EXPORT_FOLDER
        os.makedirs(self.output_folder, exist_ok=True)

    def default_path(self) -> str:
        date_str = datetime.now().strftime("%Y%m%d")
        filename = f"{config.EXPORT_FILENAME_PREFIX}_{date_str}.csv"
        return os.path.join(self.output_folder, filename)

    def export(self, records: List[OrderRecord], output_path: str = None) -> str:
        """
        Export records, one row each, under the standard header row.

        Args:
            records: Consolidated records in display order
            output_path: Target file (defaults to a dated file in the export folder)

        Returns:
            Path of the written file
        """
        if not records:
            raise ValueError("No order records to export")

        output_path = output_path or self.default_path()

        # utf-8-sig so spreadsheet apps detect the Korean headers
        with open(output_path, "w", newline="", encoding="utf-8-sig") as csvfile:
            writer = csv.writer(csvfile)
            writer.writerow(self.COLUMNS)
            for record in records:
                writer.writerow(record.to_row())

        get_logger().info(
            f"CSV export ({len(records)} rows, {len(self.COLUMNS)} cols): {output_path}",
            component="Export"
        )
        return output_path
