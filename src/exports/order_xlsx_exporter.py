"""
Order XLSX Exporter
Builds the consolidated order workbook handed to the courier.
"""
import os
from datetime import datetime
from typing import List

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

import config
from order_consolidation.models import OrderRecord
from utils.logger import get_logger


class OrderXlsxExporter:
    """Export consolidated order records to a single-sheet workbook."""

    COLUMNS = config.MASTER_HEADERS

    def __init__(self, output_folder: str = None):
        self.output_folder = output_folder or config.EXPORT_FOLDER
        os.makedirs(self.output_folder, exist_ok=True)

    def default_path(self) -> str:
        date_str = datetime.now().strftime("%Y%m%d")
        filename = f"{config.EXPORT_FILENAME_PREFIX}_{date_str}.xlsx"
        return os.path.join(self.output_folder, filename)

    def export(self, records: List[OrderRecord], output_path: str = None) -> str:
        """
        Write the workbook

        Args:
            records: Consolidated records in display order
            output_path: Target file (defaults to a dated file in the export folder)

        Returns:
            Path of the written workbook
        """
        if not records:
            raise ValueError("No order records to export")

        output_path = output_path or self.default_path()

        wb = Workbook()
        ws = wb.active
        ws.title = config.EXPORT_SHEET_TITLE

        # ---------- Header ----------

        ws.append(self.COLUMNS)

        header_font = Font(bold=True)
        header_fill = PatternFill("solid", fgColor="FDE9D9")
        center_align = Alignment(horizontal="center")

        for col in range(1, len(self.COLUMNS) + 1):
            cell = ws.cell(row=1, column=col)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = center_align

        # ---------- Data Rows ----------

        for record in records:
            ws.append(record.to_row())

        # ---------- Layout ----------

        ws.freeze_panes = "A2"
        for idx, width in enumerate(config.EXPORT_COLUMN_WIDTHS, start=1):
            ws.column_dimensions[get_column_letter(idx)].width = width

        wb.save(output_path)

        get_logger().info(
            f"XLSX export ({len(records)} rows, sheet '{ws.title}'): {output_path}",
            component="Export"
        )
        return output_path
