"""
Export Tests
============

- xlsx and csv exports use the nine-column standard header.
- Rows follow record order; a missing tracking number is written blank.
- Exporting nothing is refused.
"""
import csv
import os
import sys

import pytest
from openpyxl import load_workbook

os.environ.setdefault('ENABLE_FILE_LOGGING', 'false')
SRC_DIR = os.path.join(os.path.dirname(__file__), '..', 'src')
sys.path.insert(0, os.path.abspath(SRC_DIR))

import config
from exports import OrderCSVExporter, OrderXlsxExporter
from order_consolidation.models import OrderRecord


@pytest.fixture
def records():
    return [
        OrderRecord(
            record_id='r1', receiver='홍길동', product_name='반숙란 30구', quantity=2,
            contact='010-1234-5678', post_code='06236', address='서울 강남구',
            message='문 앞', courier='한진택배',
        ),
        OrderRecord(
            record_id='r2', receiver='김철수', product_name='구운란 30구',
            courier='한진택배', tracking_number='1234567890',
        ),
    ]


class TestOrderXlsxExporter:
    def test_layout(self, tmp_path, records):
        exporter = OrderXlsxExporter(output_folder=str(tmp_path))
        path = exporter.export(records, str(tmp_path / 'merged.xlsx'))

        wb = load_workbook(path)
        ws = wb.active
        assert ws.title == config.EXPORT_SHEET_TITLE
        values = [list(row) for row in ws.iter_rows(values_only=True)]
        assert values[0] == config.MASTER_HEADERS
        assert values[1][:8] == ['홍길동', '010-1234-5678', '06236', '서울 강남구', '문 앞',
                                 '반숙란 30구', 2, '한진택배']
        assert values[1][8] in (None, '')
        assert values[2][0] == '김철수'
        assert values[2][8] == '1234567890'
        assert ws.freeze_panes == 'A2'
        assert ws.column_dimensions['D'].width == 40

    def test_default_path(self, tmp_path, records):
        exporter = OrderXlsxExporter(output_folder=str(tmp_path))
        path = exporter.export(records)
        assert os.path.dirname(path) == str(tmp_path)
        assert os.path.basename(path).startswith(config.EXPORT_FILENAME_PREFIX)
        assert path.endswith('.xlsx')

    def test_empty_refused(self, tmp_path):
        with pytest.raises(ValueError):
            OrderXlsxExporter(output_folder=str(tmp_path)).export([])


class TestOrderCSVExporter:
    def test_layout(self, tmp_path, records):
        exporter = OrderCSVExporter(output_folder=str(tmp_path))
        path = exporter.export(records, str(tmp_path / 'merged.csv'))

        with open(path, newline='', encoding='utf-8-sig') as f:
            rows = list(csv.reader(f))
        assert rows[0] == config.MASTER_HEADERS
        assert rows[1] == ['홍길동', '010-1234-5678', '06236', '서울 강남구', '문 앞',
                           '반숙란 30구', '2', '한진택배', '']
        assert rows[2][8] == '1234567890'
        assert len(rows) == 3

    def test_empty_refused(self, tmp_path):
        with pytest.raises(ValueError):
            OrderCSVExporter(output_folder=str(tmp_path)).export([])
