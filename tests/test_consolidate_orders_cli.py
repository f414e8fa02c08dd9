"""
Consolidation CLI Tests
=======================

Runs main() end to end on generated files.
"""
import csv
import os
import sys

from openpyxl import Workbook

os.environ.setdefault('ENABLE_FILE_LOGGING', 'false')
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, os.path.join(PROJECT_ROOT, 'src'))
sys.path.insert(0, PROJECT_ROOT)

from consolidate_orders import main


def _write_sources(tmp_path):
    wb = Workbook()
    ws = wb.active
    ws.append(['수취인명', '연락처', '상품명', '수량'])
    ws.append(['홍길동', '010-1111-2222', '반숙란 특가', 2])
    ws.append([None, '010-0000-0000', '구운란', 1])
    xlsx_path = tmp_path / 'channel_a.xlsx'
    wb.save(xlsx_path)

    csv_path = tmp_path / 'channel_b.csv'
    csv_path.write_text('받는분,옵션\n김철수,훈제란 선물세트\n', encoding='utf-8-sig')
    return [str(xlsx_path), str(csv_path)]


def test_csv_output(tmp_path, capsys):
    files = _write_sources(tmp_path)
    output = tmp_path / 'merged.csv'

    code = main(files + ['-o', str(output), '--format', 'csv',
                         '--rules', str(tmp_path / 'rules.json'), '--report'])

    assert code == 0
    with open(output, newline='', encoding='utf-8-sig') as f:
        rows = list(csv.reader(f))
    assert [row[0] for row in rows[1:]] == ['홍길동', '김철수']
    assert [row[5] for row in rows[1:]] == ['반숙란 30구', '훈제란 30구']

    out = capsys.readouterr().out
    assert 'channel_a.xlsx row 2: MISSING_RECEIVER' in out


def test_unsupported_file(tmp_path, capsys):
    path = tmp_path / 'old.xls'
    path.write_bytes(b'')
    assert main([str(path), '--rules', str(tmp_path / 'rules.json')]) == 1
    assert '[ERROR]' in capsys.readouterr().out


def test_nothing_to_export(tmp_path, capsys):
    path = tmp_path / 'empty.csv'
    path.write_text('수령인,상품명\n', encoding='utf-8')
    code = main([str(path), '-o', str(tmp_path / 'out.xlsx'),
                 '--rules', str(tmp_path / 'rules.json')])
    assert code == 1
