"""
Consolidation Report
Explains which rows were left out of the order list and why.

The consolidator itself omits rejected rows silently; this wrapper runs the
same pass and keeps the rejections and unrecognized columns for review.
"""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from utils.logger import get_logger
from .consolidator import OrderConsolidator
from .models import OrderRecord, UploadedSource
from .rules import HeaderRuleTable, ProductRuleTable


@dataclass(frozen=True)
class RowRejection:
    """A raw row that produced no record"""
    source_id: str
    source_name: str
    row_number: int
    reasons: tuple

    def describe(self) -> str:
        return f"{self.source_name} row {self.row_number}: {', '.join(self.reasons)}"


@dataclass
class ConsolidationReport:
    """Records plus everything that did not make it into them"""
    records: List[OrderRecord] = field(default_factory=list)
    rejections: List[RowRejection] = field(default_factory=list)
    # source_id -> sorted column names no rule recognized
    unrecognized_columns: Dict[str, List[str]] = field(default_factory=dict)
    source_count: int = 0
    row_count: int = 0

    def summary(self) -> Dict[str, int]:
        return {
            'sources': self.source_count,
            'rows': self.row_count,
            'records': len(self.records),
            'rejected': len(self.rejections),
        }

    def rejections_for(self, source_id: str) -> List[RowRejection]:
        return [r for r in self.rejections if r.source_id == source_id]


def consolidate_with_report(
    sources: Iterable[UploadedSource],
    header_rules: HeaderRuleTable,
    product_rules: ProductRuleTable,
) -> ConsolidationReport:
    """
    Consolidate and collect rejection details

    Returns:
        ConsolidationReport whose records match consolidate() for the same
        inputs (identifiers aside)
    """
    sources = list(sources)
    report = ConsolidationReport(source_count=len(sources))
    unrecognized: Dict[str, set] = {}

    consolidator = OrderConsolidator(header_rules, product_rules)
    for source, row_number, result in consolidator.iter_results(sources):
        report.row_count += 1
        if result.unrecognized_columns:
            unrecognized.setdefault(source.source_id, set()).update(result.unrecognized_columns)

        if result.accepted:
            report.records.append(result.record)
        else:
            report.rejections.append(RowRejection(
                source_id=source.source_id,
                source_name=source.name,
                row_number=row_number,
                reasons=tuple(result.reasons),
            ))

    report.unrecognized_columns = {
        source_id: sorted(columns) for source_id, columns in unrecognized.items()
    }

    summary = report.summary()
    get_logger().info(
        f"Report: {summary['records']} record(s), {summary['rejected']} rejected row(s), "
        f"{len(report.unrecognized_columns)} source(s) with unrecognized columns",
        component="Audit"
    )
    return report
