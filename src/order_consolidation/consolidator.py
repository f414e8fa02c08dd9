"""
Order Consolidator
Merges raw rows from every uploaded source into one standardized order list
"""
import time
from typing import Callable, Iterable, Iterator, List, Tuple

from utils.logger import get_logger
from .models import BuildResult, OrderRecord, UploadedSource, generate_id
from .record_builder import RecordBuilder
from .rules import HeaderRuleTable, ProductRuleTable


class OrderConsolidator:
    """Runs the record builder over sources -> rows, in input order"""

    def __init__(
        self,
        header_rules: HeaderRuleTable,
        product_rules: ProductRuleTable,
        id_factory: Callable[[], str] = generate_id,
    ):
        self.header_rules = header_rules
        self.product_rules = product_rules
        self.id_factory = id_factory

    def iter_results(
        self, sources: Iterable[UploadedSource]
    ) -> Iterator[Tuple[UploadedSource, int, BuildResult]]:
        """
        Yield (source, row_number, result) for every row

        Row numbers are 1-based positions among the source's data rows.
        A fresh builder is used per pass so rule tables are read once.
        """
        builder = RecordBuilder(
            self.header_rules, self.product_rules, id_factory=self.id_factory
        )
        for source in sources:
            for row_number, raw_row in enumerate(source.rows, start=1):
                yield source, row_number, builder.evaluate(raw_row)

    def consolidate(self, sources: Iterable[UploadedSource]) -> List[OrderRecord]:
        """
        Build the full order list from scratch

        Args:
            sources: Uploaded sources in display order

        Returns:
            Accepted records in source order, then file row order
        """
        logger = get_logger()
        started = time.perf_counter()

        sources = list(sources)
        records: List[OrderRecord] = []
        row_count = 0

        for source, row_number, result in self.iter_results(sources):
            row_count += 1
            if result.accepted:
                records.append(result.record)
            else:
                logger.log_row_rejected(source.name, row_number, result.reasons)

        logger.log_consolidation_complete(
            len(sources), row_count, len(records), time.perf_counter() - started
        )
        return records


def consolidate(
    sources: Iterable[UploadedSource],
    header_rules: HeaderRuleTable,
    product_rules: ProductRuleTable,
) -> List[OrderRecord]:
    """Consolidate every source into one ordered list of standardized records."""
    return OrderConsolidator(header_rules, product_rules).consolidate(sources)
