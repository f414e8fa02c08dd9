"""
Record Builder
Turns one raw spreadsheet row into a standardized order record
"""
import re
from typing import Callable, Dict, Optional

import config
from .fields import CanonicalField, REQUIRED_FIELDS
from .header_resolver import HeaderResolver
from .models import BuildResult, OrderRecord, RawRow, attribute_for, generate_id
from .product_normalizer import ProductNormalizer
from .rules import HeaderRuleTable, ProductRuleTable

# Rejection reasons
EMPTY_ROW = 'EMPTY_ROW'
MISSING_RECEIVER = 'MISSING_RECEIVER'
MISSING_PRODUCT_NAME = 'MISSING_PRODUCT_NAME'

_MISSING_REASONS = {
    CanonicalField.RECEIVER: MISSING_RECEIVER,
    CanonicalField.PRODUCT_NAME: MISSING_PRODUCT_NAME,
}

_TRIMMED_FIELDS = (CanonicalField.CONTACT, CanonicalField.POST_CODE)


def to_text(value) -> str:
    """Cell value as text. Integral floats drop their '.0'."""
    if value is None:
        return ''
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_quantity(value) -> Optional[int]:
    """
    Parse a quantity cell

    Returns:
        A positive int, or None when the cell is blank, unparseable or not positive
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, float):
        return int(value) if value.is_integer() and value > 0 else None

    text = re.sub(r"[\s,]", "", to_text(value))
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not number.is_integer() or number <= 0:
        return None
    return int(number)


def is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


class RecordBuilder:
    """Builds standardized records from raw rows using the rule tables"""

    def __init__(
        self,
        header_rules: HeaderRuleTable,
        product_rules: ProductRuleTable,
        courier: Optional[str] = None,
        id_factory: Callable[[], str] = generate_id,
    ):
        """
        Args:
            header_rules: Column synonym table
            product_rules: Product keyword table
            courier: Courier for every record (defaults to config.DEFAULT_COURIER)
            id_factory: Produces record identifiers
        """
        self.resolver = HeaderResolver(header_rules)
        self.normalizer = ProductNormalizer(product_rules)
        self.courier = courier if courier is not None else config.DEFAULT_COURIER
        self.id_factory = id_factory

    def _shape(self, field: CanonicalField, value):
        if field in _TRIMMED_FIELDS:
            return to_text(value).strip()
        if field == CanonicalField.PRODUCT_NAME:
            return self.normalizer.normalize(to_text(value))
        if field == CanonicalField.QUANTITY:
            return to_quantity(value)
        return to_text(value)

    def evaluate(self, raw_row: RawRow) -> BuildResult:
        """
        Build a record and report why a row was rejected

        Returns:
            BuildResult with the record (None when rejected), the rejection
            reasons and the columns no rule recognized
        """
        result = BuildResult()

        if not raw_row:
            result.reasons.append(EMPTY_ROW)
            return result

        values: Dict[CanonicalField, object] = {}

        for column, raw_value in raw_row.items():
            field = self.resolver.resolve(column)
            if field is None:
                result.unrecognized_columns.append(column)
                continue

            value = self._shape(field, raw_value)

            # Last non-blank column wins; blanks never overwrite a value
            if field not in values or not is_blank(value):
                values[field] = value

        for required in REQUIRED_FIELDS:
            if is_blank(values.get(required)):
                result.reasons.append(_MISSING_REASONS[required])
        if result.reasons:
            return result

        if values.get(CanonicalField.QUANTITY) is None:
            values[CanonicalField.QUANTITY] = 1

        attributes = {attribute_for(f): v for f, v in values.items()}
        result.record = OrderRecord(
            record_id=self.id_factory(),
            courier=self.courier,
            **attributes,
        )
        return result

    def build(self, raw_row: RawRow) -> Optional[OrderRecord]:
        """Build a record, or None when the row is rejected."""
        return self.evaluate(raw_row).record


def build_record(
    raw_row: RawRow,
    header_rules: HeaderRuleTable,
    product_rules: ProductRuleTable,
) -> Optional[OrderRecord]:
    """Build one record from one raw row; None when the row is rejected."""
    return RecordBuilder(header_rules, product_rules).build(raw_row)
