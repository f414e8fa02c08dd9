"""
Order Consolidation Data Models

Pure definitions -- no side effects, no imports of external services.
"""
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .fields import CanonicalField, MASTER_FIELD_ORDER

# One spreadsheet line: raw column name -> cell value (str, int, float or None)
RawRow = Dict[str, Any]


def generate_id() -> str:
    """Fresh unique identifier for sources and records"""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class UploadedSource:
    """One ingested spreadsheet. Immutable once created."""
    source_id: str
    name: str
    rows: Tuple[RawRow, ...] = ()

    @classmethod
    def create(cls, name: str, rows) -> 'UploadedSource':
        """Build a source with a fresh id; rows are copied."""
        return cls(
            source_id=generate_id(),
            name=name,
            rows=tuple(dict(row) for row in rows),
        )

    @property
    def row_count(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class OrderRecord:
    """A standardized order line, ready for rendering or re-export."""
    record_id: str
    receiver: str
    product_name: str
    quantity: int = 1
    contact: str = ''
    post_code: str = ''
    address: str = ''
    message: str = ''
    courier: str = ''
    tracking_number: Optional[str] = None

    def get(self, canonical: CanonicalField):
        """Value of a canonical field"""
        return getattr(self, _ATTRIBUTES[canonical])

    def to_dict(self) -> Dict[str, Any]:
        """Keyed by canonical field name, plus 'id'."""
        data = {'id': self.record_id}
        for canonical in MASTER_FIELD_ORDER:
            data[canonical.value] = self.get(canonical)
        return data

    def to_row(self) -> List[Any]:
        """Values in the nine-column re-export order."""
        row = [self.get(canonical) for canonical in MASTER_FIELD_ORDER]
        if row[-1] is None:
            row[-1] = ''
        return row


_ATTRIBUTES = {
    CanonicalField.RECEIVER: 'receiver',
    CanonicalField.CONTACT: 'contact',
    CanonicalField.POST_CODE: 'post_code',
    CanonicalField.ADDRESS: 'address',
    CanonicalField.MESSAGE: 'message',
    CanonicalField.PRODUCT_NAME: 'product_name',
    CanonicalField.QUANTITY: 'quantity',
    CanonicalField.COURIER: 'courier',
    CanonicalField.TRACKING_NUMBER: 'tracking_number',
}


def attribute_for(canonical: CanonicalField) -> str:
    """OrderRecord attribute name for a canonical field"""
    return _ATTRIBUTES[canonical]


@dataclass
class BuildResult:
    """Outcome of building one raw row."""
    record: Optional[OrderRecord] = None
    reasons: List[str] = field(default_factory=list)
    unrecognized_columns: List[str] = field(default_factory=list)

    @property
    def accepted(self) -> bool:
        return self.record is not None
