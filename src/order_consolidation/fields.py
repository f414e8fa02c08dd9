"""
Canonical order fields
"""
from enum import Enum
from typing import List


class CanonicalField(Enum):
    """Standardized order attributes"""
    RECEIVER = 'receiver'
    CONTACT = 'contact'
    POST_CODE = 'postCode'
    ADDRESS = 'address'
    MESSAGE = 'message'
    PRODUCT_NAME = 'productName'
    QUANTITY = 'quantity'
    COURIER = 'courier'
    TRACKING_NUMBER = 'trackingNumber'


# Fields a raw spreadsheet column can resolve to, in rule table order
RESOLVABLE_FIELDS: List[CanonicalField] = [
    CanonicalField.RECEIVER,
    CanonicalField.CONTACT,
    CanonicalField.POST_CODE,
    CanonicalField.ADDRESS,
    CanonicalField.MESSAGE,
    CanonicalField.PRODUCT_NAME,
    CanonicalField.QUANTITY,
]

# Nine-column re-export order
MASTER_FIELD_ORDER: List[CanonicalField] = RESOLVABLE_FIELDS + [
    CanonicalField.COURIER,
    CanonicalField.TRACKING_NUMBER,
]

# Fields a record cannot be emitted without
REQUIRED_FIELDS: List[CanonicalField] = [
    CanonicalField.RECEIVER,
    CanonicalField.PRODUCT_NAME,
]


def to_field(value) -> CanonicalField:
    """Accept a CanonicalField or its string value ('postCode', ...)."""
    if isinstance(value, CanonicalField):
        return value
    try:
        return CanonicalField(value)
    except ValueError:
        raise ValueError(f"Unknown canonical field: {value!r}") from None
