# receipt_processor/services/validation.py
from ..exceptions import InvalidReceipt
from ..schemas import Receipt

REQUIRED_FIELDS = ("retailer", "purchase_date", "purchase_time", "total")

def validate(receipt: Receipt) -> Receipt:
    """
    Structural gate in front of scoring. Returns the receipt unchanged or
    raises InvalidReceipt naming the first missing field.
    Numeric and date/time formats are not checked here.
    """
    for field in REQUIRED_FIELDS:
        if not getattr(receipt, field):
            raise InvalidReceipt(f"{field} is missing")

    if not receipt.items:
        raise InvalidReceipt("items is empty")

    for i, item in enumerate(receipt.items):
        if not item.short_description:
            raise InvalidReceipt(f"items[{i}].short_description is missing")
        if not item.price:
            raise InvalidReceipt(f"items[{i}].price is missing")

    return receipt
