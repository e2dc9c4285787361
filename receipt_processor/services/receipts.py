# receipt_processor/services/receipts.py
from ..exceptions import ReceiptNotFound
from ..rules.ruleset import score_breakdown
from ..schemas import Receipt
from ..utils.logging import logger
from ..vault.repository import ResultStore
from .validation import validate

class ReceiptService:
    def __init__(self, store: ResultStore):
        self.store = store

    def submit(self, receipt: Receipt) -> str:
        """Validate, score and store a receipt. Returns the new receipt id."""
        validate(receipt)
        breakdown = score_breakdown(receipt)
        points = sum(breakdown.values())
        receipt_id = self.store.insert(points)
        logger.debug("Receipt %s breakdown: %s", receipt_id, breakdown)
        logger.info("Receipt %s scored %s points", receipt_id, points)
        return receipt_id

    def retrieve(self, receipt_id: str) -> int:
        points = self.store.lookup(receipt_id)
        if points is None:
            raise ReceiptNotFound(receipt_id)
        return points
