# receipt_processor/vault/repository.py
import threading
import uuid
from typing import Dict, Optional

class ResultStore:
    """
    In-memory map of receipt id -> points for the life of the process.
    Records are only ever added; there is no update, delete or expiry.
    """

    def __init__(self):
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def insert(self, points: int) -> str:
        if points < 0:
            raise ValueError(f"points must be non-negative, got {points}")
        with self._lock:
            receipt_id = str(uuid.uuid4())
            while receipt_id in self._points:
                receipt_id = str(uuid.uuid4())
            self._points[receipt_id] = points
        return receipt_id

    def lookup(self, receipt_id: str) -> Optional[int]:
        with self._lock:
            return self._points.get(receipt_id)

    def __contains__(self, receipt_id: str) -> bool:
        with self._lock:
            return receipt_id in self._points

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)
