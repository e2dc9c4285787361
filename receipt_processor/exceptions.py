"""
Service errors and the HTTP handlers that translate them.
"""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .utils.logging import logger

INVALID_RECEIPT_DETAIL = "The receipt is invalid."
NOT_FOUND_DETAIL = "No receipt found for that ID."


class ReceiptServiceError(Exception):
    """Base exception for receipt service errors."""
    pass


class InvalidReceipt(ReceiptServiceError):
    """Raised when a submitted receipt is structurally incomplete."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ReceiptNotFound(ReceiptServiceError):
    """Raised when no score is stored under the requested id."""

    def __init__(self, receipt_id: str):
        super().__init__(f"no receipt for id {receipt_id!r}")
        self.receipt_id = receipt_id


async def invalid_receipt_handler(request: Request, exc: InvalidReceipt) -> JSONResponse:
    logger.warning("Rejected receipt at %s: %s", request.url.path, exc.reason)
    return JSONResponse(status_code=400, content={"detail": INVALID_RECEIPT_DETAIL})


async def receipt_not_found_handler(request: Request, exc: ReceiptNotFound) -> JSONResponse:
    logger.info("Lookup miss for receipt %s", exc.receipt_id)
    return JSONResponse(status_code=404, content={"detail": NOT_FOUND_DETAIL})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Undecodable or wrongly-typed receipt payloads are invalid receipts too."""
    logger.warning("Malformed request at %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": INVALID_RECEIPT_DETAIL})
