from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from .config import settings
from .exceptions import (InvalidReceipt, ReceiptNotFound, invalid_receipt_handler,
                         receipt_not_found_handler, request_validation_handler)
from .routes.receipts import router as receipts_router

app = FastAPI(title=settings.APP_NAME,
              description="Scores purchase receipts and serves the points by id",
    version="0.1.0",
    docs_url="/docs",          # Swagger UI
    redoc_url="/redoc",        # ReDoc
    openapi_url="/openapi.json")

app.add_exception_handler(InvalidReceipt, invalid_receipt_handler)
app.add_exception_handler(ReceiptNotFound, receipt_not_found_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)

app.include_router(receipts_router)

@app.get("/health")
def health():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("receipt_processor.main:app", host=settings.HOST, port=settings.PORT,
                log_level=settings.LOG_LEVEL.lower())
