from fastapi import APIRouter, Depends
from ..schemas import Receipt, ProcessResponse, PointsResponse, ErrorResponse
from ..services.receipts import ReceiptService
from ..vault.repository import ResultStore


router = APIRouter(prefix="/receipts", tags=["receipts"])

_store = ResultStore()

def get_store() -> ResultStore:
    return _store

def get_service(store: ResultStore = Depends(get_store)) -> ReceiptService:
    return ReceiptService(store)


@router.post("/process", response_model=ProcessResponse,
             responses={400: {"model": ErrorResponse}})
def process_receipt(payload: Receipt, service: ReceiptService = Depends(get_service)):
    return {"id": service.submit(payload)}

@router.get("/{receipt_id}/points", response_model=PointsResponse,
            responses={404: {"model": ErrorResponse}})
def get_points(receipt_id: str, service: ReceiptService = Depends(get_service)):
    return {"points": service.retrieve(receipt_id)}
