# Item Receiving Feature - Router

from fastapi import APIRouter, status
from hospital.features.receiving.schemas import CreateInvoiceRequest, InvoiceResponse
from hospital.features.receiving.service import InvoiceService
from hospital.features.stock.schemas import ReceiveItemRequest, StockItemResponse
from hospital.features.stock.service import StockService
from hospital.shared.schemas import DataResponse, ListResponse


router = APIRouter(prefix="/item-receiving", tags=["Item Receiving"])


@router.get("/invoices", response_model=ListResponse[InvoiceResponse])
async def list_invoices():
    """List all recorded supplier invoices."""
    invoices = await InvoiceService.list()
    return ListResponse(
        count=len(invoices),
        data=[InvoiceService.to_response(invoice) for invoice in invoices],
    )


@router.post("/invoices", response_model=DataResponse[InvoiceResponse], status_code=status.HTTP_201_CREATED)
async def add_invoice(request: CreateInvoiceRequest):
    """Record a supplier invoice."""
    invoice = await InvoiceService.create(request)
    return DataResponse(data=InvoiceService.to_response(invoice))


@router.post("", response_model=DataResponse[StockItemResponse], status_code=status.HTTP_201_CREATED)
async def receive_item(request: ReceiveItemRequest):
    """
    Receive goods into the store.
    
    - **medicine**: Exact stock item name; created if it does not exist
    - **qty**: Quantity received, added to the current balance
    """
    item = await StockService.receive(request.medicine, request.qty)
    return DataResponse(data=StockService.to_response(item))
