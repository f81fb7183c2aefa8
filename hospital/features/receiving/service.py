# Item Receiving Feature - Service

from hospital.features.receiving.models import Invoice
from hospital.features.receiving.schemas import InvoiceResponse
from hospital.shared.crud import ResourceService


class InvoiceService(ResourceService[Invoice]):
    """Service class for supplier invoices."""
    
    model = Invoice
    response_schema = InvoiceResponse
    label = "Invoice"
