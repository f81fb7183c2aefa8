# Item Receiving Feature

from hospital.features.receiving.models import Invoice
from hospital.features.receiving.router import router
from hospital.features.receiving.service import InvoiceService

__all__ = ["Invoice", "router", "InvoiceService"]
