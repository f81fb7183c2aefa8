# Requisitions Feature

from hospital.features.requisitions.models import Requisition
from hospital.features.requisitions.router import router
from hospital.features.requisitions.service import RequisitionService

__all__ = ["Requisition", "router", "RequisitionService"]
