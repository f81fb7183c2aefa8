# Dispensing Feature

from hospital.features.dispensing.models import Dispensing, DirectDispensing
from hospital.features.dispensing.router import router, direct_router
from hospital.features.dispensing.service import DispensingService, DirectDispensingService

__all__ = [
    "Dispensing",
    "DirectDispensing",
    "router",
    "direct_router",
    "DispensingService",
    "DirectDispensingService",
]
