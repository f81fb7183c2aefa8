# Visits Feature

from hospital.features.visits.models import Visit, VisitStatus
from hospital.features.visits.router import router
from hospital.features.visits.service import VisitService

__all__ = ["Visit", "VisitStatus", "router", "VisitService"]
