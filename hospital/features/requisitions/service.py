# Requisitions Feature - Service

from hospital.features.requisitions.models import Requisition, TERMINAL_ITEM_STATUSES
from hospital.features.requisitions.schemas import RequisitionResponse
from hospital.shared.crud import ResourceService
from hospital.shared.exceptions import InvalidStateException
from hospital.core.logging import logger


class RequisitionService(ResourceService[Requisition]):
    """Service class for department requisitions."""
    
    model = Requisition
    response_schema = RequisitionResponse
    label = "Requisition"
    
    @classmethod
    def check_update(cls, current: Requisition, updated: Requisition) -> None:
        """
        Reject updates that reopen, change or drop a line already Issued or Rejected.
        
        Lines are matched by position: line N of the update replaces stored
        line N. Lines past the stored ones are new. The header status is not
        checked against the lines.
        """
        for index, previous in enumerate(current.items):
            if previous.status not in TERMINAL_ITEM_STATUSES:
                continue
            
            if index >= len(updated.items):
                cls._reject(current, previous, "removed")
            
            item = updated.items[index]
            if (
                item.medicine != previous.medicine
                or item.qty != previous.qty
                or item.status != previous.status
                or item.issued_qty != previous.issued_qty
            ):
                cls._reject(current, previous, "changed")
    
    @staticmethod
    def _reject(requisition: Requisition, line, action: str) -> None:
        logger.warning(
            f"Rejected update to requisition {requisition.id}: "
            f"{line.status.lower()} line '{line.medicine}' would be {action}"
        )
        raise InvalidStateException(
            f"Item '{line.medicine}' is already {line.status} and cannot be {action}"
        )
