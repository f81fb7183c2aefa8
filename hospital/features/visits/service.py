# Visits Feature - Service

from typing import Any, Dict, List, Optional, Tuple
from datetime import datetime
from beanie import UpdateResponse
from beanie.operators import In
from bson import ObjectId
from hospital.features.visits.models import (
    ACTIVE_STATUSES,
    Diagnosis,
    LabOrder,
    Prescription,
    Visit,
    VisitStatus,
    Vitals,
)
from hospital.features.visits.schemas import (
    CreateVisitRequest,
    DiagnosisRequest,
    LabOrderRequest,
    PrescriptionRequest,
    VisitResponse,
    VitalsRequest,
)
from hospital.features.patients.service import PatientService
from hospital.shared.crud import ResourceService
from hospital.shared.exceptions import InvalidStateException, NotFoundException
from hospital.core.logging import logger


class VisitService(ResourceService[Visit]):
    """
    Service class for visits and their lifecycle.

    Get, detail edits and deletion come from ResourceService. Every status
    change and clinical-record write goes through ``_apply``, a single
    update whose filter includes the statuses the operation is allowed
    from. Two racing requests therefore cannot both act on the same
    status: the loser matches nothing and gets InvalidState.
    """

    model = Visit
    response_schema = VisitResponse
    label = "Visit"

    # ============== Creation & Reads ==============

    @staticmethod
    async def create_visit(request: CreateVisitRequest) -> Visit:
        """
        Start a visit.

        The visit waits for payment (Pending Payment) when payment is
        required, otherwise it is queued straight away (Pending). When the
        request does not say, payment is required unless the patient is on
        record with an insurance provider.
        """
        payment_required = request.payment_required
        if payment_required is None:
            patient = await PatientService.find_optional(request.patient)
            payment_required = not (patient and patient.is_insured)

        visit = Visit(
            patient=request.patient,
            doctor=request.doctor,
            visit_date=request.visit_date or datetime.utcnow(),
            reason=request.reason,
            payment_required=payment_required,
            status=VisitStatus.PENDING_PAYMENT if payment_required else VisitStatus.PENDING,
        )
        await visit.insert()

        logger.info(f"Started visit {visit.id} for patient {visit.patient} ({visit.status})")
        return visit

    @staticmethod
    async def list_visits(
        status: Optional[VisitStatus] = None,
        limit: int = 50,
        offset: int = 0
    ) -> Tuple[List[Visit], int]:
        """
        List visits, newest first.

        Args:
            status: Only return visits in this status
            limit: Max number of visits
            offset: Pagination offset

        Returns:
            Tuple of (visits list, total count)
        """
        query = Visit.find_all()
        if status is not None:
            query = Visit.find(Visit.status == VisitStatus(status).value)

        total = await query.count()
        visits = await query.sort(-Visit.visit_date).skip(offset).limit(limit).to_list()

        return visits, total

    @staticmethod
    async def list_active_visits() -> List[Visit]:
        """Visits queued or with a doctor (Pending or In-Progress), oldest first."""
        return await Visit.find(In(Visit.status, ACTIVE_STATUSES)).sort(+Visit.visit_date).to_list()

    # ============== Lifecycle ==============

    @classmethod
    async def _apply(
        cls,
        visit_id: str,
        allowed: List[str],
        action: str,
        changes: Dict[str, Any],
        push: Optional[Dict[str, Any]] = None,
    ) -> Visit:
        """
        Apply ``changes`` (and ``push``) if the visit's status is in ``allowed``.

        Raises:
            NotFoundException: If no visit has this id
            InvalidStateException: If the visit exists in another status
        """
        if not ObjectId.is_valid(visit_id):
            raise NotFoundException("Visit not found")
        object_id = ObjectId(visit_id)

        update: Dict[str, Any] = {
            "$set": {**changes, "updated_at": datetime.utcnow()},
            "$inc": {"version": 1},
        }
        if push:
            update["$push"] = push

        visit = await Visit.find_one(
            Visit.id == object_id,
            In(Visit.status, allowed),
        ).update(update, response_type=UpdateResponse.NEW_DOCUMENT)

        if visit is None:
            current = await Visit.get(object_id)
            if current is None:
                raise NotFoundException("Visit not found")
            logger.warning(f"Rejected '{action}' on visit {visit_id} in status {current.status}")
            raise InvalidStateException(f"Cannot {action} a visit that is {current.status}")

        logger.info(f"Visit {visit_id}: {action} (status {visit.status})")
        return visit

    @classmethod
    async def confirm_payment(cls, visit_id: str) -> Visit:
        """Record payment and queue the visit. Only from Pending Payment."""
        return await cls._apply(
            visit_id,
            [VisitStatus.PENDING_PAYMENT.value],
            "confirm payment for",
            {
                "status": VisitStatus.PENDING.value,
                "payment_confirmed_at": datetime.utcnow(),
            },
        )

    @classmethod
    async def start_visit(cls, visit_id: str) -> Visit:
        """Doctor takes a queued visit. Only from Pending."""
        return await cls._apply(
            visit_id,
            [VisitStatus.PENDING.value],
            "start",
            {
                "status": VisitStatus.IN_PROGRESS.value,
                "started_at": datetime.utcnow(),
            },
        )

    @classmethod
    async def record_vitals(cls, visit_id: str, request: VitalsRequest) -> Visit:
        """Replace the visit's vitals."""
        vitals = Vitals(**request.model_dump())
        return await cls._apply(visit_id, ACTIVE_STATUSES, "record vitals for", {"vitals": vitals.model_dump()})

    @classmethod
    async def record_diagnosis(cls, visit_id: str, request: DiagnosisRequest) -> Visit:
        """Replace the visit's diagnosis."""
        diagnosis = Diagnosis(**request.model_dump())
        return await cls._apply(visit_id, ACTIVE_STATUSES, "record a diagnosis for", {"diagnosis": diagnosis.model_dump()})

    @classmethod
    async def add_lab_order(cls, visit_id: str, request: LabOrderRequest) -> Visit:
        """Append a lab order to the visit."""
        order = LabOrder(**request.model_dump())
        return await cls._apply(
            visit_id,
            ACTIVE_STATUSES,
            "order labs for",
            {},
            push={"lab_orders": order.model_dump()},
        )

    @classmethod
    async def add_prescription(cls, visit_id: str, request: PrescriptionRequest) -> Visit:
        """Append a prescription to the visit."""
        prescription = Prescription(**request.model_dump())
        return await cls._apply(
            visit_id,
            ACTIVE_STATUSES,
            "prescribe for",
            {},
            push={"prescriptions": prescription.model_dump()},
        )

    @classmethod
    async def end_visit(cls, visit_id: str, notes: Optional[str] = None) -> Visit:
        """
        Close the visit with the doctor's notes.

        Accepted from In-Progress and also from Pending (a queued visit may be
        closed without being started). A Completed visit keeps its notes.
        """
        return await cls._apply(
            visit_id,
            ACTIVE_STATUSES,
            "end",
            {
                "status": VisitStatus.COMPLETED.value,
                "notes": notes,
                "ended_at": datetime.utcnow(),
            },
        )
