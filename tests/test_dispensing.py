"""Test dispensing records and the patient join."""

from hospital.features.dispensing.schemas import CreateDispensingRequest, CreateDirectDispensingRequest
from hospital.features.dispensing.service import DispensingService, DirectDispensingService
from hospital.features.patients.schemas import CreatePatientRequest
from hospital.features.patients.service import PatientService
from hospital.features.stock.service import StockService


async def test_dispensing_list_joins_patient(database):
    """Each record carries the referenced patient."""
    patient = await PatientService.create(CreatePatientRequest(name="Neema Juma", gender="Female", phone="0712000111"))
    await DispensingService.create(CreateDispensingRequest(patient=str(patient.id), medicine="Paracetamol", qty=10))
    
    records = await DispensingService.list_with_patients()
    
    assert len(records) == 1
    assert records[0].patient.id == str(patient.id)
    assert records[0].patient.name == "Neema Juma"
    assert records[0].medicine == "Paracetamol"


async def test_dispensing_for_unknown_patient_keeps_id(database):
    """Without a matching patient the raw reference is returned."""
    await DispensingService.create(CreateDispensingRequest(patient="walk-in-17", medicine="ORS", qty=2))
    
    records = await DispensingService.list_with_patients()
    
    assert records[0].patient == "walk-in-17"


async def test_dispensing_does_not_touch_stock(database):
    """Dispensing is a record only; the store balance is unchanged."""
    await StockService.receive("Paracetamol", 50)
    await DirectDispensingService.create(CreateDirectDispensingRequest(medicine="Paracetamol", qty=5, unit_price=200))
    
    items = await StockService.list()
    sales = await DirectDispensingService.list()
    
    assert items[0].quantity == 50
    assert len(sales) == 1
    assert sales[0].unit_price == 200
    assert sales[0].dispensed_at is not None
