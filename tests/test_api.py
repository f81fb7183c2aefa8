"""Test the HTTP surface and its response envelope."""

MISSING_ID = "65f0c0ffee0000000000beef"


async def test_health(client):
    """Liveness endpoint answers without touching the database."""
    response = await client.get("/health")
    
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_stock_crud_envelope(client):
    """List responses carry count and data; delete returns empty data."""
    created = await client.post("/api/v1/stock", json={"name": "Paracetamol", "quantity": 0})
    assert created.status_code == 201
    body = created.json()
    assert body["success"] is True
    item_id = body["data"]["id"]
    
    received = await client.post("/api/v1/item-receiving", json={"medicine": "Paracetamol", "qty": 50})
    assert received.status_code == 201
    assert received.json()["data"]["quantity"] == 50
    
    listing = await client.get("/api/v1/stock")
    assert listing.json()["count"] == 1
    assert listing.json()["data"][0]["quantity"] == 50
    
    updated = await client.put(f"/api/v1/stock/{item_id}", json={"quantity": 45})
    assert updated.status_code == 200
    assert updated.json()["data"]["quantity"] == 45
    
    deleted = await client.delete(f"/api/v1/stock/{item_id}")
    assert deleted.status_code == 200
    assert deleted.json()["success"] is True
    assert deleted.json()["data"] == {}


async def test_not_found_envelope(client):
    """Unknown ids give 404 with success false."""
    response = await client.put(f"/api/v1/stock/{MISSING_ID}", json={"quantity": 1})
    
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Stock item not found"}
    
    response = await client.delete(f"/api/v1/visits/{MISSING_ID}")
    assert response.status_code == 404


async def test_validation_errors_are_400(client):
    """Schema failures are bad requests, not 422."""
    missing_department = await client.post("/api/v1/requisitions", json={"items": []})
    negative_qty = await client.post("/api/v1/item-receiving", json={"medicine": "X", "qty": -5})
    bad_status = await client.post(
        "/api/v1/requisitions",
        json={"from": "Ward 3", "items": [{"medicine": "ORS", "qty": 1, "status": "Lost"}]},
    )
    
    for response in (missing_department, negative_qty, bad_status):
        assert response.status_code == 400
        assert response.json()["success"] is False
        assert response.json()["message"] == "Invalid request data"


async def test_requisition_accepts_from_key(client):
    """The requesting department may be sent as 'from'."""
    response = await client.post(
        "/api/v1/requisitions",
        json={"from": "Maternity", "items": [{"medicine": "Oxytocin", "qty": 20}]},
    )
    
    assert response.status_code == 201
    data = response.json()["data"]
    assert data["from"] == "Maternity"
    assert data["status"] == "Sent"
    assert data["items"][0] == {"medicine": "Oxytocin", "qty": 20, "status": "Pending", "issuedQty": 0}


async def test_invoices(client):
    """Invoices are recorded and listed."""
    response = await client.post(
        "/api/v1/item-receiving/invoices",
        json={"supplier": "MedSupply Ltd", "items": [{"medicine": "Paracetamol", "qty": 200}]},
    )
    assert response.status_code == 201
    
    listing = await client.get("/api/v1/item-receiving/invoices")
    assert listing.json()["count"] == 1
    assert listing.json()["data"][0]["supplier"] == "MedSupply Ltd"


async def test_visit_payment_gate_over_http(client):
    """Confirming payment twice returns 409 the second time."""
    created = await client.post(
        "/api/v1/visits",
        json={"patient": MISSING_ID, "doctor": "doc-1", "payment_required": True},
    )
    assert created.status_code == 201
    visit_id = created.json()["data"]["id"]
    assert created.json()["data"]["status"] == "Pending Payment"
    
    first = await client.patch(f"/api/v1/visits/{visit_id}/payment-status", json={"payment_confirmed": True})
    assert first.status_code == 200
    assert first.json()["data"]["status"] == "Pending"
    
    second = await client.patch(f"/api/v1/visits/{visit_id}/payment-status", json={"payment_confirmed": True})
    assert second.status_code == 409
    assert second.json()["success"] is False
    
    vitals = await client.put(f"/api/v1/visits/{visit_id}/vitals", json={"temperature": 37.2, "blood_pressure": "120/80"})
    assert vitals.status_code == 200
    
    ended = await client.put(f"/api/v1/visits/{visit_id}/end", json={"notes": "Reviewed"})
    assert ended.json()["data"]["status"] == "Completed"
    
    active = await client.get("/api/v1/visits/active")
    assert active.json()["count"] == 0
    
    listing = await client.get("/api/v1/visits", params={"status": "Completed"})
    assert listing.json()["total"] == 1
    assert listing.json()["has_more"] is False


async def test_dispensing_over_http(client):
    """The dispensing list expands the patient."""
    patient = await client.post("/api/v1/patients", json={"name": "Baraka Said"})
    patient_id = patient.json()["data"]["id"]
    
    created = await client.post("/api/v1/dispensing", json={"patient": patient_id, "medicine": "ORS", "qty": 3})
    assert created.status_code == 201
    assert created.json()["data"]["patient"] == patient_id
    
    listing = await client.get("/api/v1/dispensing")
    assert listing.json()["data"][0]["patient"]["name"] == "Baraka Said"


async def test_requisition_issue_with_camel_case_keys(client):
    """issuedQty sent by the client is stored and returned."""
    created = await client.post(
        "/api/v1/requisitions",
        json={"from": "Ward 3", "items": [{"medicine": "ORS", "qty": 10}]},
    )
    requisition_id = created.json()["data"]["id"]
    
    updated = await client.put(
        f"/api/v1/requisitions/{requisition_id}",
        json={"items": [{"medicine": "ORS", "qty": 10, "status": "Issued", "issuedQty": 8}]},
    )
    
    assert updated.status_code == 200
    assert updated.json()["data"]["items"] == [{"medicine": "ORS", "qty": 10, "status": "Issued", "issuedQty": 8}]
    
    dropped = await client.put(f"/api/v1/requisitions/{requisition_id}", json={"items": []})
    assert dropped.status_code == 409
    assert dropped.json()["success"] is False


async def test_payment_confirmed_false_is_rejected(client):
    """paymentConfirmed false does not confirm the payment."""
    created = await client.post(
        "/api/v1/visits",
        json={"patient": MISSING_ID, "doctor": "doc-1", "paymentRequired": True},
    )
    visit_id = created.json()["data"]["id"]
    
    response = await client.patch(f"/api/v1/visits/{visit_id}/payment-status", json={"paymentConfirmed": False})
    assert response.status_code == 400
    
    visit = await client.get(f"/api/v1/visits/{visit_id}")
    assert visit.json()["data"]["status"] == "Pending Payment"
