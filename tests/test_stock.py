"""Test stock items and item receiving."""

import asyncio

import pytest

from hospital.features.stock.models import StockItem
from hospital.features.stock.schemas import CreateStockItemRequest, UpdateStockItemRequest
from hospital.features.stock.service import StockService
from hospital.shared.exceptions import ConflictException, NotFoundException


MISSING_ID = "65f0c0ffee0000000000beef"


async def test_receive_creates_missing_item(database):
    """Receiving an unknown medicine creates it with the received quantity."""
    item = await StockService.receive("Ibuprofen 200mg", 30)
    
    assert item.id is not None
    assert item.name == "Ibuprofen 200mg"
    assert item.quantity == 30


async def test_receive_increments_existing_item(database):
    """Paracetamol: 0 -> receive 50 -> 50 -> receive 20 -> 70."""
    created = await StockService.create(CreateStockItemRequest(name="Paracetamol", quantity=0))
    
    item = await StockService.receive("Paracetamol", 50)
    assert item.id == created.id
    assert item.quantity == 50
    
    item = await StockService.receive("Paracetamol", 20)
    assert item.quantity == 70
    assert await StockItem.find(StockItem.name == "Paracetamol").count() == 1


async def test_concurrent_receives_do_not_lose_updates(database):
    """Two receipts of the same medicine at once add up."""
    await asyncio.gather(
        StockService.receive("Amoxicillin 250mg", 30),
        StockService.receive("Amoxicillin 250mg", 45),
    )
    
    items = await StockItem.find(StockItem.name == "Amoxicillin 250mg").to_list()
    assert len(items) == 1
    assert items[0].quantity == 75


async def test_receive_matches_name_exactly(database):
    """Names differing only in case are separate items."""
    await StockService.receive("Paracetamol", 10)
    await StockService.receive("paracetamol", 5)
    
    items = await StockService.list()
    assert sorted((i.name, i.quantity) for i in items) == [("Paracetamol", 10), ("paracetamol", 5)]


async def test_update_stock_item(database):
    """Updating merges the sent fields and bumps the version."""
    item = await StockService.create(CreateStockItemRequest(name="Metformin 500mg", quantity=10))
    
    updated = await StockService.update(str(item.id), UpdateStockItemRequest(quantity=25))
    
    assert updated.name == "Metformin 500mg"
    assert updated.quantity == 25
    assert updated.version == item.version + 1


async def test_update_with_stale_version_is_rejected(database):
    """A version that no longer matches the stored one gives a conflict."""
    item = await StockService.create(CreateStockItemRequest(name="Cetirizine", quantity=10))
    await StockService.update(str(item.id), UpdateStockItemRequest(quantity=11))
    
    with pytest.raises(ConflictException):
        await StockService.update(str(item.id), UpdateStockItemRequest(quantity=12, version=item.version))
    
    stored = await StockService.get(str(item.id))
    assert stored.quantity == 11


async def test_update_and_delete_unknown_item(database):
    """Unknown and malformed ids are not found."""
    with pytest.raises(NotFoundException):
        await StockService.update(MISSING_ID, UpdateStockItemRequest(quantity=1))
    with pytest.raises(NotFoundException):
        await StockService.delete(MISSING_ID)
    with pytest.raises(NotFoundException):
        await StockService.delete("not-an-id")


async def test_delete_stock_item(database):
    """Deleted items are gone from the list."""
    item = await StockService.create(CreateStockItemRequest(name="Omeprazole", quantity=3))
    
    await StockService.delete(str(item.id))
    
    assert await StockService.list() == []
