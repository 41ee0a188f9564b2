from fastapi import APIRouter, Depends
from iot_fleet.exceptions import NotFound
from iot_fleet.schemas.sensor import ReadingResponse, ReadingCreate, ReadingUpdate
from iot_fleet.services import ReadingService
from iot_fleet.store import FleetStore, get_store
from typing import List

router = APIRouter(prefix="/api/v1/readings", tags=["readings"])

def get_reading_service(store: FleetStore = Depends(get_store)) -> ReadingService:
    return ReadingService(store)

@router.get("/", response_model=List[ReadingResponse])
def get_readings(service: ReadingService = Depends(get_reading_service)):
    """Get all readings"""
    return service.get_all()

@router.get("/{reading_id}", response_model=ReadingResponse)
def get_reading(reading_id: int, service: ReadingService = Depends(get_reading_service)):
    """Get reading by ID"""
    reading = service.get_by_id(reading_id)
    if not reading:
        raise NotFound("Reading not found", code="READING_NOT_FOUND")
    return reading

@router.post("/", response_model=ReadingResponse, status_code=201)
def create_reading(reading: ReadingCreate, service: ReadingService = Depends(get_reading_service)):
    """Record a reading for an existing sensor"""
    return service.create(reading.model_dump())

@router.patch("/{reading_id}", response_model=ReadingResponse)
def update_reading(reading_id: int, reading: ReadingUpdate, service: ReadingService = Depends(get_reading_service)):
    """Update the supplied fields of a reading"""
    updated = service.update(reading_id, reading.model_dump(exclude_unset=True))
    if not updated:
        raise NotFound("Reading not found", code="READING_NOT_FOUND")
    return updated

@router.delete("/{reading_id}")
def delete_reading(reading_id: int, service: ReadingService = Depends(get_reading_service)):
    """Delete a reading"""
    deleted = service.delete(reading_id)
    if deleted is None:
        raise NotFound("Reading not found", code="READING_NOT_FOUND")
    return {"message": "Reading deleted", "id": deleted}
