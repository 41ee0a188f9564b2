from fastapi import APIRouter, Depends
from iot_fleet.exceptions import NotFound
from iot_fleet.schemas.zone import ZoneResponse, ZoneCreate, ZoneUpdate
from iot_fleet.services import ZoneService
from iot_fleet.store import FleetStore, get_store
from typing import List

router = APIRouter(prefix="/api/v1/zones", tags=["zones"])

def get_zone_service(store: FleetStore = Depends(get_store)) -> ZoneService:
    return ZoneService(store)

@router.get("/", response_model=List[ZoneResponse])
def get_zones(service: ZoneService = Depends(get_zone_service)):
    """Get all zones"""
    return service.get_all()

@router.get("/{zone_id}", response_model=ZoneResponse)
def get_zone(zone_id: int, service: ZoneService = Depends(get_zone_service)):
    """Get zone by ID"""
    zone = service.get_by_id(zone_id)
    if not zone:
        raise NotFound("Zone not found", code="ZONE_NOT_FOUND")
    return zone

@router.post("/", response_model=ZoneResponse, status_code=201)
def create_zone(zone: ZoneCreate, service: ZoneService = Depends(get_zone_service)):
    """Create new zone"""
    return service.create(zone.model_dump())

@router.patch("/{zone_id}", response_model=ZoneResponse)
def update_zone(zone_id: int, zone: ZoneUpdate, service: ZoneService = Depends(get_zone_service)):
    """Update the supplied fields of a zone"""
    updated = service.update(zone_id, zone.model_dump(exclude_unset=True))
    if not updated:
        raise NotFound("Zone not found", code="ZONE_NOT_FOUND")
    return updated

@router.delete("/{zone_id}")
def delete_zone(zone_id: int, service: ZoneService = Depends(get_zone_service)):
    """Delete an inactive zone with no devices"""
    deleted = service.delete(zone_id)
    if deleted is None:
        raise NotFound("Zone not found", code="ZONE_NOT_FOUND")
    return {"message": "Zone deleted", "id": deleted}
