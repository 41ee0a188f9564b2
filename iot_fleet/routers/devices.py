from fastapi import APIRouter, Depends
from iot_fleet.exceptions import NotFound
from iot_fleet.schemas.device import DeviceResponse, DeviceCreate, DeviceUpdate
from iot_fleet.services import DeviceService
from iot_fleet.store import FleetStore, get_store
from typing import List

router = APIRouter(prefix="/api/v1/devices", tags=["devices"])

def get_device_service(store: FleetStore = Depends(get_store)) -> DeviceService:
    return DeviceService(store)

@router.get("/", response_model=List[DeviceResponse])
def get_devices(service: DeviceService = Depends(get_device_service)):
    """Get all devices"""
    return service.get_all()

@router.get("/{device_id}", response_model=DeviceResponse)
def get_device(device_id: int, service: DeviceService = Depends(get_device_service)):
    """Get device by ID"""
    device = service.get_by_id(device_id)
    if not device:
        raise NotFound("Device not found", code="DEVICE_NOT_FOUND")
    return device

@router.post("/", response_model=DeviceResponse, status_code=201)
def create_device(device: DeviceCreate, service: DeviceService = Depends(get_device_service)):
    """Register a device after checking serial number, owner, zone and sensors"""
    return service.create(device.model_dump())

@router.patch("/{device_id}", response_model=DeviceResponse)
def update_device(device_id: int, device: DeviceUpdate, service: DeviceService = Depends(get_device_service)):
    """Update the supplied fields of a device"""
    updated = service.update(device_id, device.model_dump(exclude_unset=True))
    if not updated:
        raise NotFound("Device not found", code="DEVICE_NOT_FOUND")
    return updated

@router.delete("/{device_id}")
def delete_device(device_id: int, service: DeviceService = Depends(get_device_service)):
    """Delete a device"""
    deleted = service.delete(device_id)
    if deleted is None:
        raise NotFound("Device not found", code="DEVICE_NOT_FOUND")
    return {"message": "Device deleted", "id": deleted}
