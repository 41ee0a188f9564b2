from fastapi import APIRouter, Depends
from iot_fleet.exceptions import NotFound
from iot_fleet.schemas.sensor import SensorResponse, SensorCreate, SensorUpdate
from iot_fleet.services import SensorService
from iot_fleet.store import FleetStore, get_store
from typing import List

router = APIRouter(prefix="/api/v1/sensors", tags=["sensors"])

def get_sensor_service(store: FleetStore = Depends(get_store)) -> SensorService:
    return SensorService(store)

@router.get("/", response_model=List[SensorResponse])
def get_sensors(service: SensorService = Depends(get_sensor_service)):
    """Get all sensors"""
    return service.get_all()

@router.get("/{sensor_id}", response_model=SensorResponse)
def get_sensor(sensor_id: int, service: SensorService = Depends(get_sensor_service)):
    """Get sensor by ID"""
    sensor = service.get_by_id(sensor_id)
    if not sensor:
        raise NotFound("Sensor not found", code="SENSOR_NOT_FOUND")
    return sensor

@router.post("/", response_model=SensorResponse, status_code=201)
def create_sensor(sensor: SensorCreate, service: SensorService = Depends(get_sensor_service)):
    """Create new sensor"""
    return service.create(sensor.model_dump())

@router.patch("/{sensor_id}", response_model=SensorResponse)
def update_sensor(sensor_id: int, sensor: SensorUpdate, service: SensorService = Depends(get_sensor_service)):
    """Update the supplied fields of a sensor"""
    updated = service.update(sensor_id, sensor.model_dump(exclude_unset=True))
    if not updated:
        raise NotFound("Sensor not found", code="SENSOR_NOT_FOUND")
    return updated

@router.delete("/{sensor_id}")
def delete_sensor(sensor_id: int, service: SensorService = Depends(get_sensor_service)):
    """Delete an inactive sensor with no devices or readings"""
    deleted = service.delete(sensor_id)
    if deleted is None:
        raise NotFound("Sensor not found", code="SENSOR_NOT_FOUND")
    return {"message": "Sensor deleted", "id": deleted}
