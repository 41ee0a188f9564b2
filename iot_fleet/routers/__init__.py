from .health import router as health_router
from .users import router as users_router
from .zones import router as zones_router
from .devices import router as devices_router
from .sensors import router as sensors_router
from .readings import router as readings_router

__all__ = [
    "health_router",
    "users_router",
    "zones_router",
    "devices_router",
    "sensors_router",
    "readings_router"
]
