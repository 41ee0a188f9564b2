"""
Database initialization
Creates the tables and, on request, a small demo fleet
"""
import logging

from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker

from iot_fleet.database import Settings
from iot_fleet.models import Base
from iot_fleet.services import UserService, ZoneService, SensorService
from iot_fleet.store import FleetStore

logger = logging.getLogger(__name__)

def init_database(engine: Engine, session_factory: sessionmaker, settings: Settings):
    """Create all tables; seed demo data when enabled and the database is empty"""
    
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")

    if not settings.seed_demo_data:
        return
    
    db = session_factory()
    try:
        store = FleetStore(db)
        if store.users.count() > 0:
            logger.info("Database already initialized")
            return
        
        admin = UserService(store).create({
            "name": "Fleet Admin",
            "email": settings.demo_admin_email,
            "password": settings.demo_admin_password,
            "role": "admin",
        })
        zone = ZoneService(store).create({
            "name": "Main Hall",
            "description": "Default zone created at first start",
            "is_active": True,
        })
        sensor = SensorService(store).create({
            "type": "temperature",
            "unit": "°C",
            "model": "DHT22",
            "location": zone.name,
            "is_active": True,
        })
        
        logger.info(f"Seeded demo data: user {admin.email}, zone {zone.name!r}, sensor #{sensor.id}")
        
    except Exception as e:
        db.rollback()
        logger.error(f"Error initializing database: {e}")
        raise
    finally:
        db.close()
