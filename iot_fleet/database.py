import logging
from typing import Generator, List

from dotenv import load_dotenv
from fastapi import Request
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

load_dotenv()

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    database_url: str = "sqlite:///./iot_fleet.db"
    log_level: str = "INFO"
    cors_origins: str = "*"
    seed_demo_data: bool = False
    demo_admin_email: str = "admin@fleet.local"
    demo_admin_password: str = "change-me"
    debug: bool = False

    @property
    def allowed_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


Base = declarative_base()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Build the SQLAlchemy engine for the given URL.
    In-memory SQLite shares one connection across threads so every
    request sees the same database.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)

    return create_engine(database_url, echo=echo, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """FastAPI dependency: one session per request, always closed."""
    db = request.app.state.session_factory()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
