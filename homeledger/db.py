from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from homeledger.config import settings
from homeledger.models import Base
from homeledger.models.user import User  # noqa: F401
from homeledger.models.mortgage import MortgageCalculationRecord  # noqa: F401
from homeledger.models.property import RealEstateProperty  # noqa: F401
from homeledger.repositories import (
    MortgageCalculationRepository,
    PropertyRepository,
    UserRepository,
)


def make_engine(url: str, **kwargs) -> Engine:
    if not url.startswith("sqlite"):
        return create_engine(url, **kwargs)

    kwargs.setdefault("connect_args", {"check_same_thread": False})
    engine = create_engine(url, **kwargs)

    # SQLite ignores FOR UPDATE; take the write lock when the transaction
    # starts instead, so read-modify-write updates are serialized.
    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")

    return engine


def make_sessionmaker(bind: Engine) -> sessionmaker:
    # Records are returned after their session closes, so keep them loaded.
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)


class Store:
    """Typed repository handles over one session factory."""

    def __init__(self, sessions: sessionmaker):
        self.users = UserRepository(sessions)
        self.calculations = MortgageCalculationRepository(sessions)
        self.properties = PropertyRepository(sessions)


engine = make_engine(settings.DATABASE_URL)
SessionLocal = make_sessionmaker(engine)
store = Store(SessionLocal)


def init_db(bind: Engine = engine):
    """
    Connect to the database and create tables if they don't exist.

    Raises SQLAlchemyError when the database is unreachable. For schema
    changes, use Alembic migrations instead:
        alembic revision --autogenerate -m "Description of change"
        alembic upgrade head
    """
    with bind.connect():
        pass
    Base.metadata.create_all(bind=bind)


def get_store() -> Store:
    return store
