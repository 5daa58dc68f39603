# cruise_booking/store.py
"""
Entity store: one repository per entity type, keyed by numeric id.

The services only talk to the :class:`Repository` interface, so the
in-memory store and the SQLAlchemy store are interchangeable. Both
allocate ids monotonically and never hand the same id out twice, and a
record is either written whole or not at all.
"""
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel

from cruise_booking import models, schemas
from cruise_booking.database import Base, make_engine, make_session_factory

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Repository(ABC, Generic[RecordT]):
    def __init__(self, model_cls: Type[RecordT]):
        self.model_cls = model_cls

    def build(self, record_id: int, fields: Dict[str, Any]) -> RecordT:
        # validate before touching storage so a bad record never lands half-written
        return self.validate({**fields, "id": record_id})

    def validate(self, data) -> RecordT:
        """Validate into a record; datetimes always come out as UTC-aware."""
        record = self.model_cls.model_validate(data)
        for name, value in record:
            if isinstance(value, datetime):
                setattr(record, name, as_utc(value))
        return record

    @abstractmethod
    def add(self, fields: Dict[str, Any]) -> RecordT:
        """Allocate the next id and store a new record built from ``fields``."""

    @abstractmethod
    def get(self, record_id: int) -> Optional[RecordT]:
        ...

    @abstractmethod
    def list(self) -> List[RecordT]:
        ...

    @abstractmethod
    def find(self, **criteria) -> List[RecordT]:
        ...

    @abstractmethod
    def replace(self, record: RecordT) -> Optional[RecordT]:
        """Overwrite the stored record with the same id; ``None`` if there is none."""

    @abstractmethod
    def delete(self, record_id: int) -> bool:
        ...


class MemoryRepository(Repository[RecordT]):
    def __init__(self, model_cls: Type[RecordT]):
        super().__init__(model_cls)
        self._records: Dict[int, RecordT] = {}
        self._next_id = 1

    def add(self, fields):
        record = self.build(self._next_id, fields)
        self._next_id += 1
        self._records[record.id] = record
        return record.model_copy(deep=True)

    def get(self, record_id):
        record = self._records.get(record_id)
        return record.model_copy(deep=True) if record is not None else None

    def list(self):
        return [record.model_copy(deep=True) for record in self._records.values()]

    def find(self, **criteria):
        return [
            record.model_copy(deep=True)
            for record in self._records.values()
            if all(getattr(record, key) == value for key, value in criteria.items())
        ]

    def replace(self, record):
        if record.id not in self._records:
            return None
        record = self.validate(record.model_dump())
        self._records[record.id] = record
        return record.model_copy(deep=True)

    def delete(self, record_id):
        return self._records.pop(record_id, None) is not None


class SqlRepository(Repository[RecordT]):
    def __init__(self, model_cls: Type[RecordT], orm_cls, session_factory):
        super().__init__(model_cls)
        self.orm_cls = orm_cls
        self._session_factory = session_factory

    def _to_record(self, row) -> RecordT:
        # SQLite hands DateTime columns back naive; they were written as UTC
        return self.validate(row)

    def add(self, fields):
        # the database allocates the id, 0 is only a placeholder for validation
        data = self.build(0, fields).model_dump(exclude={"id"})
        with self._session_factory() as db:
            row = self.orm_cls(**data)
            db.add(row)
            db.commit()
            db.refresh(row)
            return self._to_record(row)

    def get(self, record_id):
        with self._session_factory() as db:
            row = db.get(self.orm_cls, record_id)
            return self._to_record(row) if row is not None else None

    def list(self):
        with self._session_factory() as db:
            rows = db.query(self.orm_cls).order_by(self.orm_cls.id).all()
            return [self._to_record(row) for row in rows]

    def find(self, **criteria):
        with self._session_factory() as db:
            rows = db.query(self.orm_cls).filter_by(**criteria).order_by(self.orm_cls.id).all()
            return [self._to_record(row) for row in rows]

    def replace(self, record):
        data = self.validate(record.model_dump()).model_dump(exclude={"id"})
        with self._session_factory() as db:
            row = db.get(self.orm_cls, record.id)
            if row is None:
                return None
            for key, value in data.items():
                setattr(row, key, value)
            db.commit()
            db.refresh(row)
            return self._to_record(row)

    def delete(self, record_id):
        with self._session_factory() as db:
            row = db.get(self.orm_cls, record_id)
            if row is None:
                return False
            db.delete(row)
            db.commit()
            return True


class EntityStore:
    users: Repository[schemas.User]
    cruises: Repository[schemas.Cruise]
    bookings: Repository[schemas.Booking]


class MemoryStore(EntityStore):
    """Process-local, non-durable store."""

    def __init__(self):
        self.users = MemoryRepository(schemas.User)
        self.cruises = MemoryRepository(schemas.Cruise)
        self.bookings = MemoryRepository(schemas.Booking)


class SqlStore(EntityStore):
    """Durable store backed by SQLAlchemy; creates its tables on first use."""

    def __init__(self, engine):
        self.engine = engine
        Base.metadata.create_all(bind=engine)
        session_factory = make_session_factory(engine)
        self.users = SqlRepository(schemas.User, models.User, session_factory)
        self.cruises = SqlRepository(schemas.Cruise, models.Cruise, session_factory)
        self.bookings = SqlRepository(schemas.Booking, models.Booking, session_factory)


def build_store(settings) -> EntityStore:
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "memory":
        logger.info("Using in-memory entity store")
        return MemoryStore()
    if backend == "sql":
        logger.info("Using SQL entity store")
        return SqlStore(make_engine(settings.DATABASE_URL))
    raise ValueError(f"Unknown STORAGE_BACKEND {settings.STORAGE_BACKEND!r}")
