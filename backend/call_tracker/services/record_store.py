import logging
from contextlib import contextmanager
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterator, List, Optional

from sqlalchemy import distinct, func, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from call_tracker.core.database import Base, create_session_factory, create_sqlite_engine
from call_tracker.errors import StorageError, ValidationError
from call_tracker.models import CallRecord
from call_tracker.schemas import CallRecordCreate, CallRecordOut, RecordFilters, RecordStats

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "developer_name",
    "client_name",
    "call_date",
    "duration_minutes",
    "topic_discussed",
)

SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1


def hours_from_minutes(total_minutes: Optional[int]) -> str:
    minutes = Decimal(total_minutes or 0)
    return str((minutes / 60).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def apply_filters(query: Query, filters: Optional[RecordFilters]) -> Query:
    if filters is None:
        return query
    if filters.client:
        query = query.filter(CallRecord.client_name == filters.client)
    if filters.developer:
        query = query.filter(CallRecord.developer_name == filters.developer)
    if filters.month:
        query = query.filter(func.strftime("%Y-%m", CallRecord.call_date) == filters.month)
    return query


class RecordStore:
    """Owns the call_records table and every statement run against it.

    One instance is built at process start and shared by all request
    handlers. Each operation opens its own session, so the store itself
    holds no per-request state. Database faults surface as
    :class:`StorageError` with the driver's message.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._session_factory = create_session_factory(engine)

    @classmethod
    def from_path(cls, db_path: str) -> "RecordStore":
        return cls(create_sqlite_engine(db_path))

    @contextmanager
    def _session(self) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
        except (SQLAlchemyError, OverflowError) as exc:
            db.rollback()
            message = str(getattr(exc, "orig", None) or exc)
            logger.error("Storage failure: %s", message)
            raise StorageError(message) from exc
        finally:
            db.close()

    def init_schema(self) -> None:
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as exc:
            message = str(getattr(exc, "orig", None) or exc)
            logger.error("Schema creation failed: %s", message)
            raise StorageError(message) from exc
        logger.info("Schema ready")

    def ping(self) -> None:
        with self._session() as db:
            db.execute(text("SELECT 1"))

    def close(self) -> None:
        self.engine.dispose()
        logger.info("Database connection closed")

    def list_records(self, filters: Optional[RecordFilters] = None) -> List[CallRecordOut]:
        with self._session() as db:
            query = apply_filters(db.query(CallRecord), filters)
            rows = query.order_by(CallRecord.call_date.desc(), CallRecord.id.desc()).all()
            return [CallRecordOut.model_validate(row) for row in rows]

    def create_record(self, payload: CallRecordCreate) -> int:
        missing = [name for name in REQUIRED_FIELDS if not getattr(payload, name)]
        if missing:
            logger.debug("Rejected record, missing %s", ", ".join(missing))
            raise ValidationError("Missing required fields")
        record = CallRecord(
            developer_name=payload.developer_name,
            client_name=payload.client_name,
            call_date=payload.call_date,
            duration_minutes=payload.duration_minutes,
            topic_discussed=payload.topic_discussed,
            ticket_number=payload.ticket_number or None,
        )
        with self._session() as db:
            db.add(record)
            db.flush()
            record_id = record.id
            db.commit()
        return record_id

    def delete_record(self, record_id: int) -> int:
        if not SQLITE_INTEGER_MIN <= record_id <= SQLITE_INTEGER_MAX:
            return 0
        with self._session() as db:
            changes = (
                db.query(CallRecord)
                .filter(CallRecord.id == record_id)
                .delete(synchronize_session=False)
            )
            db.commit()
        return changes

    def aggregate(self, filters: Optional[RecordFilters] = None) -> RecordStats:
        with self._session() as db:
            query = db.query(
                func.count(CallRecord.id),
                func.sum(CallRecord.duration_minutes),
                func.count(distinct(CallRecord.client_name)),
                func.count(distinct(CallRecord.developer_name)),
            )
            total_calls, total_minutes, unique_clients, unique_developers = apply_filters(
                query, filters
            ).one()
        return RecordStats(
            total_calls=total_calls,
            total_minutes=total_minutes,
            unique_clients=unique_clients,
            unique_developers=unique_developers,
            total_hours=hours_from_minutes(total_minutes),
        )

    def distinct_clients(self) -> List[str]:
        return self._distinct(CallRecord.client_name)

    def distinct_developers(self) -> List[str]:
        return self._distinct(CallRecord.developer_name)

    def _distinct(self, column) -> List[str]:
        with self._session() as db:
            rows = db.query(column).distinct().order_by(column).all()
            return [row[0] for row in rows]
