from typing import List, Optional

from fastapi import APIRouter, Depends

from call_tracker.core.deps import get_store
from call_tracker.schemas import (
    CallRecordCreate,
    CallRecordOut,
    RecordCreated,
    RecordDeleted,
    RecordFilters,
)
from call_tracker.services.record_store import RecordStore

router = APIRouter(prefix="/api/records", tags=["records"])


@router.get("", response_model=List[CallRecordOut])
def list_records(
    client: Optional[str] = None,
    developer: Optional[str] = None,
    month: Optional[str] = None,
    store: RecordStore = Depends(get_store),
):
    filters = RecordFilters(client=client, developer=developer, month=month)
    return store.list_records(filters)


@router.post("", response_model=RecordCreated)
def create_record(payload: CallRecordCreate, store: RecordStore = Depends(get_store)):
    record_id = store.create_record(payload)
    return RecordCreated(id=record_id)


@router.delete("/{record_id}", response_model=RecordDeleted)
def delete_record(record_id: int, store: RecordStore = Depends(get_store)):
    changes = store.delete_record(record_id)
    return RecordDeleted(changes=changes)
