from typing import List, Optional

from fastapi import APIRouter, Depends

from call_tracker.core.deps import get_store
from call_tracker.schemas import RecordFilters, RecordStats
from call_tracker.services.record_store import RecordStore

router = APIRouter(prefix="/api", tags=["stats"])


@router.get("/stats", response_model=RecordStats)
def stats(
    client: Optional[str] = None,
    developer: Optional[str] = None,
    month: Optional[str] = None,
    store: RecordStore = Depends(get_store),
):
    filters = RecordFilters(client=client, developer=developer, month=month)
    return store.aggregate(filters)


@router.get("/clients", response_model=List[str])
def clients(store: RecordStore = Depends(get_store)):
    return store.distinct_clients()


@router.get("/developers", response_model=List[str])
def developers(store: RecordStore = Depends(get_store)):
    return store.distinct_developers()
