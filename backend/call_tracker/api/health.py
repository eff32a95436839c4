from fastapi import APIRouter, Depends

from call_tracker.core.deps import get_store
from call_tracker.services.record_store import RecordStore

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/ready")
def ready(store: RecordStore = Depends(get_store)):
    store.ping()
    return {"status": "ready"}
