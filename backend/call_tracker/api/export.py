from fastapi import APIRouter, Depends, Response

from call_tracker.core.deps import get_store
from call_tracker.services.export import CSV_FILENAME, render_csv
from call_tracker.services.record_store import RecordStore

router = APIRouter(prefix="/api/export", tags=["export"])


@router.get("/csv")
def export_csv(store: RecordStore = Depends(get_store)):
    records = store.list_records()
    return Response(
        content=render_csv(records),
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={CSV_FILENAME}"},
    )
