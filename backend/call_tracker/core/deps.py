from fastapi import Request

from call_tracker.services.record_store import RecordStore


def get_store(request: Request) -> RecordStore:
    return request.app.state.store
