from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class RecordFilters(BaseModel):
    client: Optional[str] = None
    developer: Optional[str] = None
    month: Optional[str] = None


class CallRecordCreate(BaseModel):
    developer_name: Optional[str] = None
    client_name: Optional[str] = None
    call_date: Optional[str] = None
    duration_minutes: Optional[int] = None
    topic_discussed: Optional[str] = None
    ticket_number: Optional[str] = None

    class Config:
        coerce_numbers_to_str = True


class CallRecordOut(BaseModel):
    id: int
    developer_name: str
    client_name: str
    call_date: str
    duration_minutes: int
    topic_discussed: str
    ticket_number: Optional[str]
    created_at: Optional[datetime]

    class Config:
        from_attributes = True


class RecordCreated(BaseModel):
    id: int
    message: str = "Record added successfully"


class RecordDeleted(BaseModel):
    message: str = "Record deleted successfully"
    changes: int


class RecordStats(BaseModel):
    total_calls: int
    total_minutes: Optional[int]
    unique_clients: int
    unique_developers: int
    total_hours: str


class ErrorResponse(BaseModel):
    error: str
