from sqlalchemy import Column, DateTime, Integer, Text, func

from call_tracker.core.database import Base


class CallRecord(Base):
    __tablename__ = "call_records"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    developer_name = Column(Text, nullable=False)
    client_name = Column(Text, nullable=False)
    call_date = Column(Text, nullable=False)
    duration_minutes = Column(Integer, nullable=False)
    topic_discussed = Column(Text, nullable=False)
    ticket_number = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.current_timestamp())
