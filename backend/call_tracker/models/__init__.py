from call_tracker.models.call_record import CallRecord

__all__ = ["CallRecord"]
