from typing import Iterable, Optional

from call_tracker.schemas import CallRecordOut

CSV_HEADERS = ["ID", "Date", "Developer", "Client", "Duration (min)", "Topic", "Ticket"]
CSV_FILENAME = "call-records.csv"


def quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def escape(value: Optional[object]) -> str:
    if value is None:
        return ""
    text = str(value)
    if any(char in text for char in (",", '"', "\n", "\r")):
        return quote(text)
    return text


def render_csv(records: Iterable[CallRecordOut]) -> str:
    """Render records as CSV, one line per record, newest first as given.

    The topic column is always quoted; other columns only when they contain
    a delimiter, quote or line break.
    """
    lines = [",".join(CSV_HEADERS)]
    for record in records:
        lines.append(
            ",".join(
                [
                    escape(record.id),
                    escape(record.call_date),
                    escape(record.developer_name),
                    escape(record.client_name),
                    escape(record.duration_minutes),
                    quote(record.topic_discussed),
                    escape(record.ticket_number or ""),
                ]
            )
        )
    return "\n".join(lines)
