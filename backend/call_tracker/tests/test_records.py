import pytest
from conftest import make_record


def test_create_record_returns_id_and_message(client):
    response = client.post("/api/records", json=make_record(ticket_number="TCK-1"))
    assert response.status_code == 200
    data = response.json()
    assert isinstance(data["id"], int)
    assert data["message"] == "Record added successfully"

    records = client.get("/api/records").json()
    assert len(records) == 1
    record = records[0]
    assert record["id"] == data["id"]
    assert record["developer_name"] == "Alice"
    assert record["ticket_number"] == "TCK-1"
    assert record["created_at"] is not None


def test_ids_are_strictly_increasing(add_record):
    ids = [add_record(topic_discussed=f"Topic {i}") for i in range(5)]
    assert ids == sorted(ids)
    assert len(set(ids)) == len(ids)


def test_ids_are_not_reused_after_delete(client, add_record):
    first = add_record()
    second = add_record()
    client.delete(f"/api/records/{second}")
    third = add_record()
    assert third > second > first


def test_ticket_number_is_optional(client, add_record):
    add_record()
    add_record(ticket_number="")
    records = client.get("/api/records").json()
    assert [record["ticket_number"] for record in records] == [None, None]


@pytest.mark.parametrize(
    "field",
    ["developer_name", "client_name", "call_date", "duration_minutes", "topic_discussed"],
)
def test_create_rejects_missing_field(client, field):
    payload = make_record()
    del payload[field]
    response = client.post("/api/records", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}
    assert client.get("/api/records").json() == []


@pytest.mark.parametrize(
    "field, value",
    [
        ("developer_name", ""),
        ("client_name", ""),
        ("call_date", ""),
        ("duration_minutes", 0),
        ("topic_discussed", ""),
    ],
)
def test_create_rejects_empty_field(client, field, value):
    response = client.post("/api/records", json=make_record(**{field: value}))
    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields"
    assert client.get("/api/records").json() == []


def test_create_rejects_malformed_body(client):
    response = client.post("/api/records", json=make_record(duration_minutes="half an hour"))
    assert response.status_code == 400
    assert "duration_minutes" in response.json()["error"]


def test_date_and_duration_are_not_validated_beyond_presence(client):
    response = client.post(
        "/api/records", json=make_record(call_date="sometime", duration_minutes=-5)
    )
    assert response.status_code == 200


def test_list_filters_by_client_and_orders_newest_first(client, add_record):
    a = add_record()
    b = add_record(developer_name="Bob", call_date="2024-01-20", duration_minutes=45, topic_discussed="Follow-up")
    add_record(client_name="Globex", call_date="2024-02-01")

    records = client.get("/api/records", params={"client": "Acme"}).json()
    assert [record["id"] for record in records] == [b, a]


def test_same_day_records_ordered_by_id_descending(client, add_record):
    first = add_record(call_date="2024-03-01")
    second = add_record(call_date="2024-03-01")
    records = client.get("/api/records").json()
    assert [record["id"] for record in records] == [second, first]


def test_filters_combine_with_and(client, add_record):
    add_record(developer_name="Alice", client_name="Acme", call_date="2024-01-05")
    target = add_record(developer_name="Bob", client_name="Acme", call_date="2024-02-10")
    add_record(developer_name="Bob", client_name="Globex", call_date="2024-02-11")
    add_record(developer_name="Bob", client_name="Acme", call_date="2024-03-01")

    records = client.get(
        "/api/records", params={"client": "Acme", "developer": "Bob", "month": "2024-02"}
    ).json()
    assert [record["id"] for record in records] == [target]


def test_month_filter_matches_year_and_month(client, add_record):
    jan = add_record(call_date="2024-01-31")
    add_record(call_date="2023-01-15")
    add_record(call_date="2024-02-01")
    records = client.get("/api/records", params={"month": "2024-01"}).json()
    assert [record["id"] for record in records] == [jan]


def test_empty_filters_are_ignored(client, add_record):
    add_record()
    add_record(client_name="Globex")
    records = client.get("/api/records", params={"client": "", "developer": "", "month": ""}).json()
    assert len(records) == 2


def test_delete_removes_only_that_record(client, add_record):
    keep = add_record()
    gone = add_record(topic_discussed="Obsolete")

    response = client.delete(f"/api/records/{gone}")
    assert response.status_code == 200
    assert response.json() == {"message": "Record deleted successfully", "changes": 1}

    records = client.get("/api/records").json()
    assert [record["id"] for record in records] == [keep]


def test_delete_unknown_id_reports_zero_changes(client, add_record):
    add_record()
    response = client.delete("/api/records/9999")
    assert response.status_code == 200
    assert response.json()["changes"] == 0
    assert len(client.get("/api/records").json()) == 1


def test_delete_with_non_integer_id_is_client_error(client):
    response = client.delete("/api/records/abc")
    assert response.status_code == 400
    assert "error" in response.json()


def test_delete_id_beyond_integer_range_reports_zero_changes(client, add_record):
    add_record()
    response = client.delete("/api/records/99999999999999999999")
    assert response.status_code == 200
    assert response.json() == {"message": "Record deleted successfully", "changes": 0}
    assert len(client.get("/api/records").json()) == 1


def test_create_with_duration_beyond_integer_range_is_server_error(client):
    response = client.post("/api/records", json=make_record(duration_minutes=10**20))
    assert response.status_code == 500
    assert "error" in response.json()
    assert client.get("/api/records").json() == []


def test_numeric_text_fields_are_stored_as_text(client):
    response = client.post(
        "/api/records", json=make_record(developer_name=42, ticket_number=12345)
    )
    assert response.status_code == 200
    record = client.get("/api/records").json()[0]
    assert record["developer_name"] == "42"
    assert record["ticket_number"] == "12345"
