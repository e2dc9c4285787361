# receipt_processor/tests/test_routes.py
import uuid
from receipt_processor.tests.samples import CORNER_MARKET, TARGET

def test_health(client):
    assert client.get("/health").json() == {"ok": True}

def test_process_and_get_points(client):
    res = client.post("/receipts/process", json=TARGET)
    assert res.status_code == 200
    rid = res.json()["id"]

    res = client.get(f"/receipts/{rid}/points")
    assert res.status_code == 200
    assert res.json() == {"points": 28}

def test_corner_market_points(client):
    rid = client.post("/receipts/process", json=CORNER_MARKET).json()["id"]
    assert client.get(f"/receipts/{rid}/points").json() == {"points": 109}

def test_empty_items_is_bad_request(client, store):
    res = client.post("/receipts/process", json={**TARGET, "items": []})
    assert res.status_code == 400
    assert res.json() == {"detail": "The receipt is invalid."}
    assert len(store) == 0

def test_missing_field_is_bad_request(client, store):
    body = {k: v for k, v in TARGET.items() if k != "retailer"}
    assert client.post("/receipts/process", json=body).status_code == 400
    assert len(store) == 0

def test_wrong_type_is_bad_request(client, store):
    res = client.post("/receipts/process", json={**TARGET, "total": 35.35})
    assert res.status_code == 400
    assert len(store) == 0

def test_undecodable_body_is_bad_request(client):
    res = client.post("/receipts/process", content=b"{not json",
                      headers={"Content-Type": "application/json"})
    assert res.status_code == 400

def test_unknown_id_is_not_found(client):
    res = client.get(f"/receipts/{uuid.uuid4()}/points")
    assert res.status_code == 404
    assert res.json() == {"detail": "No receipt found for that ID."}

def test_oversized_total_is_accepted(client):
    res = client.post("/receipts/process", json={**TARGET, "total": "1e100"})
    assert res.status_code == 200
    rid = res.json()["id"]
    # retailer 6, two pairs 10, two descriptions 6, odd day 6
    assert client.get(f"/receipts/{rid}/points").json() == {"points": 28}

def test_snake_case_keys_are_not_accepted(client, store):
    body = {
        "retailer": "Target",
        "purchase_date": "2022-01-01",
        "purchase_time": "13:01",
        "items": [{"short_description": "Pepsi", "price": "1.10"}],
        "total": "1.10",
    }
    assert client.post("/receipts/process", json=body).status_code == 400
    assert len(store) == 0
