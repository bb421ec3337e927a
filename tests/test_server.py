import base64

import pytest

pytest.importorskip("httpx")

from fastapi.testclient import TestClient

from linktrade.pipeline import TradeIntakePipeline
from linktrade.trade_queue import LinkTradeQueue
from server import create_app

from conftest import pk8_bytes


@pytest.fixture
def client(rules, decoder):
    queue = LinkTradeQueue(code_min=8180, code_max=8199, max_size=10)
    pipeline = TradeIntakePipeline(rules, decoder, queue, enforce_legality=True)
    return TestClient(create_app(pipeline, queue))


def test_submit_text_and_list(client):
    resp = client.post(
        "/api/trade/text",
        json={"content": "Pikachu\nTrainer: Ash", "requester_name": "ash", "code": 1234},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert body["code"] == 1234
    assert body["position"] == 1

    listing = client.get("/api/trade/list").json()
    assert listing["pending"] == "1. ash"


def test_random_code_is_reported(client):
    body = client.post(
        "/api/trade/text", json={"content": "Pikachu", "requester_name": "ash"}
    ).json()

    assert 8180 <= body["code"] <= 8199


def test_parse_error_response(client):
    resp = client.post(
        "/api/trade/text", json={"content": "Pikachu\nSecret Id: abc", "requester_name": "ash"}
    )

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "PARSE_DIAGNOSTIC"


def test_advisory_response_carries_entity(client, rules):
    rules.illegal_species.add(151)
    resp = client.post("/api/trade/text", json={"content": "Mew", "requester_name": "ash"})

    assert resp.status_code == 422
    body = resp.json()
    assert body["error"]["code"] == "LEGALITY_FAILURE"
    assert body["advisory"]["species"] == 151
    assert client.get("/api/trade/list").json()["pending"] == "Nobody in queue."


def test_submit_attachment(client):
    data = base64.b64encode(pk8_bytes(25)).decode()
    resp = client.post("/api/trade/attachment", json={"data": data, "requester_name": "misty"})

    assert resp.status_code == 200
    assert resp.json()["ok"] is True


def test_attachment_bad_base64(client):
    resp = client.post("/api/trade/attachment", json={"data": "***", "requester_name": "misty"})

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "BAD_ATTACHMENT_ENCODING"
