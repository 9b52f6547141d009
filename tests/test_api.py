import pytest

from passcheck.web.api import app


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("PASSCHECK_CONFIG", str(tmp_path / "config.json"))
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


def statuses(body):
    return {line["criterion"]: line["status"] for line in body["criteria"]}


def test_home(client):
    assert client.get("/").status_code == 200


def test_criteria_route(client):
    r = client.post("/criteria", json={"password": "Ab1!"})
    assert r.status_code == 200
    assert r.get_json() == {
        "min_length_no_space": False,
        "uppercase": True,
        "lowercase": True,
        "digit": True,
        "special_character": True,
    }


def test_validate_password_shortcut(client):
    r = client.post("/validate", json={"password": "alllowercase"})
    body = r.get_json()
    assert body["valid"] is False
    assert body["live"] is False
    assert statuses(body) == {
        "min_length_no_space": "met",
        "uppercase": "unmet",
        "lowercase": "met",
        "digit": "unmet",
        "special_character": "unmet",
    }


def test_validate_event_replay(client):
    events = [
        {"type": "text", "text": "Ab1!"},
        {"type": "validate"},
        {"type": "text", "text": "Abcdefg1"},
        {"type": "focus_lost"},
    ]
    body = client.post("/validate", json={"events": events}).get_json()
    assert body["valid"] is True
    assert body["live"] is False
    assert statuses(body)["special_character"] == "unmet"


def test_text_only_events_stay_live(client):
    body = client.post("/validate", json={"events": [{"type": "text", "text": "Ab1!"}]}).get_json()
    assert body["valid"] is None
    assert body["live"] is True
    assert statuses(body)["min_length_no_space"] == "unset"


def test_reset_event(client):
    events = [{"type": "text", "text": "abc"}, {"type": "focus_lost"}, {"type": "reset"}]
    body = client.post("/validate", json={"events": events}).get_json()
    assert body["live"] is False
    assert set(statuses(body).values()) == {"unset"}


@pytest.mark.parametrize("payload", [
    {},
    {"password": None},
    {"password": 123},
    {"events": "text"},
    {"events": [{"type": "typing"}]},
    {"events": [{"type": "text"}]},
])
def test_bad_payloads(client, payload):
    r = client.post("/validate", json=payload)
    assert r.status_code == 400
    assert "error" in r.get_json()


def test_non_object_body(client):
    r = client.post("/criteria", json=["Ab1!"])
    assert r.status_code == 400


def test_passing_focus_loss_is_strict(client):
    events = [
        {"type": "text", "text": "Abcdefg1!"},
        {"type": "focus_lost"},
        {"type": "text", "text": "abc"},
    ]
    body = client.post("/validate", json={"events": events}).get_json()
    assert body["valid"] is True
    assert body["live"] is False
    assert statuses(body)["uppercase"] == "unmet"
